# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Flat-file credential store."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path

from lxc_gateway.domain.exceptions import InvariantViolation
from lxc_gateway.domain.users.entities import CredentialRecord
from lxc_gateway.domain.users.repositories import CredentialStore
from lxc_gateway.shared.logging import logger
from lxc_gateway.utils.fs import read_json_list_of_dicts, write_json_atomic
from lxc_gateway.utils.locks import path_lock_for

# On-disk key for the hash; files written by earlier deployments use it too.
_HASH_KEY = "password"


class JsonCredentialStore(CredentialStore):
    """Keeps every credential record in one JSON array, rewritten on each save."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._lock = path_lock_for(path)

    def load(self) -> list[CredentialRecord]:
        records: list[CredentialRecord] = []
        for raw in read_json_list_of_dicts(self._path):
            username = raw.get("username")
            password_hash = raw.get(_HASH_KEY)
            if not isinstance(username, str) or not isinstance(password_hash, str):
                continue
            try:
                records.append(CredentialRecord(username=username, password_hash=password_hash))
            except InvariantViolation:
                logger.warning(f"store: skipping malformed record in {self._path}")
        return records

    def save(self, records: Sequence[CredentialRecord]) -> None:
        payload = [{"username": r.username, _HASH_KEY: r.password_hash} for r in records]
        with self._lock:
            write_json_atomic(self._path, payload, mode=0o600)
        logger.debug(f"store: wrote {len(payload)} records to {self._path}")

    @contextmanager
    def locked(self) -> Iterator[None]:
        with self._lock:
            yield


__all__ = ["JsonCredentialStore"]
