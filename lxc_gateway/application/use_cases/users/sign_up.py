# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterable

from lxc_gateway.domain.users.entities import CredentialRecord
from lxc_gateway.domain.users.exceptions import UsernameTakenError
from lxc_gateway.domain.users.repositories import CredentialStore, PasswordHasher
from lxc_gateway.shared.logging import logger


def _is_taken(records: Iterable[CredentialRecord], username: str) -> bool:
    return any(record.username == username for record in records)


class SignUpUseCase:
    def __init__(self, *, store: CredentialStore, password_hasher: PasswordHasher) -> None:
        self._store = store
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> None:
        if _is_taken(self._store.load(), username):
            raise UsernameTakenError()

        hashed = self._password_hasher.hash(password)
        record = CredentialRecord(username=username, password_hash=hashed)

        # Hashing stays outside the lock; uniqueness is re-checked under it.
        with self._store.locked():
            records = self._store.load()
            if _is_taken(records, username):
                raise UsernameTakenError()
            records.append(record)
            self._store.save(records)

        logger.info(f"auth.signup: stored credential username={username} total={len(records)}")
