# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from contextlib import AbstractContextManager
from datetime import datetime
from typing import Protocol

from .entities import CredentialRecord, IssuedToken, SessionClaims


class CredentialStore(Protocol):
    def load(self) -> list[CredentialRecord]: ...
    def save(self, records: Sequence[CredentialRecord]) -> None: ...
    def locked(self) -> AbstractContextManager[None]: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenService(Protocol):
    def issue(self, username: str, *, now: datetime | None = None) -> IssuedToken: ...
    def decode(self, token: str) -> SessionClaims: ...
