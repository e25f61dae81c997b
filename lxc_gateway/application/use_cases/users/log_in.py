# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from lxc_gateway.domain.users.entities import IssuedToken
from lxc_gateway.domain.users.exceptions import InvalidCredentialsError
from lxc_gateway.domain.users.repositories import (
    CredentialStore,
    PasswordHasher,
    TokenService,
)


class LogInUseCase:
    def __init__(
        self,
        *,
        store: CredentialStore,
        password_hasher: PasswordHasher,
        tokens: TokenService,
        dummy_hash: str | None = None,
    ) -> None:
        self._store = store
        self._password_hasher = password_hasher
        self._tokens = tokens
        self._dummy_hash = dummy_hash

    def execute(self, username: str, password: str) -> IssuedToken:
        record = next(
            (item for item in self._store.load() if item.username == username),
            None,
        )

        if record is None:
            # Unknown users still pay for one verification.
            if self._dummy_hash:
                self._password_hasher.verify(password, self._dummy_hash)
            raise InvalidCredentialsError()

        if not self._password_hasher.verify(password, record.password_hash):
            raise InvalidCredentialsError()

        return self._tokens.issue(username)
