# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import CredentialRecord, IssuedToken, SessionClaims
from .exceptions import (
    InvalidCredentialsError,
    InvalidTokenError,
    UnauthorizedError,
    UsernameTakenError,
)
from .repositories import CredentialStore, PasswordHasher, TokenService

__all__ = [
    "CredentialRecord",
    "CredentialStore",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "IssuedToken",
    "PasswordHasher",
    "SessionClaims",
    "TokenService",
    "UnauthorizedError",
    "UsernameTakenError",
]
