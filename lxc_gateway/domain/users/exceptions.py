# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from lxc_gateway.shared.errors.base import DomainError


class UsernameTakenError(DomainError):
    default_code = "username_taken"
    default_message = "Username already exists"


class InvalidCredentialsError(DomainError):
    default_code = "invalid_credentials"
    default_message = "Invalid username or password"


class UnauthorizedError(DomainError):
    default_code = "unauthorized"
    default_status = HTTPStatus.UNAUTHORIZED
    default_message = "Access denied. No token provided."


class InvalidTokenError(DomainError):
    default_code = "invalid_token"
    default_message = "Invalid token."
