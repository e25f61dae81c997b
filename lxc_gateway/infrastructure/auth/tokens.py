# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed session tokens (JWT, HS256)."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt

from lxc_gateway.domain.users.entities import IssuedToken, SessionClaims
from lxc_gateway.domain.users.exceptions import InvalidTokenError
from lxc_gateway.domain.users.repositories import TokenService
from lxc_gateway.shared.logging import logger

DEFAULT_ALGORITHM = "HS256"


class JwtTokenService(TokenService):
    def __init__(
        self,
        secret_key: str,
        *,
        ttl_seconds: int = 3600,
        algorithm: str = DEFAULT_ALGORITHM,
    ) -> None:
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._secret_key = secret_key
        self._ttl = timedelta(seconds=ttl_seconds)
        self._algorithm = algorithm

    def issue(self, username: str, *, now: datetime | None = None) -> IssuedToken:
        issued_at = (now or datetime.now(UTC)).replace(microsecond=0)
        expires_at = issued_at + self._ttl
        payload = {
            "username": username,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        logger.info(f"auth.token: issued username={username} exp={expires_at.isoformat()}")
        return IssuedToken(
            token=token,
            username=username,
            issued_at=issued_at,
            expires_at=expires_at,
        )

    def decode(self, token: str) -> SessionClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat", "username"]},
            )
        except jwt.ExpiredSignatureError as exc:
            logger.warning("auth.token: rejected expired token")
            raise InvalidTokenError() from exc
        except jwt.InvalidTokenError as exc:
            logger.warning(f"auth.token: rejected token ({type(exc).__name__})")
            raise InvalidTokenError() from exc

        username = payload.get("username")
        if not isinstance(username, str) or not username:
            raise InvalidTokenError()

        return SessionClaims(
            username=username,
            issued_at=datetime.fromtimestamp(payload["iat"], tz=UTC),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=UTC),
        )


__all__ = ["DEFAULT_ALGORITHM", "JwtTokenService"]
