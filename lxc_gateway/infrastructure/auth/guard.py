# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

from flask import Request, g, request

from lxc_gateway.domain.users.entities import SessionClaims
from lxc_gateway.domain.users.exceptions import UnauthorizedError
from lxc_gateway.domain.users.repositories import TokenService
from lxc_gateway.shared.logging import logger

TOKEN_COOKIE = "token"

F = TypeVar("F", bound=Callable[..., Any])


class AccessGuard:
    def __init__(self, tokens: TokenService, *, cookie_name: str = TOKEN_COOKIE) -> None:
        self._tokens = tokens
        self._cookie_name = cookie_name

    def authorize(self, req: Request) -> SessionClaims:
        token = req.cookies.get(self._cookie_name, "")
        if not token:
            logger.warning(
                f"No token cookie on {req.method} {req.path} "
                f"from {req.headers.get('X-Forwarded-For', req.remote_addr)}"
            )
            raise UnauthorizedError()

        claims = self._tokens.decode(token)
        logger.debug(f"Auth OK: user={claims.username} {req.method} {req.path}")
        return claims

    def protect(self, f: F) -> F:
        @wraps(f)
        def inner(*a, **kw):
            claims = self.authorize(request)
            g.claims = claims
            g.username = claims.username
            return f(*a, **kw)

        return cast(F, inner)


def current_claims() -> SessionClaims:
    """Return the claims the guard attached to the current request."""
    return cast(SessionClaims, g.claims)
