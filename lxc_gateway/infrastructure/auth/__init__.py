# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .guard import TOKEN_COOKIE, AccessGuard, current_claims
from .tokens import JwtTokenService

__all__ = ["TOKEN_COOKIE", "AccessGuard", "JwtTokenService", "current_claims"]
