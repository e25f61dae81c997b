# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .exceptions import DomainModelError, InvariantViolation
from .containers import ContainerStatus, PowerAction
from .users import CredentialRecord, IssuedToken, SessionClaims

__all__ = [
    "ContainerStatus",
    "CredentialRecord",
    "DomainModelError",
    "InvariantViolation",
    "IssuedToken",
    "PowerAction",
    "SessionClaims",
]
