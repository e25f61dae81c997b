# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from lxc_gateway.shared.errors.base import DomainError


class UpstreamFailureError(DomainError):
    default_code = "upstream_failure"
    default_status = HTTPStatus.INTERNAL_SERVER_ERROR
    default_message = "Failed to fetch data"


class InvalidPowerStateError(DomainError):
    default_code = "invalid_state"
    default_message = 'Invalid state. Must be "start" or "stop".'
