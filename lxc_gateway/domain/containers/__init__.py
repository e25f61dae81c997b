# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import ContainerStatus, PowerAction
from .exceptions import InvalidPowerStateError, UpstreamFailureError
from .ports import ControlPlanePort, NotificationPort

__all__ = [
    "ContainerStatus",
    "ControlPlanePort",
    "InvalidPowerStateError",
    "NotificationPort",
    "PowerAction",
    "UpstreamFailureError",
]
