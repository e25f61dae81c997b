# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .settings import (
    AppConfig,
    NotificationConfig,
    ObservabilityConfig,
    ProxmoxConfig,
    ResilienceConfig,
    SecurityConfig,
    load_config,
)

__all__ = [
    "AppConfig",
    "NotificationConfig",
    "ObservabilityConfig",
    "ProxmoxConfig",
    "ResilienceConfig",
    "SecurityConfig",
    "load_config",
]
