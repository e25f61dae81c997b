# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, Protocol


class ControlPlanePort(Protocol):
    def list_containers(self) -> dict[str, Any]: ...
    def get_status(self, container_id: str) -> dict[str, Any]: ...
    def start(self, container_id: str) -> None: ...
    def stop(self, container_id: str) -> None: ...
    def node_status(self) -> dict[str, Any] | None: ...


class NotificationPort(Protocol):
    def notify_success(self, endpoint: str) -> None: ...
    def notify_failure(self, error: BaseException | str, endpoint: str) -> None: ...
