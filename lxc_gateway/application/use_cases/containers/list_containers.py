# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from .base import ControlPlaneUseCase


class ListContainersUseCase(ControlPlaneUseCase):
    def execute(self) -> dict[str, Any]:
        return self._forward("/lxc", "Failed to fetch data", self._control_plane.list_containers)
