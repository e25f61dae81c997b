# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from .base import ControlPlaneUseCase


class GetNodeStatusUseCase(ControlPlaneUseCase):
    def execute(self) -> str:
        data = self._forward(
            "/node/status", "Failed to fetch node status", self._control_plane.node_status
        )
        return "online" if data is not None else "offline"
