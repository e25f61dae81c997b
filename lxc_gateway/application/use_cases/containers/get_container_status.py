# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from lxc_gateway.domain.containers.entities import ContainerStatus

from .base import ControlPlaneUseCase


class GetContainerStatusUseCase(ControlPlaneUseCase):
    def execute(self, container_id: str) -> ContainerStatus:
        def _call() -> ContainerStatus:
            return ContainerStatus.from_upstream(self._control_plane.get_status(container_id))

        return self._forward(
            f"/lxc/{container_id}",
            "Failed to fetch container specifications",
            _call,
        )
