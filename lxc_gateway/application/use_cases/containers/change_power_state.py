# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from lxc_gateway.domain.containers.entities import PowerAction
from lxc_gateway.shared.logging import logger

from .base import ControlPlaneUseCase


class ChangePowerStateUseCase(ControlPlaneUseCase):
    def execute(self, container_id: str, action: PowerAction, *, endpoint: str) -> str:
        logger.info(f"proxy: attempting to {action.value} container {container_id}")

        def _call() -> None:
            if action is PowerAction.START:
                self._control_plane.start(container_id)
            else:
                self._control_plane.stop(container_id)

        self._forward(endpoint, f"Failed to {action.value} container {container_id}", _call)

        message = f"Successfully {action.past_tense} container {container_id}"
        logger.info(f"proxy: {message}")
        return message
