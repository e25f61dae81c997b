# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from time import perf_counter

from flask import Blueprint, jsonify

from lxc_gateway.application.use_cases.containers import (
    ChangePowerStateUseCase,
    GetContainerStatusUseCase,
    GetNodeStatusUseCase,
    ListContainersUseCase,
)
from lxc_gateway.domain.containers.entities import PowerAction
from lxc_gateway.infrastructure.auth import AccessGuard, current_claims
from lxc_gateway.interfaces.http.dto.auth import MessageDTO
from lxc_gateway.interfaces.http.dto.containers import NodeStatusDTO
from lxc_gateway.shared.logging import logger


class ContainersController:
    def __init__(
        self,
        *,
        list_containers: ListContainersUseCase,
        get_container_status: GetContainerStatusUseCase,
        change_power_state: ChangePowerStateUseCase,
        get_node_status: GetNodeStatusUseCase,
        guard: AccessGuard,
    ) -> None:
        self._list_containers = list_containers
        self._get_container_status = get_container_status
        self._change_power_state = change_power_state
        self._get_node_status = get_node_status
        self._guard = guard

    def as_blueprint(self) -> Blueprint:
        protect = self._guard.protect
        bp = Blueprint("containers", __name__)
        bp.add_url_rule("/lxc", view_func=protect(self.list_containers), methods=["GET"])
        bp.add_url_rule(
            "/lxc/<int:container_id>", view_func=protect(self.container_status), methods=["GET"]
        )
        bp.add_url_rule(
            "/lxc/start/<int:container_id>", view_func=protect(self.start), methods=["POST"]
        )
        bp.add_url_rule(
            "/lxc/stop/<int:container_id>", view_func=protect(self.stop), methods=["POST"]
        )
        bp.add_url_rule(
            "/lxc/power/<int:container_id>/<state>", view_func=protect(self.power), methods=["POST"]
        )
        bp.add_url_rule("/node/status", view_func=protect(self.node_status), methods=["GET"])
        return bp

    def list_containers(self):
        t0 = perf_counter()
        body = self._list_containers.execute()
        dt = (perf_counter() - t0) * 1000
        logger.info(f"lxc.list: ok (user={current_claims().username}, dt_ms={dt:.0f})")
        return jsonify(body)

    def container_status(self, container_id: int):
        status = self._get_container_status.execute(str(container_id))
        logger.info(f"lxc.status: ok (user={current_claims().username}, id={container_id})")
        return jsonify(status.to_dict())

    def start(self, container_id: int):
        return self._power(container_id, PowerAction.START, f"/lxc/start/{container_id}")

    def stop(self, container_id: int):
        return self._power(container_id, PowerAction.STOP, f"/lxc/stop/{container_id}")

    def power(self, container_id: int, state: str):
        action = PowerAction.parse(state)
        return self._power(container_id, action, f"/lxc/power/{container_id}/{state}")

    def node_status(self):
        status = self._get_node_status.execute()
        return jsonify(NodeStatusDTO(status=status).model_dump())

    def _power(self, container_id: int, action: PowerAction, endpoint: str):
        message = self._change_power_state.execute(
            str(container_id), action, endpoint=endpoint
        )
        logger.info(
            f"lxc.power: ok (user={current_claims().username}, id={container_id}, "
            f"action={action.value})"
        )
        return jsonify(MessageDTO(message=message).model_dump())
