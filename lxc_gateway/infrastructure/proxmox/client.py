# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""HTTP adapter for a Proxmox VE node's LXC endpoints."""

from __future__ import annotations

import re
from typing import Any

import httpx

from lxc_gateway.domain.containers.ports import ControlPlanePort
from lxc_gateway.infrastructure.observability import track_upstream
from lxc_gateway.shared.config.settings import ProxmoxConfig
from lxc_gateway.shared.logging import logger

_VMID = re.compile(r"[0-9]+")


class ControlPlaneError(RuntimeError):
    """Raised for any failed control-plane call; the message carries the detail."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ProxmoxControlPlane(ControlPlanePort):
    def __init__(
        self,
        config: ProxmoxConfig,
        *,
        transport: httpx.BaseTransport | None = None,
        metrics_enabled: bool = True,
    ) -> None:
        self._metrics_enabled = metrics_enabled
        self._client = httpx.Client(
            base_url=config.node_url,
            headers={
                "Authorization": config.authorization,
                "Content-Type": "application/x-www-form-urlencoded",
            },
            verify=config.verify_ssl,
            timeout=config.timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def _request(self, operation: str, method: str, path: str) -> dict[str, Any]:
        with track_upstream(operation, enabled=self._metrics_enabled):
            try:
                response = self._client.request(method, path)
            except httpx.HTTPError as exc:
                raise ControlPlaneError(f"{method} {path}: {type(exc).__name__}: {exc}") from exc

            if response.is_error:
                raise ControlPlaneError(
                    f"{method} {path}: upstream returned {response.status_code}",
                    status_code=response.status_code,
                )

            try:
                body = response.json()
            except ValueError as exc:
                raise ControlPlaneError(f"{method} {path}: response is not JSON") from exc

            if not isinstance(body, dict):
                raise ControlPlaneError(f"{method} {path}: unexpected response shape")

        logger.debug(f"proxmox: {method} {path} -> {response.status_code}")
        return body

    @staticmethod
    def _status_path(container_id: str, action: str) -> str:
        if not _VMID.fullmatch(container_id):
            raise ControlPlaneError(f"invalid container id {container_id!r}")
        return f"/lxc/{container_id}/status/{action}"

    def list_containers(self) -> dict[str, Any]:
        return self._request("list", "GET", "/lxc")

    def get_status(self, container_id: str) -> dict[str, Any]:
        body = self._request("status", "GET", self._status_path(container_id, "current"))
        data = body.get("data")
        if not isinstance(data, dict):
            raise ControlPlaneError(f"status of {container_id}: missing data object")
        return data

    def start(self, container_id: str) -> None:
        self._request("start", "POST", self._status_path(container_id, "start"))

    def stop(self, container_id: str) -> None:
        self._request("stop", "POST", self._status_path(container_id, "stop"))

    def node_status(self) -> dict[str, Any] | None:
        data = self._request("node_status", "GET", "/status").get("data")
        return data if isinstance(data, dict) else None


__all__ = ["ControlPlaneError", "ProxmoxControlPlane"]
