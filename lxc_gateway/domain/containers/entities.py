# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from lxc_gateway.domain.containers.exceptions import InvalidPowerStateError


class PowerAction(str, Enum):
    START = "start"
    STOP = "stop"

    @classmethod
    def parse(cls, value: str) -> PowerAction:
        try:
            return cls(value)
        except ValueError as exc:
            raise InvalidPowerStateError(context={"state": value}) from exc

    @property
    def past_tense(self) -> str:
        return "started" if self is PowerAction.START else "stopped"


@dataclass(slots=True, frozen=True)
class ContainerStatus:
    """Resource snapshot of one container, reshaped from the node's status payload.

    The upstream ``netin``/``netout`` counters are reported as ``network`` and
    ``maxNetwork`` respectively, which is what existing clients expect.
    """

    vcpu: int | None
    cpu_usage: float | None
    memory_usage: int | None
    max_memory: int | None
    disk_usage: int | None
    max_disk: int | None
    network_in: int | None
    network_out: int | None

    @classmethod
    def from_upstream(cls, data: Mapping[str, Any]) -> ContainerStatus:
        return cls(
            vcpu=data.get("cpus"),
            cpu_usage=data.get("cpu"),
            memory_usage=data.get("mem"),
            max_memory=data.get("maxmem"),
            disk_usage=data.get("disk"),
            max_disk=data.get("maxdisk"),
            network_in=data.get("netin"),
            network_out=data.get("netout"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "vcpu": self.vcpu,
            "cpuUsage": self.cpu_usage,
            "memoryUsage": self.memory_usage,
            "maxMemory": self.max_memory,
            "diskUsage": self.disk_usage,
            "maxDisk": self.max_disk,
            "network": self.network_in,
            "maxNetwork": self.network_out,
        }
