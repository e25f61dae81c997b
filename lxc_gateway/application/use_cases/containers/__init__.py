from .change_power_state import ChangePowerStateUseCase
from .get_container_status import GetContainerStatusUseCase
from .get_node_status import GetNodeStatusUseCase
from .list_containers import ListContainersUseCase

__all__ = [
    "ChangePowerStateUseCase",
    "GetContainerStatusUseCase",
    "GetNodeStatusUseCase",
    "ListContainersUseCase",
]
