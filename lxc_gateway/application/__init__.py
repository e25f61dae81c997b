# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.containers import (
    ChangePowerStateUseCase,
    GetContainerStatusUseCase,
    GetNodeStatusUseCase,
    ListContainersUseCase,
)
from .use_cases.users import LogInUseCase, SignUpUseCase

__all__ = [
    "ChangePowerStateUseCase",
    "GetContainerStatusUseCase",
    "GetNodeStatusUseCase",
    "ListContainersUseCase",
    "LogInUseCase",
    "SignUpUseCase",
]
