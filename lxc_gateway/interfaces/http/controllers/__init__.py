# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .auth_controller import AuthController
from .containers_controller import ContainersController
from .misc_controller import MiscController

__all__ = ["AuthController", "ContainersController", "MiscController"]
