# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from lxc_gateway.application.services.password_hashing import WerkzeugPasswordHasher
from lxc_gateway.application.use_cases.containers import (
    ChangePowerStateUseCase,
    GetContainerStatusUseCase,
    GetNodeStatusUseCase,
    ListContainersUseCase,
)
from lxc_gateway.application.use_cases.users import LogInUseCase, SignUpUseCase
from lxc_gateway.domain.containers.ports import ControlPlanePort, NotificationPort
from lxc_gateway.infrastructure.auth import AccessGuard, JwtTokenService
from lxc_gateway.infrastructure.notifications import WebhookNotifier
from lxc_gateway.infrastructure.proxmox import ProxmoxControlPlane
from lxc_gateway.infrastructure.storage import JsonCredentialStore
from lxc_gateway.interfaces.http.controllers.auth_controller import AuthController
from lxc_gateway.interfaces.http.controllers.containers_controller import (
    ContainersController,
)
from lxc_gateway.interfaces.http.controllers.misc_controller import MiscController
from lxc_gateway.shared.config import AppConfig
from lxc_gateway.shared.logging import logger


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def close(self) -> None:
        """Release the upstream client and notifier loop, if they were built."""
        for name in ("control_plane", "notifier"):
            resource = self.__dict__.get(name)
            close = getattr(resource, "close", None)
            if close is not None:
                close()
                logger.debug(f"container: closed {name}")

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def credential_store(self) -> JsonCredentialStore:
        return JsonCredentialStore(self.config.users_file)

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(
            self.config.secret_key,
            ttl_seconds=self.config.token_ttl_seconds,
        )

    @cached_property
    def access_guard(self) -> AccessGuard:
        return AccessGuard(self.token_service)

    @cached_property
    def sign_up_use_case(self) -> SignUpUseCase:
        return SignUpUseCase(store=self.credential_store, password_hasher=self.password_hasher)

    @cached_property
    def log_in_use_case(self) -> LogInUseCase:
        return LogInUseCase(
            store=self.credential_store,
            password_hasher=self.password_hasher,
            tokens=self.token_service,
            dummy_hash=self.password_hasher.dummy_hash,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            sign_up_use_case=self.sign_up_use_case,
            log_in_use_case=self.log_in_use_case,
            guard=self.access_guard,
            security=self.config.security,
        )

    # Control plane

    @cached_property
    def control_plane(self) -> ControlPlanePort:
        return ProxmoxControlPlane(
            self.config.proxmox,
            metrics_enabled=self.config.observability.metrics_enabled,
        )

    @cached_property
    def notifier(self) -> NotificationPort:
        return WebhookNotifier(self.config.notifications, self.config.resilience)

    @cached_property
    def list_containers_use_case(self) -> ListContainersUseCase:
        return ListContainersUseCase(control_plane=self.control_plane, notifier=self.notifier)

    @cached_property
    def get_container_status_use_case(self) -> GetContainerStatusUseCase:
        return GetContainerStatusUseCase(
            control_plane=self.control_plane, notifier=self.notifier
        )

    @cached_property
    def change_power_state_use_case(self) -> ChangePowerStateUseCase:
        return ChangePowerStateUseCase(control_plane=self.control_plane, notifier=self.notifier)

    @cached_property
    def get_node_status_use_case(self) -> GetNodeStatusUseCase:
        return GetNodeStatusUseCase(control_plane=self.control_plane, notifier=self.notifier)

    @cached_property
    def containers_controller(self) -> ContainersController:
        return ContainersController(
            list_containers=self.list_containers_use_case,
            get_container_status=self.get_container_status_use_case,
            change_power_state=self.change_power_state_use_case,
            get_node_status=self.get_node_status_use_case,
            guard=self.access_guard,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(
            store_path=self.config.users_file,
            metrics_enabled=self.config.observability.metrics_enabled,
        )
