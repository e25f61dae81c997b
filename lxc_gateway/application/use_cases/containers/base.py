# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from lxc_gateway.domain.containers.exceptions import UpstreamFailureError
from lxc_gateway.domain.containers.ports import ControlPlanePort, NotificationPort
from lxc_gateway.shared.logging import logger

T = TypeVar("T")


class ControlPlaneUseCase:
    """Runs one control-plane call and reports its outcome to the notifier.

    Failures of any kind surface as ``UpstreamFailureError`` carrying the
    caller's fixed message; the upstream detail goes to the log and the
    notifier only.
    """

    def __init__(self, *, control_plane: ControlPlanePort, notifier: NotificationPort) -> None:
        self._control_plane = control_plane
        self._notifier = notifier

    def _forward(self, endpoint: str, failure_message: str, call: Callable[[], T]) -> T:
        try:
            result = call()
        except Exception as exc:
            logger.error(f"proxy: {endpoint} failed: {type(exc).__name__}: {exc}")
            self._notifier.notify_failure(exc, endpoint)
            raise UpstreamFailureError(
                message=failure_message, context={"endpoint": endpoint}
            ) from exc

        self._notifier.notify_success(endpoint)
        return result
