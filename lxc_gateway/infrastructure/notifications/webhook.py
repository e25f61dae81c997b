# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from concurrent.futures import Future
from typing import Any

import httpx

from lxc_gateway.domain.containers.ports import NotificationPort
from lxc_gateway.infrastructure.event_loop import BackgroundEventLoop
from lxc_gateway.infrastructure.observability import NOTIFICATION_COUNTER
from lxc_gateway.infrastructure.resilience import CircuitBreaker, resilient_call
from lxc_gateway.shared.config.settings import NotificationConfig, ResilienceConfig
from lxc_gateway.shared.logging import logger

from .embeds import failure_embed, success_embed


class WebhookNotifier(NotificationPort):
    """Posts outcome embeds to a chat webhook without blocking the caller.

    Delivery happens on a background event loop. Delivery failures are logged
    and dropped; they never reach the request that triggered them.
    """

    def __init__(
        self,
        config: NotificationConfig,
        resilience: ResilienceConfig,
        *,
        loop: BackgroundEventLoop | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = config.webhook_url
        self._timeout = config.timeout
        self._resilience = resilience
        self._transport = transport
        self._loop = loop or BackgroundEventLoop(name="WebhookNotifierLoop")
        self._breaker = CircuitBreaker(
            failure_threshold=resilience.circuit_fail_threshold,
            reset_timeout=resilience.circuit_reset_timeout,
        )

    @property
    def enabled(self) -> bool:
        return bool(self._url)

    def notify_success(self, endpoint: str) -> None:
        self._dispatch("success", success_embed(endpoint))

    def notify_failure(self, error: BaseException | str, endpoint: str) -> None:
        self._dispatch("failure", failure_embed(error, endpoint))

    def close(self) -> None:
        self._loop.stop()

    def _dispatch(self, kind: str, embed: dict[str, Any]) -> Future | None:
        if not self.enabled:
            logger.debug(f"notify: webhook not configured, dropping {kind} event")
            return None
        try:
            return self._loop.submit(self._deliver(kind, embed))
        except Exception:
            logger.exception(f"notify: could not schedule {kind} event")
            return None

    async def _deliver(self, kind: str, embed: dict[str, Any]) -> None:
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as http:

            async def _post() -> httpx.Response:
                response = await http.post(self._url, json={"embeds": [embed]})
                response.raise_for_status()
                return response

            try:
                await resilient_call(
                    _post,
                    config=self._resilience,
                    breaker=self._breaker,
                    timeout=self._timeout,
                )
            except Exception as exc:
                NOTIFICATION_COUNTER.labels(kind=kind, outcome="error").inc()
                logger.error(
                    f"notify: failed to send {kind} message to webhook: "
                    f"{type(exc).__name__}: {exc}"
                )
                return

        NOTIFICATION_COUNTER.labels(kind=kind, outcome="ok").inc()
        logger.debug(f"notify: {kind} message delivered")


__all__ = ["WebhookNotifier"]
