# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import asyncio
import threading
from concurrent.futures import Future
from typing import Any, Coroutine

from lxc_gateway.shared.logging import logger


class BackgroundEventLoop:
    """Runs an asyncio loop on a daemon thread so request threads never await."""

    def __init__(self, name: str = "LxcGatewayEventLoop") -> None:
        self._loop: asyncio.AbstractEventLoop = asyncio.new_event_loop()
        self._thread: threading.Thread = threading.Thread(
            target=self._run_loop,
            daemon=True,
            name=name,
        )
        self._started = False
        self._lock = threading.Lock()

    def _run_loop(self) -> None:
        asyncio.set_event_loop(self._loop)
        thread_name = threading.current_thread().name
        logger.debug(f"BackgroundEventLoop: loop runner start thread={thread_name}")

        try:
            self._loop.run_forever()
        except Exception:
            logger.exception(f"BackgroundEventLoop: loop error thread={thread_name}")
        finally:
            logger.debug(f"BackgroundEventLoop: loop runner stop thread={thread_name}")

    def _ensure_started(self) -> None:
        with self._lock:
            if self._started:
                return
            self._thread.start()
            self._started = True
            logger.debug(f"BackgroundEventLoop: thread started name={self._thread.name}")

    def submit(self, coro: Coroutine[Any, Any, Any]) -> Future:
        """Schedule ``coro`` and return immediately."""
        self._ensure_started()
        return asyncio.run_coroutine_threadsafe(coro, self._loop)

    def stop(self) -> None:
        if not self._started:
            return

        logger.debug(f"BackgroundEventLoop: stopping thread={self._thread.name}")
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(timeout=2.0)
        self._started = False
