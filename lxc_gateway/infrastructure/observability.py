# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections.abc import Iterator
from contextlib import contextmanager

from prometheus_client import Counter, Histogram

UPSTREAM_LATENCY = Histogram(
    "lxc_gateway_upstream_latency_seconds",
    "Control-plane call latency",
    labelnames=("operation",),
    buckets=(0.05, 0.1, 0.25, 0.5, 1, 2, 5, 10),
)
UPSTREAM_COUNTER = Counter(
    "lxc_gateway_upstream_requests_total",
    "Number of control-plane calls",
    labelnames=("operation", "outcome"),
)
NOTIFICATION_COUNTER = Counter(
    "lxc_gateway_notifications_total",
    "Number of webhook notifications attempted",
    labelnames=("kind", "outcome"),
)


@contextmanager
def track_upstream(operation: str, *, enabled: bool = True) -> Iterator[None]:
    if not enabled:
        yield
        return

    start = time.perf_counter()
    outcome = "error"
    try:
        yield
        outcome = "ok"
    finally:
        UPSTREAM_LATENCY.labels(operation=operation).observe(time.perf_counter() - start)
        UPSTREAM_COUNTER.labels(operation=operation, outcome=outcome).inc()


__all__ = [
    "NOTIFICATION_COUNTER",
    "UPSTREAM_COUNTER",
    "UPSTREAM_LATENCY",
    "track_upstream",
]
