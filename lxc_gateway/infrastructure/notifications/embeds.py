# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

COLOR_RED = 16711680
COLOR_GREEN = 51968


def _timestamp(now: datetime | None) -> str:
    return (now or datetime.now(UTC)).isoformat()


def error_text(error: BaseException | str | None) -> str:
    text = str(error) if error is not None else ""
    return text or "Unknown error"


def success_embed(endpoint: str, *, now: datetime | None = None) -> dict[str, Any]:
    return {
        "title": "API Healthy! 🟢",
        "description": f"Request given to: {endpoint} has worked!",
        "color": COLOR_GREEN,
        "fields": [{"name": "🟢 Online", "value": "Works fine!"}],
        "timestamp": _timestamp(now),
    }


def failure_embed(
    error: BaseException | str | None, endpoint: str, *, now: datetime | None = None
) -> dict[str, Any]:
    return {
        "title": "API Error",
        "description": f"Error occurred at endpoint: {endpoint}",
        "color": COLOR_RED,
        "fields": [{"name": "Error Message", "value": error_text(error)}],
        "timestamp": _timestamp(now),
    }
