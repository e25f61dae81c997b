# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pathlib import Path

from flask import Blueprint, Response, jsonify
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from lxc_gateway.infrastructure.health import check_credential_store


class MiscController:
    def __init__(self, *, store_path: Path, metrics_enabled: bool = True) -> None:
        self._store_path = store_path
        self._metrics_enabled = metrics_enabled

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        if self._metrics_enabled:
            bp.add_url_rule("/metrics", view_func=self.metrics, methods=["GET"])
        return bp

    def health(self):
        status: dict[str, object] = {"ok": True}
        try:
            status["credential_store"] = check_credential_store(self._store_path)
        except Exception as exc:  # pragma: no cover
            status["ok"] = False
            status["credential_store"] = f"error: {exc}"
        return jsonify(status), 200 if status["ok"] else 503

    def metrics(self):
        return Response(generate_latest(), content_type=CONTENT_TYPE_LATEST)
