from __future__ import annotations

import asyncio
from pathlib import Path

from flask.testing import FlaskClient

from lxc_gateway.app import create_app
from lxc_gateway.infrastructure.container import Container
from lxc_gateway.shared.config import AppConfig


def test_health_reports_empty_store(client: FlaskClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json() == {"ok": True, "credential_store": "empty"}


def test_health_after_signup(client: FlaskClient, users_file: Path) -> None:
    client.post("/signup", json={"username": "alice", "password": "pw1"})

    assert client.get("/health").get_json()["credential_store"] == "ok"
    assert users_file.exists()


def test_metrics_exposed(client: FlaskClient) -> None:
    response = client.get("/metrics")

    assert response.status_code == 200
    assert response.content_type.startswith("text/plain")


def test_metrics_can_be_disabled(config: AppConfig, container) -> None:
    config.observability.metrics_enabled = False
    app = create_app(config, container)

    assert app.test_client().get("/metrics").status_code == 404


def test_request_id_is_echoed(client: FlaskClient) -> None:
    response = client.get("/health", headers={"X-Request-ID": "req-42"})

    assert response.headers["X-Request-ID"] == "req-42"


def test_unknown_route_is_json(client: FlaskClient) -> None:
    response = client.get("/no-such-route")

    assert response.status_code == 404
    assert response.is_json
    assert response.get_json()["code"] == "not_found"


def test_wrong_method_is_json(client: FlaskClient) -> None:
    response = client.get("/signup")

    assert response.status_code == 405
    assert response.get_json()["code"] == "method_not_allowed"
    assert "POST" in response.headers["Allow"]


def test_container_close_releases_upstream_resources(config: AppConfig) -> None:
    container = Container(config)
    control_plane = container.control_plane
    notifier = container.notifier
    notifier._loop.submit(asyncio.sleep(0)).result(timeout=2)

    container.close()

    assert control_plane._client.is_closed
    assert not notifier._loop._thread.is_alive()


def test_container_close_without_built_resources(config: AppConfig) -> None:
    container = Container(config)

    container.close()

    assert "control_plane" not in container.__dict__
