from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from flask import Flask
from flask.testing import FlaskClient

from lxc_gateway.app import create_app
from lxc_gateway.infrastructure.container import Container
from lxc_gateway.shared.config import AppConfig


class FakeControlPlane:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str | None]] = []
        self.fail_with: Exception | None = None
        self.containers: dict[str, Any] = {"data": [{"vmid": "101", "status": "running"}]}
        self.status: dict[str, Any] = {
            "cpus": 2,
            "cpu": 0.031,
            "mem": 268435456,
            "maxmem": 1073741824,
            "disk": 1048576,
            "maxdisk": 8589934592,
            "netin": 1200,
            "netout": 3400,
        }
        self.node: dict[str, Any] | None = {"uptime": 1234}

    def _record(self, name: str, container_id: str | None = None) -> None:
        self.calls.append((name, container_id))
        if self.fail_with is not None:
            raise self.fail_with

    def list_containers(self) -> dict[str, Any]:
        self._record("list")
        return self.containers

    def get_status(self, container_id: str) -> dict[str, Any]:
        self._record("status", container_id)
        return self.status

    def start(self, container_id: str) -> None:
        self._record("start", container_id)

    def stop(self, container_id: str) -> None:
        self._record("stop", container_id)

    def node_status(self) -> dict[str, Any] | None:
        self._record("node_status")
        return self.node


class RecordingNotifier:
    def __init__(self) -> None:
        self.events: list[tuple[str, str, str | None]] = []

    def notify_success(self, endpoint: str) -> None:
        self.events.append(("success", endpoint, None))

    def notify_failure(self, error: BaseException | str, endpoint: str) -> None:
        self.events.append(("failure", endpoint, str(error)))


@pytest.fixture()
def users_file(tmp_path: Path) -> Path:
    return tmp_path / "users.json"


@pytest.fixture()
def config(users_file: Path) -> AppConfig:
    return AppConfig(
        APP_ENV="test",
        SECRET_KEY="test-secret-key-with-enough-entropy",
        USERS_FILE=users_file,
        TOKEN_TTL_SECONDS=3600,
        WEBHOOK_URL="",
    )


@pytest.fixture()
def control_plane() -> FakeControlPlane:
    return FakeControlPlane()


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def container(
    config: AppConfig, control_plane: FakeControlPlane, notifier: RecordingNotifier
) -> Container:
    container = Container(config)
    container.control_plane = control_plane
    container.notifier = notifier
    return container


@pytest.fixture()
def app(config: AppConfig, container: Container) -> Flask:
    return create_app(config, container)


@pytest.fixture()
def client(app: Flask) -> Iterator[FlaskClient]:
    with app.test_client() as client:
        yield client


@pytest.fixture()
def login(client: FlaskClient):
    def _login(username: str = "alice", password: str = "pw1") -> str:
        signup = client.post("/signup", json={"username": username, "password": password})
        assert signup.status_code == 200
        response = client.post("/login", json={"username": username, "password": password})
        assert response.status_code == 200
        return response.get_json()["token"]

    return _login
