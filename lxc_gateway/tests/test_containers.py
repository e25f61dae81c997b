from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from flask.testing import FlaskClient

from lxc_gateway.application.use_cases.containers import (
    ChangePowerStateUseCase,
    GetContainerStatusUseCase,
    GetNodeStatusUseCase,
    ListContainersUseCase,
)
from lxc_gateway.domain.containers.entities import ContainerStatus, PowerAction
from lxc_gateway.domain.containers.exceptions import (
    InvalidPowerStateError,
    UpstreamFailureError,
)


def test_container_status_reshapes_upstream_fields() -> None:
    status = ContainerStatus.from_upstream(
        {"cpus": 4, "cpu": 0.5, "mem": 1, "maxmem": 2, "disk": 3, "maxdisk": 4, "netin": 5, "netout": 6}
    )

    assert status.to_dict() == {
        "vcpu": 4,
        "cpuUsage": 0.5,
        "memoryUsage": 1,
        "maxMemory": 2,
        "diskUsage": 3,
        "maxDisk": 4,
        "network": 5,
        "maxNetwork": 6,
    }


def test_container_status_missing_fields_are_null() -> None:
    assert ContainerStatus.from_upstream({"cpus": 1}).to_dict()["maxNetwork"] is None


def test_power_action_parse() -> None:
    assert PowerAction.parse("start") is PowerAction.START
    assert PowerAction.STOP.past_tense == "stopped"
    with pytest.raises(InvalidPowerStateError):
        PowerAction.parse("reboot")


def test_use_case_success_notifies(control_plane, notifier) -> None:

    body = ListContainersUseCase(control_plane=control_plane, notifier=notifier).execute()

    assert body == control_plane.containers
    assert notifier.events == [("success", "/lxc", None)]


def test_use_case_failure_hides_detail_from_caller(control_plane, notifier) -> None:
    control_plane.fail_with = RuntimeError("connection refused by 10.0.0.5")
    use_case = GetContainerStatusUseCase(control_plane=control_plane, notifier=notifier)

    with pytest.raises(UpstreamFailureError) as err:
        use_case.execute("101")

    assert err.value.to_dict()["error"] == "Failed to fetch container specifications"
    assert "10.0.0.5" not in str(err.value.to_dict())
    assert notifier.events == [("failure", "/lxc/101", "connection refused by 10.0.0.5")]


def test_power_use_case_messages(control_plane, notifier) -> None:
    use_case = ChangePowerStateUseCase(control_plane=control_plane, notifier=notifier)

    message = use_case.execute("101", PowerAction.STOP, endpoint="/lxc/stop/101")

    assert message == "Successfully stopped container 101"
    assert control_plane.calls == [("stop", "101")]

    control_plane.fail_with = RuntimeError("boom")
    with pytest.raises(UpstreamFailureError) as err:
        use_case.execute("101", PowerAction.START, endpoint="/lxc/start/101")
    assert err.value.message == "Failed to start container 101"


def test_node_status_online_and_offline(control_plane) -> None:
    use_case = GetNodeStatusUseCase(control_plane=control_plane, notifier=MagicMock())

    assert use_case.execute() == "online"
    control_plane.node = {}
    assert use_case.execute() == "online"
    control_plane.node = None
    assert use_case.execute() == "offline"


def test_use_case_reports_endpoint_to_notifier(control_plane) -> None:
    notifier = MagicMock()

    body = ListContainersUseCase(control_plane=control_plane, notifier=notifier).execute()

    assert body == control_plane.containers
    notifier.notify_success.assert_called_once_with("/lxc")


def test_container_routes_require_token(client: FlaskClient, control_plane) -> None:
    assert client.get("/lxc").status_code == 401
    assert client.get("/lxc/101").status_code == 401
    assert client.post("/lxc/start/101").status_code == 401
    assert client.get("/node/status").status_code == 401
    assert control_plane.calls == []


def test_list_and_status_routes(
    client: FlaskClient, login, control_plane, notifier
) -> None:
    login()

    listing = client.get("/lxc")
    assert listing.status_code == 200
    assert listing.get_json() == control_plane.containers

    status = client.get("/lxc/101")
    assert status.status_code == 200
    assert status.get_json() == {
        "vcpu": 2,
        "cpuUsage": 0.031,
        "memoryUsage": 268435456,
        "maxMemory": 1073741824,
        "diskUsage": 1048576,
        "maxDisk": 8589934592,
        "network": 1200,
        "maxNetwork": 3400,
    }
    assert notifier.events == [("success", "/lxc", None), ("success", "/lxc/101", None)]


def test_start_stop_and_power_routes(
    client: FlaskClient, login, control_plane, notifier
) -> None:
    login()

    assert client.post("/lxc/start/101").get_json() == {
        "message": "Successfully started container 101"
    }
    assert client.post("/lxc/stop/101").get_json() == {
        "message": "Successfully stopped container 101"
    }
    assert client.post("/lxc/power/102/start").get_json() == {
        "message": "Successfully started container 102"
    }

    assert control_plane.calls == [("start", "101"), ("stop", "101"), ("start", "102")]
    assert [endpoint for _, endpoint, _ in notifier.events] == [
        "/lxc/start/101",
        "/lxc/stop/101",
        "/lxc/power/102/start",
    ]


def test_power_route_rejects_unknown_state(
    client: FlaskClient, login, control_plane
) -> None:
    login()

    response = client.post("/lxc/power/101/reboot")

    assert response.status_code == 400
    assert response.get_json()["error"] == 'Invalid state. Must be "start" or "stop".'
    assert control_plane.calls == []


@pytest.mark.parametrize(
    ("method", "path", "message"),
    [
        ("get", "/lxc", "Failed to fetch data"),
        ("get", "/lxc/101", "Failed to fetch container specifications"),
        ("post", "/lxc/start/101", "Failed to start container 101"),
        ("post", "/lxc/stop/101", "Failed to stop container 101"),
        ("post", "/lxc/power/101/stop", "Failed to stop container 101"),
        ("get", "/node/status", "Failed to fetch node status"),
    ],
)
def test_upstream_failures_map_to_500(
    client: FlaskClient,
    login,
    control_plane,
    notifier,
    method: str,
    path: str,
    message: str,
) -> None:
    login()
    control_plane.fail_with = RuntimeError("upstream exploded")

    response = getattr(client, method)(path)

    assert response.status_code == 500
    assert response.get_json()["error"] == message
    assert notifier.events == [("failure", path, "upstream exploded")]


def test_node_status_route(client: FlaskClient, login) -> None:
    login()

    response = client.get("/node/status")

    assert response.status_code == 200
    assert response.get_json() == {"status": "online"}


@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("get", "/lxc/abc"),
        ("get", "/lxc/.."),
        ("post", "/lxc/start/.."),
        ("post", "/lxc/stop/.."),
        ("post", "/lxc/stop/101x"),
        ("post", "/lxc/power/../stop"),
    ],
)
def test_non_numeric_container_ids_never_reach_upstream(
    client: FlaskClient, login, control_plane, method: str, path: str
) -> None:
    login()

    response = getattr(client, method)(path)

    assert response.status_code == 404
    assert control_plane.calls == []
