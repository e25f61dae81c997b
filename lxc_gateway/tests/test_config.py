from __future__ import annotations

import pytest

from lxc_gateway.shared.config import AppConfig


def test_sections_read_their_own_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SERVICE_NAME", "gateway-test")
    monkeypatch.setenv("PROXMOX_NODE", "pve7")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example")
    monkeypatch.setenv("METRICS_ENABLED", "no")

    config = AppConfig(APP_ENV="test", SECRET_KEY="test-secret-key-with-enough-entropy")

    assert config.observability.service_name == "gateway-test"
    assert config.observability.metrics_enabled is False
    assert config.proxmox.node_url.endswith("/api2/json/nodes/pve7")
    assert config.security.allowed_origins == ["https://a.example", "https://b.example"]


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PORT", "TOKEN_TTL_SECONDS", "PROXMOX_VERIFY_SSL", "SERVICE_NAME"):
        monkeypatch.delenv(name, raising=False)

    config = AppConfig(APP_ENV="test", SECRET_KEY="test-secret-key-with-enough-entropy")

    assert config.port == 35300
    assert config.token_ttl_seconds == 3600
    assert config.proxmox.verify_ssl is False
    assert config.observability.service_name == "lxc-gateway"


def test_production_refuses_development_secret() -> None:
    with pytest.raises(SystemExit):
        AppConfig(APP_ENV="production", SECRET_KEY="dev")
