"""Tests for environment-driven settings and gateway selection."""

import pytest

from paygate.api.deps import build_gateway
from paygate.core.config import Settings
from paygate.integrations.gateway_fake import GatewayFake
from paygate.integrations.paystack import PaystackClient

pytestmark = pytest.mark.unit


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.port == 3000
    assert settings.paystack_base_url == "https://api.paystack.co"
    assert settings.gateway_timeout_seconds > 0
    assert settings.webhook_signature_headers[0] == "x-paystack-signature"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("PAYSTACK_SECRET_KEY", "sk_test_env")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("FRONTEND_URL", "https://shop.example")

    settings = Settings(_env_file=None)

    assert settings.paystack_secret_key == "sk_test_env"
    assert settings.port == 8080
    assert settings.cors_origins == ["https://shop.example"]


def test_cors_origins_include_extra_allowed_origins():
    settings = Settings(_env_file=None, allowed_origins=["https://admin.example"])

    assert settings.cors_origins == ["http://localhost:5173", "https://admin.example"]


def test_build_gateway_paystack_uses_explicit_config():
    settings = Settings(
        _env_file=None,
        paystack_secret_key="sk_test_cfg",
        paystack_base_url="https://api.paystack.test",
        gateway_timeout_seconds=3.5,
    )

    gateway = build_gateway(settings)

    assert isinstance(gateway, PaystackClient)
    assert gateway.config.secret_key == "sk_test_cfg"
    assert gateway.config.base_url == "https://api.paystack.test"
    assert gateway.config.timeout_seconds == 3.5


def test_build_gateway_fake_mode():
    assert isinstance(build_gateway(Settings(_env_file=None, gateway_mode="fake")), GatewayFake)


def test_build_gateway_unknown_mode_raises():
    with pytest.raises(ValueError, match="Unknown gateway_mode"):
        build_gateway(Settings(_env_file=None, gateway_mode="stripe"))
