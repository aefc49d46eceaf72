"""Shared test fixtures for all test groups."""

import json

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from paygate.core.config import Settings
from paygate.domain.signature import compute_signature
from paygate.integrations.gateway_fake import GatewayFake
from paygate.main import create_app

TEST_SECRET = "sk_test_paygate_secret"


@pytest.fixture
def settings() -> Settings:
    """Isolated settings: no .env, fake gateway, known secret."""
    return Settings(
        _env_file=None,
        paystack_secret_key=TEST_SECRET,
        gateway_mode="fake",
        default_callback_url="http://localhost:5173/callback.html",
    )


@pytest.fixture
def gateway_fake() -> GatewayFake:
    """Fresh GatewayFake with happy_path scenario (default)."""
    return GatewayFake(scenario="happy_path")


@pytest.fixture
def app(settings: Settings, gateway_fake: GatewayFake) -> FastAPI:
    app = create_app(settings)
    app.state.gateway = gateway_fake
    return app


@pytest.fixture
def api_client(app: FastAPI):
    """FastAPI test client; unhandled errors come back as 500 responses."""
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


@pytest.fixture
def sign():
    """Serialize a webhook payload (raw bytes pass through) and sign it with the test secret."""

    def _sign(payload: dict | bytes, secret: str = TEST_SECRET) -> tuple[bytes, str]:
        body = payload if isinstance(payload, bytes) else json.dumps(payload).encode("utf-8")
        return body, compute_signature(body, secret)

    return _sign


@pytest.fixture
def charge_event():
    """Factory for minimal Paystack-style webhook payloads."""

    def _make(
        event: str = "charge.success",
        reference: str = "ref_001",
        amount: int = 5000,
        email: str = "a@b.com",
        status: str = "success",
    ) -> dict:
        return {
            "event": event,
            "data": {
                "reference": reference,
                "amount": amount,
                "status": status,
                "customer": {"email": email},
            },
        }

    return _make
