"""FastAPI dependencies.

Long-lived collaborators (settings, gateway, transaction store) live on
app.state and are created in main.create_app(); tests pass their own
Settings to create_app() or swap collaborators via dependency_overrides.
"""

from fastapi import Depends, Request

from paygate.core.config import Settings
from paygate.integrations.gateway import GatewayConfig, PaymentGateway
from paygate.integrations.gateway_fake import GatewayFake
from paygate.integrations.paystack import PaystackClient
from paygate.services.event_intake import EventIntake
from paygate.services.transaction_store import TransactionStore


def build_gateway(settings: Settings) -> PaymentGateway:
    """Construct the configured PaymentGateway implementation."""
    if settings.gateway_mode == "fake":
        return GatewayFake()
    if settings.gateway_mode != "paystack":
        raise ValueError(f"Unknown gateway_mode: {settings.gateway_mode}")

    return PaystackClient(
        GatewayConfig(
            secret_key=settings.paystack_secret_key,
            base_url=settings.paystack_base_url,
            timeout_seconds=settings.gateway_timeout_seconds,
        )
    )


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_gateway(request: Request) -> PaymentGateway:
    return request.app.state.gateway


def get_transaction_store(request: Request) -> TransactionStore:
    return request.app.state.transaction_store


def get_event_intake(store: TransactionStore = Depends(get_transaction_store)) -> EventIntake:
    return EventIntake(store)
