"""PaymentGateway Protocol: the seam between the API and the payment provider.

Route handlers depend on this protocol, never on a concrete client, so the
real Paystack client and the deterministic GatewayFake are interchangeable.
All amounts crossing this boundary are in minor units.
"""

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class GatewayConfig:
    """Explicit gateway configuration, passed to a client at construction."""

    secret_key: str
    base_url: str = "https://api.paystack.co"
    timeout_seconds: float = 10.0


@dataclass
class InitializeParams:
    email: str
    amount: int  # minor units
    callback_url: str | None = None
    metadata: dict[str, Any] | None = None

    def to_payload(self) -> dict[str, Any]:
        """Request body for the initialize endpoint, unset optionals omitted."""
        payload: dict[str, Any] = {"email": self.email, "amount": self.amount}
        if self.callback_url is not None:
            payload["callback_url"] = self.callback_url
        if self.metadata is not None:
            payload["metadata"] = self.metadata
        return payload


@dataclass
class InitializedTransaction:
    authorization_url: str
    access_code: str
    reference: str


@dataclass
class VerifiedTransaction:
    status: str
    reference: str
    amount: int  # minor units
    currency: str
    customer_email: str
    paid_at: str | None = None
    channel: str | None = None
    gateway_response: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


@runtime_checkable
class PaymentGateway(Protocol):
    """Protocol for payment-provider operations.

    Implementations raise GatewayError on any upstream failure.
    """

    async def initialize_transaction(self, params: InitializeParams) -> InitializedTransaction:
        """Create a pending transaction and return its checkout handles."""
        ...

    async def verify_transaction(self, reference: str) -> VerifiedTransaction:
        """Fetch the current state of a transaction by reference."""
        ...
