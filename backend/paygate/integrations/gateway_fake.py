"""GatewayFake: Scenario-based test double for the PaymentGateway protocol.

Provides deterministic, instant responses for 2 named scenarios:
- happy_path: every call succeeds with realistic Paystack-shaped data
- gateway_error: every call fails the way a non-2xx Paystack answer does

Also used at runtime when GATEWAY_MODE=fake, so the demo runs without
Paystack credentials.
"""

import uuid

from paygate.core.exceptions import GatewayError
from paygate.integrations.gateway import (
    InitializedTransaction,
    InitializeParams,
    VerifiedTransaction,
)


class GatewayFake:
    """Scenario-based test double for PaymentGateway.

    Initialized transactions are remembered so a later verify returns the
    same email and amount, like the real gateway would.
    """

    VALID_SCENARIOS = {"happy_path", "gateway_error"}

    INITIALIZE_ERROR = "Invalid key"
    VERIFY_ERROR = "Transaction reference not found"

    def __init__(self, scenario: str = "happy_path"):
        """Initialize GatewayFake with a named scenario.

        Args:
            scenario: One of 'happy_path', 'gateway_error'

        Raises:
            ValueError: If scenario is not recognized
        """
        if scenario not in self.VALID_SCENARIOS:
            raise ValueError(
                f"Unknown scenario: {scenario}. Valid scenarios: {self.VALID_SCENARIOS}"
            )
        self.scenario = scenario
        self.initialize_calls: list[InitializeParams] = []
        self.verify_calls: list[str] = []
        self._initialized: dict[str, InitializeParams] = {}

    async def initialize_transaction(self, params: InitializeParams) -> InitializedTransaction:
        self.initialize_calls.append(params)
        if self.scenario == "gateway_error":
            raise GatewayError(self.INITIALIZE_ERROR)

        reference = f"ref_{uuid.uuid4().hex[:12]}"
        access_code = f"ac_{uuid.uuid4().hex[:10]}"
        self._initialized[reference] = params
        return InitializedTransaction(
            authorization_url=f"https://checkout.paystack.com/{access_code}",
            access_code=access_code,
            reference=reference,
        )

    async def verify_transaction(self, reference: str) -> VerifiedTransaction:
        self.verify_calls.append(reference)
        if self.scenario == "gateway_error":
            raise GatewayError(self.VERIFY_ERROR)

        params = self._initialized.get(reference)
        return VerifiedTransaction(
            status="success",
            reference=reference,
            amount=params.amount if params else 5000,
            currency="NGN",
            customer_email=params.email if params else "customer@example.com",
            paid_at="2024-01-01T12:00:00.000Z",
            channel="card",
            gateway_response="Successful",
            metadata=(params.metadata or {}) if params else {},
        )
