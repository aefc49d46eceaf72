"""Paystack integration: initialize and verify transactions over the REST API."""

from urllib.parse import quote

import httpx
import structlog

from paygate.core.exceptions import GatewayError
from paygate.integrations.gateway import (
    GatewayConfig,
    InitializedTransaction,
    InitializeParams,
    VerifiedTransaction,
)

logger = structlog.get_logger(__name__)


class PaystackClient:
    """Client for the Paystack transaction API."""

    def __init__(self, config: GatewayConfig, transport: httpx.AsyncBaseTransport | None = None):
        """Initialize Paystack client.

        Args:
            config: Secret key, base URL and request timeout
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self.config = config
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.secret_key}",
            "Content-Type": "application/json",
        }

    async def _request(self, method: str, endpoint: str, data: dict | None = None) -> dict:
        """Make an authenticated request and return the envelope's `data` object."""
        url = f"{self.config.base_url.rstrip('/')}{endpoint}"

        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.request(method, url, headers=self._headers(), json=data)
        except httpx.HTTPError as e:
            logger.error("gateway_request_failed", endpoint=endpoint, error=str(e), error_type=type(e).__name__)
            raise GatewayError(f"Payment gateway request failed: {e}") from e

        if not response.is_success:
            message = _error_message(response)
            logger.warning("gateway_error_response", endpoint=endpoint, status_code=response.status_code, message=message)
            raise GatewayError(message)

        try:
            body = response.json()
        except ValueError as e:
            raise GatewayError("Paystack API returned an invalid response") from e

        return body.get("data") or {}

    async def initialize_transaction(self, params: InitializeParams) -> InitializedTransaction:
        """Initialize a transaction.

        Returns access_code for the popup flow and authorization_url for the
        redirect flow; both carry the gateway-assigned reference.
        """
        data = await self._request("POST", "/transaction/initialize", params.to_payload())
        return InitializedTransaction(
            authorization_url=data.get("authorization_url", ""),
            access_code=data.get("access_code", ""),
            reference=data.get("reference", ""),
        )

    async def verify_transaction(self, reference: str) -> VerifiedTransaction:
        """Verify a transaction by its reference."""
        data = await self._request("GET", f"/transaction/verify/{quote(reference, safe='')}")
        customer = data.get("customer") or {}
        return VerifiedTransaction(
            status=data.get("status") or "",
            reference=data.get("reference") or reference,
            amount=int(data.get("amount") or 0),
            currency=data.get("currency") or "",
            customer_email=customer.get("email") or "",
            paid_at=data.get("paid_at"),
            channel=data.get("channel"),
            gateway_response=data.get("gateway_response"),
            metadata=data["metadata"] if isinstance(data.get("metadata"), dict) else {},
        )


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return "Paystack API request failed"
