"""Payment API request/response schemas.

Response envelopes follow {"success": bool, "data": ...}; failures carry
{"success": false, "message": ...} and are produced by the app's exception
handlers, not by these models.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from paygate.domain.money import to_major_units
from paygate.integrations.gateway import VerifiedTransaction
from paygate.services.transaction_store import TransactionRecord


# ── Requests ────────────────────────────────────────────────────────


class InitializePopupRequest(BaseModel):
    # Optional here so a missing field answers 400, not FastAPI's 422
    email: str | None = None
    amount: float | None = Field(default=None, allow_inf_nan=False)  # major units
    metadata: dict[str, Any] | None = None


class InitializeRedirectRequest(InitializePopupRequest):
    callback_url: str | None = None


# ── Responses ───────────────────────────────────────────────────────


class PopupInitData(BaseModel):
    access_code: str
    reference: str


class PopupInitResponse(BaseModel):
    success: bool = True
    data: PopupInitData


class RedirectInitData(BaseModel):
    authorization_url: str
    reference: str


class RedirectInitResponse(BaseModel):
    success: bool = True
    data: RedirectInitData


class VerifyData(BaseModel):
    status: str
    reference: str
    amount: float  # major units
    currency: str
    customer_email: str
    paid_at: str | None = None
    channel: str | None = None
    gateway_response: str | None = None

    @classmethod
    def from_gateway(cls, tx: VerifiedTransaction) -> "VerifyData":
        return cls(
            status=tx.status,
            reference=tx.reference,
            amount=float(to_major_units(tx.amount)),
            currency=tx.currency,
            customer_email=tx.customer_email,
            paid_at=tx.paid_at,
            channel=tx.channel,
            gateway_response=tx.gateway_response,
        )


class VerifyResponse(BaseModel):
    success: bool = True
    data: VerifyData


class TransactionOut(BaseModel):
    reference: str
    amount: float  # major units
    customer_email: str
    status: str
    recorded_at: datetime

    @classmethod
    def from_record(cls, record: TransactionRecord) -> "TransactionOut":
        return cls(
            reference=record.reference,
            amount=float(record.amount),
            customer_email=record.customer_email,
            status=record.status,
            recorded_at=record.recorded_at,
        )


class TransactionListResponse(BaseModel):
    success: bool = True
    data: list[TransactionOut]


class TransactionResponse(BaseModel):
    success: bool = True
    data: TransactionOut


class WebhookAck(BaseModel):
    received: bool = True
