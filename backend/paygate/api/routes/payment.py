"""Payment routes: transaction initialize/verify proxy, webhooks, and stored transactions."""

import json
from decimal import InvalidOperation

import structlog
from fastapi import APIRouter, Depends, Request

from paygate.api.deps import (
    get_app_settings,
    get_event_intake,
    get_gateway,
    get_transaction_store,
)
from paygate.core.config import Settings
from paygate.core.exceptions import NotFoundError, SignatureError, ValidationError
from paygate.domain.money import to_minor_units
from paygate.domain.signature import verify_signature
from paygate.integrations.gateway import InitializeParams, PaymentGateway
from paygate.schemas.payment import (
    InitializePopupRequest,
    InitializeRedirectRequest,
    PopupInitData,
    PopupInitResponse,
    RedirectInitData,
    RedirectInitResponse,
    TransactionListResponse,
    TransactionOut,
    TransactionResponse,
    VerifyData,
    VerifyResponse,
    WebhookAck,
)
from paygate.services.event_intake import EventIntake, parse_event
from paygate.services.transaction_store import TransactionStore

logger = structlog.get_logger(__name__)

router = APIRouter()


# ── Helpers ─────────────────────────────────────────────────────────


def _validated_params(body: InitializePopupRequest, callback_url: str | None = None) -> InitializeParams:
    """Check required fields and map the amount to minor units."""
    if not body.email or not body.amount:
        raise ValidationError("Email and amount are required")
    if body.amount < 0:
        raise ValidationError("Amount must be greater than zero")

    try:
        minor = to_minor_units(body.amount)
    except InvalidOperation as e:
        raise ValidationError("Amount is out of range") from e
    if minor < 1:
        raise ValidationError("Amount must be at least one minor unit (0.01)")

    return InitializeParams(
        email=body.email,
        amount=minor,
        callback_url=callback_url,
        metadata=body.metadata,
    )


def _signature_from(request: Request, settings: Settings) -> str | None:
    for header in settings.webhook_signature_headers:
        value = request.headers.get(header)
        if value:
            return value
    return None


# ── Endpoints ───────────────────────────────────────────────────────


@router.post("/initialize-popup", response_model=PopupInitResponse)
async def initialize_popup(
    body: InitializePopupRequest,
    gateway: PaymentGateway = Depends(get_gateway),
):
    """Initialize a transaction for the inline popup checkout."""
    params = _validated_params(body)
    tx = await gateway.initialize_transaction(params)

    logger.info("transaction_initialized", flow="popup", reference=tx.reference, amount=params.amount)
    return PopupInitResponse(data=PopupInitData(access_code=tx.access_code, reference=tx.reference))


@router.post("/initialize-redirect", response_model=RedirectInitResponse)
async def initialize_redirect(
    body: InitializeRedirectRequest,
    gateway: PaymentGateway = Depends(get_gateway),
    settings: Settings = Depends(get_app_settings),
):
    """Initialize a transaction for the hosted-page redirect checkout."""
    callback_url = body.callback_url or settings.default_callback_url or None
    params = _validated_params(body, callback_url=callback_url)
    tx = await gateway.initialize_transaction(params)

    logger.info("transaction_initialized", flow="redirect", reference=tx.reference, amount=params.amount)
    return RedirectInitResponse(
        data=RedirectInitData(authorization_url=tx.authorization_url, reference=tx.reference)
    )


@router.get("/verify/{reference}", response_model=VerifyResponse)
async def verify_transaction(
    reference: str,
    gateway: PaymentGateway = Depends(get_gateway),
):
    """Verify a transaction by reference; amount is returned in major units."""
    tx = await gateway.verify_transaction(reference)

    logger.info("transaction_verified", reference=reference, status=tx.status)
    return VerifyResponse(data=VerifyData.from_gateway(tx))


@router.post("/webhook", response_model=WebhookAck)
async def paystack_webhook(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    intake: EventIntake = Depends(get_event_intake),
):
    """Handle gateway webhook events with signature verification.

    Only a signature mismatch is answered with an error. Once verified, the
    event is always acknowledged with 200 so the gateway does not keep
    retrying; processing failures are logged instead.
    """
    body = await request.body()
    signature = _signature_from(request, settings)

    if not verify_signature(body, signature, settings.paystack_secret_key):
        logger.warning("webhook_signature_invalid", has_signature=signature is not None)
        raise SignatureError("Invalid signature")

    try:
        event = parse_event(json.loads(body))
        intake.handle(event)
    except Exception as e:
        logger.error(
            "webhook_processing_failed",
            error=str(e),
            error_type=type(e).__name__,
            exc_info=True,
        )

    return WebhookAck()


@router.get("/transactions", response_model=TransactionListResponse)
async def list_transactions(store: TransactionStore = Depends(get_transaction_store)):
    """Return every transaction recorded from charge.success webhooks."""
    return TransactionListResponse(data=[TransactionOut.from_record(r) for r in store.list()])


@router.get("/transactions/{reference}", response_model=TransactionResponse)
async def get_transaction(
    reference: str,
    store: TransactionStore = Depends(get_transaction_store),
):
    """Return one recorded transaction."""
    record = store.get(reference)
    if record is None:
        raise NotFoundError("Transaction not found")
    return TransactionResponse(data=TransactionOut.from_record(record))
