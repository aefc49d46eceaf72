"""Webhook event intake: turn verified gateway events into stored records.

Only charge.success produces a TransactionRecord. Callers must verify the
webhook signature before handing an event to EventIntake.
"""

from datetime import UTC, datetime
from typing import Any

import structlog
from pydantic import BaseModel

from paygate.core.exceptions import EventIntakeError
from paygate.domain.money import to_major_units
from paygate.services.transaction_store import TransactionRecord, TransactionStore

logger = structlog.get_logger(__name__)

CHARGE_SUCCESS = "charge.success"
CHARGE_FAILED = "charge.failed"


class WebhookEvent(BaseModel):
    event_type: str
    reference: str = ""
    amount: int = 0  # minor units
    customer_email: str = ""
    status: str = ""


def parse_event(payload: dict[str, Any]) -> WebhookEvent:
    """Build a WebhookEvent from a decoded webhook body.

    Expected shape: {"event": ..., "data": {"reference", "amount", "status",
    "customer": {"email"}}}. Missing data or customer objects become empty
    fields; a missing event name or a non-integer amount raises.
    """
    if not isinstance(payload, dict) or not payload.get("event"):
        raise EventIntakeError("Webhook payload has no event type")

    data = payload.get("data") or {}
    customer = data.get("customer") or {}

    return WebhookEvent(
        event_type=payload["event"],
        reference=data.get("reference") or "",
        amount=data.get("amount") or 0,
        customer_email=customer.get("email") or "",
        status=data.get("status") or "",
    )


class EventIntake:
    """Records charge outcomes from verified webhook events."""

    def __init__(self, store: TransactionStore):
        self.store = store

    def handle(self, event: WebhookEvent) -> None:
        logger.info("webhook_received", event_type=event.event_type, reference=event.reference or None)

        if event.event_type == CHARGE_SUCCESS:
            self._record_success(event)
        elif event.event_type == CHARGE_FAILED:
            logger.info("charge_failed", reference=event.reference)
        else:
            logger.info("webhook_event_unhandled", event_type=event.event_type)

    def _record_success(self, event: WebhookEvent) -> None:
        if not event.reference:
            raise EventIntakeError("charge.success event has no reference")

        record = TransactionRecord(
            reference=event.reference,
            amount=to_major_units(event.amount),
            customer_email=event.customer_email,
            status=event.status,
            recorded_at=datetime.now(UTC),
        )
        self.store.upsert(record)
        logger.info(
            "charge_success_recorded",
            reference=record.reference,
            amount=str(record.amount),
            customer_email=record.customer_email,
            status=record.status,
        )
