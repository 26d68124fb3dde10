from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from django.db import transaction
from django.utils import timezone

from bookings.models import Booking
from orders.models import Order
from payments.models import Payment, Purchase

logger = logging.getLogger(__name__)

PAYMENT_SUCCEEDED = "payment_intent.succeeded"
PAYMENT_FAILED = "payment_intent.payment_failed"

# event type -> (payment status, booking status, order status, fallback gateway status)
TRANSITIONS = {
    PAYMENT_SUCCEEDED: (Purchase.COMPLETED, Booking.CONFIRMED, Order.PREPARING, Payment.SUCCEEDED),
    PAYMENT_FAILED: (Purchase.FAILED, Booking.CANCELLED, Order.CANCELLED, "requires_payment_method"),
}


@dataclass
class ReconciliationResult:
    event_type: str
    payment_id: Optional[str] = None
    handled: bool = False
    bookings_updated: int = 0
    orders_updated: int = 0


def _owner_id(metadata: Any) -> Optional[int]:
    try:
        return int(metadata["user_id"])
    except (KeyError, TypeError, ValueError):
        return None


def _payment_intent(event: Any) -> Any:
    try:
        intent = event["data"]["object"]
    except (KeyError, TypeError):
        return None
    return intent if hasattr(intent, "get") else None


def reconcile_payment_event(event: Dict[str, Any]) -> ReconciliationResult:
    """
    Bring bookings and orders in line with a verified gateway event.

    Only records owned by the user named in the intent metadata, carrying the
    intent id as their payment id, and still Pending are touched. Everything is
    written in one transaction; database errors propagate so the caller can
    ask the gateway to redeliver.
    """
    event_type = event.get("type") or ""
    result = ReconciliationResult(event_type=event_type)

    transition = TRANSITIONS.get(event_type)
    if transition is None:
        logger.info("Unhandled Stripe event type: %s", event_type)
        return result

    intent = _payment_intent(event) or {}
    payment_id = intent.get("id")
    user_id = _owner_id(intent.get("metadata"))
    result.payment_id = payment_id
    if not payment_id or user_id is None:
        logger.warning(
            "Stripe event %s missing payment id or user metadata (payment_id=%s)",
            event_type,
            payment_id,
        )
        return result

    payment_status, booking_status, order_status, gateway_status = transition
    with transaction.atomic():
        result.bookings_updated = Booking.objects.filter(
            user_id=user_id,
            payment_id=payment_id,
            payment_status=Purchase.PENDING,
        ).update(payment_status=payment_status, status=booking_status)
        result.orders_updated = Order.objects.filter(
            user_id=user_id,
            payment_id=payment_id,
            payment_status=Purchase.PENDING,
        ).update(payment_status=payment_status, status=order_status)
        Payment.objects.filter(stripe_payment_intent=payment_id).exclude(
            status=Payment.SUCCEEDED
        ).update(
            status=intent.get("status") or gateway_status,
            updated_at=timezone.now(),
        )

    result.handled = True
    logger.info(
        "Reconciled %s for %s: %d booking(s), %d order(s) -> %s",
        event_type,
        payment_id,
        result.bookings_updated,
        result.orders_updated,
        payment_status,
    )
    return result
