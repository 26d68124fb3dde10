from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional
from uuid import uuid4

import stripe
from django.conf import settings

logger = logging.getLogger(__name__)


class GatewayConfigurationError(RuntimeError):
    """Raised when a gateway operation needs a secret that is not configured."""


@dataclass
class PaymentIntentStub:
    """
    Lightweight stand-in for stripe.PaymentIntent when running in stub mode.

    Tests and local development do not hit Stripe; instead, we return predictable
    identifiers so checkout, payment records and webhooks behave as if Stripe
    responded.
    """

    id: str
    client_secret: str
    amount: int
    currency: str
    status: str = "requires_payment_method"
    metadata: Dict[str, str] = field(default_factory=dict)


class StripeGateway:
    """
    Thin adapter over the Stripe SDK.

    Handlers obtain one through `get_payment_gateway()` per request so tests can
    swap in fakes without touching module-level Stripe state.
    """

    def __init__(
        self,
        *,
        api_key: Optional[str],
        webhook_secret: Optional[str],
        use_stub: bool = False,
        webhook_tolerance: int = stripe.Webhook.DEFAULT_TOLERANCE,
    ):
        self.api_key = api_key or None
        self.webhook_secret = webhook_secret or None
        self.use_stub = use_stub or self.api_key is None
        self.webhook_tolerance = webhook_tolerance

    def create_payment_intent(self, *, amount_cents: int, currency: str, metadata: Dict[str, str]):
        """
        Create a PaymentIntent (or stub equivalent) for `amount_cents`.

        Returns an object exposing `id`, `client_secret` and `status`.
        """
        if self.use_stub:
            intent_id = f"pi_test_{uuid4().hex}"
            logger.info("Stripe stub: created payment intent %s for %s %s", intent_id, amount_cents, currency)
            return PaymentIntentStub(
                id=intent_id,
                client_secret=f"{intent_id}_secret_{uuid4().hex}",
                amount=amount_cents,
                currency=currency,
                metadata=dict(metadata),
            )

        return stripe.PaymentIntent.create(
            amount=amount_cents,
            currency=currency,
            metadata=metadata,
            api_key=self.api_key,
        )

    def construct_event(self, payload: bytes, sig_header: Optional[str]):
        """
        Verify a webhook signature and decode the event body.

        Raises `stripe.SignatureVerificationError` for bad or missing signatures
        and `ValueError` for undecodable payloads.
        """
        if not self.webhook_secret:
            raise GatewayConfigurationError("STRIPE_WEBHOOK_SECRET is not configured.")
        if not sig_header:
            raise stripe.SignatureVerificationError("Missing Stripe-Signature header.", sig_header)

        return stripe.Webhook.construct_event(
            payload, sig_header, self.webhook_secret, tolerance=self.webhook_tolerance
        )


def get_payment_gateway() -> StripeGateway:
    return StripeGateway(
        api_key=getattr(settings, "STRIPE_SECRET_KEY", ""),
        webhook_secret=getattr(settings, "STRIPE_WEBHOOK_SECRET", ""),
        use_stub=getattr(settings, "STRIPE_USE_STUB", False),
        webhook_tolerance=getattr(settings, "STRIPE_WEBHOOK_TOLERANCE", stripe.Webhook.DEFAULT_TOLERANCE),
    )
