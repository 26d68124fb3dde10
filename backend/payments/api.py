import logging

import stripe
from django.db import DatabaseError
from rest_framework import generics, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from core.pricing import to_minor_units

from .models import Payment
from .serializers import PaymentIntentRequestSerializer, PaymentSerializer
from .services.gateway import GatewayConfigurationError, get_payment_gateway
from .services.reconciliation import reconcile_payment_event

logger = logging.getLogger(__name__)


class PaymentListView(generics.ListAPIView):
    """List the payment intents the signed-in user has created, newest first."""

    serializer_class = PaymentSerializer
    permission_classes = [IsAuthenticated]
    filter_backends: list = []

    def get_queryset(self):
        return Payment.objects.filter(user=self.request.user).order_by("-created_at")


class CreatePaymentIntentView(APIView):
    """Create a Stripe PaymentIntent for the signed-in visitor's checkout total."""

    permission_classes = [IsAuthenticated]

    def post(self, request, *args, **kwargs):
        serializer = PaymentIntentRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        amount_cents = to_minor_units(serializer.validated_data["amount"])
        currency = serializer.validated_data["currency"]
        metadata = {
            **serializer.validated_data["metadata"],
            "user_id": str(request.user.pk),
        }

        gateway = get_payment_gateway()
        try:
            intent = gateway.create_payment_intent(
                amount_cents=amount_cents,
                currency=currency,
                metadata=metadata,
            )
        except stripe.StripeError as exc:
            logger.exception("Failed to create Stripe payment intent: %s", exc)
            return Response(
                {"detail": "Error creating payment intent", "error": str(exc)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        Payment.objects.create(
            user=request.user,
            amount_cents=amount_cents,
            currency=currency,
            stripe_payment_intent=intent.id,
            status=intent.status,
        )
        return Response(
            {"client_secret": intent.client_secret, "payment_intent_id": intent.id},
            status=status.HTTP_200_OK,
        )


class StripeWebhookView(APIView):
    """Receive Stripe payment webhooks and reconcile bookings and orders."""

    permission_classes: list = []
    authentication_classes: list = []

    def post(self, request, *args, **kwargs):
        payload = request.body
        sig_header = request.META.get("HTTP_STRIPE_SIGNATURE")
        gateway = get_payment_gateway()

        try:
            event = gateway.construct_event(payload, sig_header)
        except GatewayConfigurationError as exc:
            logger.error("Stripe webhook rejected: %s", exc)
            return Response(status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        except ValueError as exc:
            logger.warning("Invalid payload received on Stripe webhook.")
            return Response({"detail": f"Webhook Error: {exc}"}, status=status.HTTP_400_BAD_REQUEST)
        except stripe.SignatureVerificationError as exc:
            logger.warning("Invalid Stripe signature.")
            return Response({"detail": f"Webhook Error: {exc}"}, status=status.HTTP_400_BAD_REQUEST)

        try:
            reconcile_payment_event(event)
        except DatabaseError:
            logger.exception("Failed to reconcile Stripe event %s", event.get("id"))
            return Response(
                {"detail": "Failed to reconcile payment."},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response({"received": True}, status=status.HTTP_200_OK)
