from decimal import Decimal

from django.conf import settings
from rest_framework import serializers

from .models import Payment, Purchase


class PaymentIntentRequestSerializer(serializers.Serializer):
    amount = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        error_messages={"required": "Invalid payment amount", "null": "Invalid payment amount"},
    )
    currency = serializers.CharField(max_length=10, required=False)
    metadata = serializers.DictField(child=serializers.CharField(allow_blank=True), required=False)

    def validate_amount(self, value: Decimal) -> Decimal:
        if value <= 0:
            raise serializers.ValidationError("Invalid payment amount")
        return value

    def validate_currency(self, value: str) -> str:
        return value.strip().lower()

    def to_internal_value(self, data):
        ret = super().to_internal_value(data)
        ret.setdefault("currency", settings.STRIPE_CURRENCY)
        ret.setdefault("metadata", {})
        return ret


class PaymentSerializer(serializers.ModelSerializer):
    class Meta:
        model = Payment
        fields = ["id", "stripe_payment_intent", "amount_cents", "currency", "status", "created_at"]
        read_only_fields = fields


class PaymentReferenceMixin:
    """
    Checkout support for an optional `payment_id` on bookings and orders.

    The id must name a payment intent the caller created through
    `create-payment-intent`. A purchase only starts out Completed when that
    intent has already succeeded; otherwise it stays Pending until the
    webhook settles it.
    """

    def validate_payment_id(self, value):
        if not value:
            return ""
        request = self.context.get("request")
        owner_id = getattr(getattr(request, "user", None), "pk", None)
        if not Payment.objects.filter(stripe_payment_intent=value, user_id=owner_id).exists():
            raise serializers.ValidationError("Unknown payment intent.")
        return value

    def initial_payment_status(self, payment_id: str) -> str:
        if payment_id and Payment.objects.filter(
            stripe_payment_intent=payment_id, status=Payment.SUCCEEDED
        ).exists():
            return Purchase.COMPLETED
        return Purchase.PENDING
