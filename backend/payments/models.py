from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models


class Purchase(models.Model):
    """Fields shared by bookings and orders: the owner and the payment trail."""

    PENDING = "Pending"
    COMPLETED = "Completed"
    FAILED = "Failed"
    REFUNDED = "Refunded"
    PAYMENT_STATUSES = [
        (PENDING, "Pending"),
        (COMPLETED, "Completed"),
        (FAILED, "Failed"),
        (REFUNDED, "Refunded"),
    ]

    CREDIT_CARD = "Credit Card"
    PAYPAL = "PayPal"
    CASH = "Cash"
    PAYMENT_METHODS = [
        (CREDIT_CARD, "Credit Card"),
        (PAYPAL, "PayPal"),
        (CASH, "Cash"),
    ]

    # Subclasses define their own status choices plus these two markers.
    CANCELLED: str
    TERMINAL_STATUS: str

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="%(class)ss",
    )
    total_amount = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(0)])
    payment_status = models.CharField(max_length=12, choices=PAYMENT_STATUSES, default=PENDING)
    payment_method = models.CharField(max_length=20, choices=PAYMENT_METHODS)
    payment_id = models.CharField(max_length=255, blank=True, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        abstract = True
        ordering = ["-created_at"]

    @property
    def can_cancel(self) -> bool:
        return self.status != self.TERMINAL_STATUS

    def cancel(self):
        if self.status != self.CANCELLED:
            self.status = self.CANCELLED
            self.save(update_fields=["status"])


class Payment(models.Model):
    """A payment intent created with the gateway on behalf of a user."""

    SUCCEEDED = "succeeded"

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="payments")
    amount_cents = models.PositiveIntegerField()
    currency = models.CharField(max_length=10, default="usd")
    stripe_payment_intent = models.CharField(max_length=200, unique=True)
    status = models.CharField(max_length=30)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.stripe_payment_intent} ({self.status})"
