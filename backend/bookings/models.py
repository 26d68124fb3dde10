from django.core.validators import MinValueValidator
from django.db import models

from core.pricing import line_total
from payments.models import Purchase


class Booking(Purchase):
    """A visitor's purchase of ride admissions for one or more dates."""

    CONFIRMED = "Confirmed"
    CANCELLED = "Cancelled"
    COMPLETED = "Completed"
    STATUSES = [
        (CONFIRMED, "Confirmed"),
        (CANCELLED, "Cancelled"),
        (COMPLETED, "Completed"),
    ]
    TERMINAL_STATUS = COMPLETED

    status = models.CharField(max_length=12, choices=STATUSES, default=CONFIRMED)

    class Meta(Purchase.Meta):
        pass

    def __str__(self):
        return f"Booking #{self.pk} ({self.user}, {self.status})"


class BookingRide(models.Model):
    """Line item: admissions to one ride on one date."""

    booking = models.ForeignKey("Booking", on_delete=models.CASCADE, related_name="rides")
    ride = models.ForeignKey("rides.Ride", on_delete=models.PROTECT, related_name="booking_lines")
    date = models.DateField()
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    price = models.DecimalField(max_digits=8, decimal_places=2, validators=[MinValueValidator(0)])

    class Meta:
        ordering = ["date", "id"]

    def __str__(self):
        return f"{self.quantity} × {self.ride} on {self.date}"

    @property
    def subtotal(self):
        return line_total(self.price, self.quantity)
