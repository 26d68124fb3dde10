from django.core.validators import MinValueValidator
from django.db import models

from core.pricing import line_total
from payments.models import Purchase


class Order(Purchase):
    """A visitor's food order for pickup in the park."""

    PREPARING = "Preparing"
    READY = "Ready for Pickup"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"
    STATUSES = [
        (PREPARING, "Preparing"),
        (READY, "Ready for Pickup"),
        (DELIVERED, "Delivered"),
        (CANCELLED, "Cancelled"),
    ]
    TERMINAL_STATUS = DELIVERED

    status = models.CharField(max_length=20, choices=STATUSES, default=PREPARING)

    class Meta(Purchase.Meta):
        pass

    def __str__(self):
        return f"Order #{self.pk} ({self.user}, {self.status})"


class OrderItem(models.Model):
    order = models.ForeignKey("Order", on_delete=models.CASCADE, related_name="items")
    food = models.ForeignKey("food.FoodItem", on_delete=models.PROTECT, related_name="order_lines")
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    price = models.DecimalField(max_digits=8, decimal_places=2, validators=[MinValueValidator(0)])

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return f"{self.quantity} × {self.food}"

    @property
    def subtotal(self):
        return line_total(self.price, self.quantity)
