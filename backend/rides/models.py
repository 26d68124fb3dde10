from django.core.validators import MinValueValidator
from django.db import models


class Ride(models.Model):
    """A water-park attraction visitors can book admission to."""

    MILD = "Mild"
    MODERATE = "Moderate"
    HIGH = "High"
    EXTREME = "Extreme"
    THRILL_LEVELS = [
        (MILD, "Mild"),
        (MODERATE, "Moderate"),
        (HIGH, "High"),
        (EXTREME, "Extreme"),
    ]

    name = models.CharField(max_length=200)
    description = models.TextField()
    image = models.URLField(max_length=500)
    price = models.DecimalField(max_digits=8, decimal_places=2, validators=[MinValueValidator(0)])
    thrill_level = models.CharField(max_length=10, choices=THRILL_LEVELS)
    min_height = models.PositiveIntegerField(help_text="Minimum rider height in centimetres.")
    duration = models.PositiveIntegerField(validators=[MinValueValidator(1)], help_text="Minutes.")
    capacity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    is_available = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name
