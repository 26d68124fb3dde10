from django.core.validators import MinValueValidator
from django.db import models


class FoodItem(models.Model):
    MAIN_COURSE = "Main Course"
    SNACKS = "Snacks"
    DESSERTS = "Desserts"
    BEVERAGES = "Beverages"
    CATEGORIES = [
        (MAIN_COURSE, "Main Course"),
        (SNACKS, "Snacks"),
        (DESSERTS, "Desserts"),
        (BEVERAGES, "Beverages"),
    ]

    name = models.CharField(max_length=200)
    description = models.TextField()
    image = models.URLField(max_length=500)
    price = models.DecimalField(max_digits=8, decimal_places=2, validators=[MinValueValidator(0)])
    category = models.CharField(max_length=20, choices=CATEGORIES)
    is_vegetarian = models.BooleanField(default=False)
    is_available = models.BooleanField(default=True)
    preparation_time = models.PositiveIntegerField(validators=[MinValueValidator(1)], help_text="Minutes.")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["category", "name"]

    def __str__(self):
        return self.name
