import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="FoodItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=200)),
                ("description", models.TextField()),
                ("image", models.URLField(max_length=500)),
                ("price", models.DecimalField(decimal_places=2, max_digits=8, validators=[django.core.validators.MinValueValidator(0)])),
                ("category", models.CharField(choices=[("Main Course", "Main Course"), ("Snacks", "Snacks"), ("Desserts", "Desserts"), ("Beverages", "Beverages")], max_length=20)),
                ("is_vegetarian", models.BooleanField(default=False)),
                ("is_available", models.BooleanField(default=True)),
                ("preparation_time", models.PositiveIntegerField(help_text="Minutes.", validators=[django.core.validators.MinValueValidator(1)])),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["category", "name"],
            },
        ),
    ]
