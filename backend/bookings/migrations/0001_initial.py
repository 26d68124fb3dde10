from django.conf import settings
import django.core.validators
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("rides", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Booking",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("total_amount", models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(0)])),
                ("payment_status", models.CharField(choices=[("Pending", "Pending"), ("Completed", "Completed"), ("Failed", "Failed"), ("Refunded", "Refunded")], default="Pending", max_length=12)),
                ("payment_method", models.CharField(choices=[("Credit Card", "Credit Card"), ("PayPal", "PayPal"), ("Cash", "Cash")], max_length=20)),
                ("payment_id", models.CharField(blank=True, db_index=True, max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("status", models.CharField(choices=[("Confirmed", "Confirmed"), ("Cancelled", "Cancelled"), ("Completed", "Completed")], default="Confirmed", max_length=12)),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="bookings", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-created_at"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="BookingRide",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("date", models.DateField()),
                ("quantity", models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ("price", models.DecimalField(decimal_places=2, max_digits=8, validators=[django.core.validators.MinValueValidator(0)])),
                ("booking", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="rides", to="bookings.booking")),
                ("ride", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="booking_lines", to="rides.ride")),
            ],
            options={
                "ordering": ["date", "id"],
            },
        ),
    ]
