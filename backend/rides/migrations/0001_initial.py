import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Ride",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=200)),
                ("description", models.TextField()),
                ("image", models.URLField(max_length=500)),
                ("price", models.DecimalField(decimal_places=2, max_digits=8, validators=[django.core.validators.MinValueValidator(0)])),
                ("thrill_level", models.CharField(choices=[("Mild", "Mild"), ("Moderate", "Moderate"), ("High", "High"), ("Extreme", "Extreme")], max_length=10)),
                ("min_height", models.PositiveIntegerField(help_text="Minimum rider height in centimetres.")),
                ("duration", models.PositiveIntegerField(help_text="Minutes.", validators=[django.core.validators.MinValueValidator(1)])),
                ("capacity", models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ("is_available", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["name"],
            },
        ),
    ]
