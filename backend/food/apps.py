from django.apps import AppConfig


class FoodConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "food"
