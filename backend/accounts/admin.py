from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from .models import User


@admin.register(User)
class ParkUserAdmin(UserAdmin):
    list_display = ("email", "display_name", "role", "is_active", "date_joined")
    list_filter = ("role", "is_active", "is_superuser")
    search_fields = ("email", "first_name", "last_name", "display_name")
    fieldsets = UserAdmin.fieldsets + (
        ("Park", {"fields": ("display_name", "role")}),
    )
