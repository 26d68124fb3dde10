from django.contrib import admin

from .models import Ride


@admin.register(Ride)
class RideAdmin(admin.ModelAdmin):
    list_display = ("name", "thrill_level", "price", "min_height", "capacity", "is_available")
    list_filter = ("thrill_level", "is_available")
    search_fields = ("name", "description")
