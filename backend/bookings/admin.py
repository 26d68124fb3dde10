from django.contrib import admin

from .models import Booking, BookingRide


class BookingRideInline(admin.TabularInline):
    model = BookingRide
    extra = 0
    raw_id_fields = ("ride",)


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "total_amount", "payment_status", "status", "created_at")
    list_filter = ("payment_status", "status", "payment_method")
    search_fields = ("user__email", "payment_id")
    readonly_fields = ("created_at",)
    inlines = [BookingRideInline]
