from django.contrib import admin

from .models import FoodItem


@admin.register(FoodItem)
class FoodItemAdmin(admin.ModelAdmin):
    list_display = ("name", "category", "price", "is_vegetarian", "is_available", "preparation_time")
    list_filter = ("category", "is_vegetarian", "is_available")
    search_fields = ("name", "description")
