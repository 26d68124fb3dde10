from rest_framework import serializers

from .models import FoodItem


class FoodItemSerializer(serializers.ModelSerializer):
    class Meta:
        model = FoodItem
        fields = [
            "id",
            "name",
            "description",
            "image",
            "price",
            "category",
            "is_vegetarian",
            "is_available",
            "preparation_time",
            "created_at",
        ]
        read_only_fields = ["id", "created_at"]


class FoodItemSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = FoodItem
        fields = ["id", "name", "image", "category", "is_vegetarian"]
        read_only_fields = fields
