from rest_framework import serializers

from .models import Ride


class RideSerializer(serializers.ModelSerializer):
    class Meta:
        model = Ride
        fields = [
            "id",
            "name",
            "description",
            "image",
            "price",
            "thrill_level",
            "min_height",
            "duration",
            "capacity",
            "is_available",
            "created_at",
        ]
        read_only_fields = ["id", "created_at"]


class RideSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Ride
        fields = ["id", "name", "image", "thrill_level", "duration"]
        read_only_fields = fields
