from django.db import transaction
from rest_framework import serializers

from accounts.serializers import UserSerializer
from bookings.models import Booking, BookingRide
from core.pricing import purchase_total
from payments.serializers import PaymentReferenceMixin
from rides.models import Ride
from rides.serializers import RideSummarySerializer


class BookingRideSerializer(serializers.ModelSerializer):
    ride = serializers.IntegerField(source="ride_id", read_only=True)
    ride_detail = RideSummarySerializer(source="ride", read_only=True)
    subtotal = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True)

    class Meta:
        model = BookingRide
        fields = ["id", "ride", "ride_detail", "date", "quantity", "price", "subtotal"]
        read_only_fields = fields


class BookingSerializer(serializers.ModelSerializer):
    user = UserSerializer(read_only=True)
    rides = BookingRideSerializer(many=True, read_only=True)

    class Meta:
        model = Booking
        fields = [
            "id",
            "user",
            "rides",
            "total_amount",
            "payment_status",
            "payment_method",
            "payment_id",
            "status",
            "created_at",
        ]
        read_only_fields = fields


class BookingRideInputSerializer(serializers.Serializer):
    ride = serializers.PrimaryKeyRelatedField(queryset=Ride.objects.all())
    date = serializers.DateField()
    quantity = serializers.IntegerField(min_value=1)

    def validate_ride(self, ride: Ride) -> Ride:
        if not ride.is_available:
            raise serializers.ValidationError(f"{ride.name} is not currently available.")
        return ride


class BookingCreateSerializer(PaymentReferenceMixin, serializers.Serializer):
    """
    Checkout payload for ride admissions.

    Unit prices and the total are always taken from the ride catalogue at
    write time; any price or total the client sends is ignored.
    """

    rides = BookingRideInputSerializer(many=True, required=False)
    payment_method = serializers.ChoiceField(choices=Booking.PAYMENT_METHODS)
    payment_id = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=255)

    def validate(self, attrs):
        if not attrs.get("rides"):
            raise serializers.ValidationError({"rides": "No rides selected for booking"})
        return attrs

    @transaction.atomic
    def create(self, validated_data):
        lines = validated_data["rides"]
        payment_id = validated_data.get("payment_id") or ""
        total = purchase_total((line["ride"].price, line["quantity"]) for line in lines)

        booking = Booking.objects.create(
            user=validated_data["user"],
            total_amount=total,
            payment_method=validated_data["payment_method"],
            payment_id=payment_id,
            payment_status=self.initial_payment_status(payment_id),
        )
        BookingRide.objects.bulk_create(
            [
                BookingRide(
                    booking=booking,
                    ride=line["ride"],
                    date=line["date"],
                    quantity=line["quantity"],
                    price=line["ride"].price,
                )
                for line in lines
            ]
        )
        return booking


class BookingStatusUpdateSerializer(serializers.ModelSerializer):
    """Admin-only partial update of the booking and payment status."""

    class Meta:
        model = Booking
        fields = ["status", "payment_status"]
        extra_kwargs = {
            "status": {"required": False},
            "payment_status": {"required": False},
        }
