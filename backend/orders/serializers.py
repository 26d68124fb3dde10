from django.db import transaction
from rest_framework import serializers

from accounts.serializers import UserSerializer
from core.pricing import purchase_total
from food.models import FoodItem
from food.serializers import FoodItemSummarySerializer
from orders.models import Order, OrderItem
from payments.serializers import PaymentReferenceMixin


class OrderItemSerializer(serializers.ModelSerializer):
    food = serializers.IntegerField(source="food_id", read_only=True)
    food_detail = FoodItemSummarySerializer(source="food", read_only=True)
    subtotal = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True)

    class Meta:
        model = OrderItem
        fields = ["id", "food", "food_detail", "quantity", "price", "subtotal"]
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    user = UserSerializer(read_only=True)
    items = OrderItemSerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "user",
            "items",
            "total_amount",
            "payment_status",
            "payment_method",
            "payment_id",
            "status",
            "created_at",
        ]
        read_only_fields = fields


class OrderItemInputSerializer(serializers.Serializer):
    food = serializers.PrimaryKeyRelatedField(queryset=FoodItem.objects.all())
    quantity = serializers.IntegerField(min_value=1)

    def validate_food(self, food: FoodItem) -> FoodItem:
        if not food.is_available:
            raise serializers.ValidationError(f"{food.name} is not currently available.")
        return food


class OrderCreateSerializer(PaymentReferenceMixin, serializers.Serializer):
    """Checkout payload for food; prices come from the menu, never the client."""

    items = OrderItemInputSerializer(many=True, required=False)
    payment_method = serializers.ChoiceField(choices=Order.PAYMENT_METHODS)
    payment_id = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=255)

    def validate(self, attrs):
        if not attrs.get("items"):
            raise serializers.ValidationError({"items": "No items selected for order"})
        return attrs

    @transaction.atomic
    def create(self, validated_data):
        lines = validated_data["items"]
        payment_id = validated_data.get("payment_id") or ""
        total = purchase_total((line["food"].price, line["quantity"]) for line in lines)

        order = Order.objects.create(
            user=validated_data["user"],
            total_amount=total,
            payment_method=validated_data["payment_method"],
            payment_id=payment_id,
            payment_status=self.initial_payment_status(payment_id),
        )
        OrderItem.objects.bulk_create(
            [
                OrderItem(
                    order=order,
                    food=line["food"],
                    quantity=line["quantity"],
                    price=line["food"].price,
                )
                for line in lines
            ]
        )
        return order


class OrderStatusUpdateSerializer(serializers.ModelSerializer):
    class Meta:
        model = Order
        fields = ["status", "payment_status"]
        extra_kwargs = {
            "status": {"required": False},
            "payment_status": {"required": False},
        }
