from core.api import PurchaseViewSet

from .serializers import OrderCreateSerializer, OrderSerializer, OrderStatusUpdateSerializer


class OrderViewSet(PurchaseViewSet):
    serializer_class = OrderSerializer
    create_serializer_class = OrderCreateSerializer
    status_update_serializer_class = OrderStatusUpdateSerializer
    line_items_prefetch = "items__food"
    purchase_label = "Order"
