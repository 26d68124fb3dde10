from core.api import PurchaseViewSet

from .serializers import BookingCreateSerializer, BookingSerializer, BookingStatusUpdateSerializer


class BookingViewSet(PurchaseViewSet):
    serializer_class = BookingSerializer
    create_serializer_class = BookingCreateSerializer
    status_update_serializer_class = BookingStatusUpdateSerializer
    line_items_prefetch = "rides__ride"
    purchase_label = "Booking"
