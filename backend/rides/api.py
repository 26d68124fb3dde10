from core.api import CatalogueViewSet

from .models import Ride
from .serializers import RideSerializer


class RideViewSet(CatalogueViewSet):
    queryset = Ride.objects.all()
    serializer_class = RideSerializer
    filterset_fields = ["thrill_level", "is_available"]
    item_label = "Ride"
