from core.api import CatalogueViewSet

from .models import FoodItem
from .serializers import FoodItemSerializer


class FoodItemViewSet(CatalogueViewSet):
    queryset = FoodItem.objects.all()
    serializer_class = FoodItemSerializer
    filterset_fields = ["category", "is_vegetarian", "is_available"]
    item_label = "Food item"
