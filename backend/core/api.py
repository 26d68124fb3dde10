import logging

from django.db.models import ProtectedError
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import PermissionDenied
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from accounts.permissions import IsParkAdmin, IsParkAdminOrReadOnly, is_park_admin

logger = logging.getLogger(__name__)


class CatalogueViewSet(viewsets.ModelViewSet):
    """
    Shared behaviour for the ride and food catalogues.

    Anyone may browse; visitors only see items flagged as available while
    administrators see the whole catalogue. Writes are admin-only and updates
    are always partial so omitted fields keep their stored values.
    """

    permission_classes = [IsParkAdminOrReadOnly]
    search_fields = ["name", "description"]
    ordering_fields = ["name", "price", "created_at"]
    item_label = "Item"

    def get_queryset(self):
        queryset = self.queryset.all()
        if self.action == "list" and not is_park_admin(self.request.user):
            queryset = queryset.filter(is_available=True)
        return queryset

    def update(self, request, *args, **kwargs):
        kwargs["partial"] = True
        return super().update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        try:
            instance.delete()
        except ProtectedError:
            return Response(
                {
                    "detail": f"{self.item_label} is referenced by existing purchases; "
                    "mark it unavailable instead."
                },
                status=status.HTTP_400_BAD_REQUEST,
            )
        logger.info("%s %s removed by %s", self.item_label, instance.pk, request.user.pk)
        return Response({"detail": f"{self.item_label} removed"}, status=status.HTTP_200_OK)


class PurchaseViewSet(viewsets.ModelViewSet):
    """
    Shared behaviour for bookings and orders.

    Owners list and create their own purchases. Reading or cancelling a single
    purchase is limited to its owner or an administrator. Status changes are
    admin-only, and deleting only ever cancels.
    """

    permission_classes = [IsAuthenticated]
    filter_backends: list = []
    purchase_label = "Purchase"
    create_serializer_class = None
    line_items_prefetch = ""
    status_update_serializer_class = None

    def get_queryset(self):
        model = self.serializer_class.Meta.model
        queryset = model.objects.select_related("user").order_by("-created_at")
        if self.line_items_prefetch:
            queryset = queryset.prefetch_related(self.line_items_prefetch)
        if self.action == "list":
            return queryset.filter(user=self.request.user)
        return queryset

    def get_serializer_class(self):
        if self.action == "create":
            return self.create_serializer_class
        if self.action in {"update", "partial_update"}:
            return self.status_update_serializer_class
        return super().get_serializer_class()

    def _ensure_owner_or_admin(self, purchase, verb: str):
        if purchase.user_id != self.request.user.pk and not is_park_admin(self.request.user):
            raise PermissionDenied(
                f"Not authorized to {verb} this {self.purchase_label.lower()}"
            )

    def retrieve(self, request, *args, **kwargs):
        purchase = self.get_object()
        self._ensure_owner_or_admin(purchase, "view")
        return Response(self.get_serializer(purchase).data)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        purchase = serializer.save(user=request.user)
        output = self.serializer_class(purchase, context=self.get_serializer_context())
        return Response(output.data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        if not is_park_admin(request.user):
            raise PermissionDenied(
                f"Only administrators can update {self.purchase_label.lower()}s"
            )
        purchase = self.get_object()
        serializer = self.get_serializer(purchase, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        purchase = serializer.save()
        logger.info(
            "%s %s updated by admin %s: %s",
            self.purchase_label,
            purchase.pk,
            request.user.pk,
            serializer.validated_data,
        )
        return Response(self.serializer_class(purchase, context=self.get_serializer_context()).data)

    def destroy(self, request, *args, **kwargs):
        purchase = self.get_object()
        self._ensure_owner_or_admin(purchase, "cancel")

        if not purchase.can_cancel:
            return Response(
                {"detail": f"Cannot cancel a {purchase.status.lower()} {self.purchase_label.lower()}"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        purchase.cancel()
        return Response({"detail": f"{self.purchase_label} cancelled successfully"})

    @action(detail=False, methods=["get"], url_path="admin/all", permission_classes=[IsAuthenticated, IsParkAdmin])
    def admin_all(self, request):
        queryset = self.get_queryset()
        serializer = self.serializer_class(queryset, many=True, context=self.get_serializer_context())
        return Response(serializer.data)
