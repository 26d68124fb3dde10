from rest_framework.permissions import SAFE_METHODS, BasePermission


def is_park_admin(user) -> bool:
    if not user or not user.is_authenticated:
        return False
    return bool(getattr(user, "is_park_admin", False))


class IsParkAdmin(BasePermission):
    """
    Allow access only to park administrators.
    Superusers automatically pass.
    """

    message = "Administrator access required."

    def has_permission(self, request, view):
        return is_park_admin(request.user)


class IsParkAdminOrReadOnly(IsParkAdmin):
    """Anyone may read; only administrators may write."""

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True
        return super().has_permission(request, view)
