from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    ROLE_USER = "user"
    ROLE_ADMIN = "admin"
    ROLES = [
        (ROLE_USER, "Visitor"),
        (ROLE_ADMIN, "Administrator"),
    ]

    display_name = models.CharField(max_length=120, blank=True)
    role = models.CharField(max_length=10, choices=ROLES, default=ROLE_USER)

    @property
    def is_park_admin(self) -> bool:
        return self.is_superuser or self.role == self.ROLE_ADMIN
