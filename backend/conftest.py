from datetime import date, timedelta
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from accounts.models import User
from food.models import FoodItem
from payments.models import Payment
from rides.models import Ride


def _create_user(email: str, role: str = User.ROLE_USER) -> User:
    return User.objects.create_user(
        username=email,
        email=email,
        password="examplepass",
        first_name=email.split("@")[0].title(),
        role=role,
    )


@pytest.fixture
def visitor(db):
    return _create_user("vera@example.com")


@pytest.fixture
def other_visitor(db):
    return _create_user("olly@example.com")


@pytest.fixture
def park_admin(db):
    return _create_user("admin@example.com", role=User.ROLE_ADMIN)


@pytest.fixture
def anon_client():
    return APIClient()


@pytest.fixture
def visitor_client(visitor):
    client = APIClient()
    client.force_authenticate(visitor)
    return client


@pytest.fixture
def other_client(other_visitor):
    client = APIClient()
    client.force_authenticate(other_visitor)
    return client


@pytest.fixture
def admin_client(park_admin):
    client = APIClient()
    client.force_authenticate(park_admin)
    return client


@pytest.fixture
def ride(db):
    return Ride.objects.create(
        name="Tsunami Twister",
        description="Spiral through a water funnel.",
        image="https://images.test/tsunami.jpeg",
        price=Decimal("29.99"),
        thrill_level=Ride.EXTREME,
        min_height=140,
        duration=3,
        capacity=4,
    )


@pytest.fixture
def food_item(db):
    return FoodItem.objects.create(
        name="Classic Burger",
        description="Beef patty with the works.",
        image="https://images.test/burger.jpeg",
        price=Decimal("12.99"),
        category=FoodItem.MAIN_COURSE,
        preparation_time=15,
    )


@pytest.fixture
def visit_date():
    return date.today() + timedelta(days=14)


@pytest.fixture
def paid_intent(visitor):
    return Payment.objects.create(
        user=visitor,
        amount_cents=5998,
        stripe_payment_intent="pi_test_paid",
        status=Payment.SUCCEEDED,
    )


@pytest.fixture
def open_intent(visitor):
    return Payment.objects.create(
        user=visitor,
        amount_cents=5998,
        stripe_payment_intent="pi_test_open",
        status="requires_payment_method",
    )
