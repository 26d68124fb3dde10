from django.contrib import admin
from django.urls import include, path
from rest_framework.routers import DefaultRouter
from rest_framework_simplejwt.views import TokenRefreshView

from accounts.api import LoginView, MeView, RegisterView
from bookings.api import BookingViewSet
from food.api import FoodItemViewSet
from orders.api import OrderViewSet
from payments.api import CreatePaymentIntentView, PaymentListView, StripeWebhookView
from rides.api import RideViewSet

router = DefaultRouter()
router.register(r"rides", RideViewSet, basename="ride")
router.register(r"food", FoodItemViewSet, basename="food")
router.register(r"bookings", BookingViewSet, basename="booking")
router.register(r"orders", OrderViewSet, basename="order")

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/auth/register/", RegisterView.as_view(), name="auth-register"),
    path("api/auth/login/", LoginView.as_view(), name="auth-login"),
    path("api/auth/refresh/", TokenRefreshView.as_view(), name="auth-refresh"),
    path("api/auth/me/", MeView.as_view(), name="auth-me"),
    path("api/payments/", PaymentListView.as_view(), name="payment-list"),
    path(
        "api/payments/create-payment-intent/",
        CreatePaymentIntentView.as_view(),
        name="payment-intent-create",
    ),
    path("api/payments/webhook/", StripeWebhookView.as_view(), name="stripe-webhook"),
    path("api/", include(router.urls)),
]
