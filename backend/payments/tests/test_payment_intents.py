import types

import pytest
import stripe

from payments.models import Payment
from payments.services import gateway


@pytest.fixture
def stripe_live(settings):
    settings.STRIPE_USE_STUB = False
    settings.STRIPE_SECRET_KEY = "sk_test_123"
    return settings


@pytest.mark.django_db
def test_stub_mode_returns_predictable_intent(settings, visitor, visitor_client):
    settings.STRIPE_USE_STUB = True
    settings.STRIPE_SECRET_KEY = ""

    response = visitor_client.post(
        "/api/payments/create-payment-intent/", {"amount": "59.98"}, format="json"
    )

    assert response.status_code == 200
    intent_id = response.data["payment_intent_id"]
    assert intent_id.startswith("pi_test_")
    assert response.data["client_secret"].startswith(f"{intent_id}_secret_")

    payment = Payment.objects.get()
    assert payment.user == visitor
    assert payment.amount_cents == 5998
    assert payment.currency == "usd"
    assert payment.stripe_payment_intent == intent_id
    assert payment.status == "requires_payment_method"


@pytest.mark.django_db
def test_intent_uses_stripe_when_configured(monkeypatch, stripe_live, visitor, visitor_client):
    captured = {}

    def fake_create(**kwargs):
        captured["kwargs"] = kwargs
        return types.SimpleNamespace(
            id="pi_real_123",
            client_secret="pi_real_123_secret_abc",
            status="requires_payment_method",
        )

    monkeypatch.setattr(stripe.PaymentIntent, "create", fake_create)

    response = visitor_client.post(
        "/api/payments/create-payment-intent/",
        {"amount": 12.5, "currency": "EUR", "metadata": {"cart": "summer", "user_id": "1"}},
        format="json",
    )

    assert response.status_code == 200
    assert response.data == {
        "client_secret": "pi_real_123_secret_abc",
        "payment_intent_id": "pi_real_123",
    }
    kwargs = captured["kwargs"]
    assert kwargs["amount"] == 1250
    assert kwargs["currency"] == "eur"
    assert kwargs["api_key"] == "sk_test_123"
    # the caller can never pick another owner for the intent
    assert kwargs["metadata"] == {"cart": "summer", "user_id": str(visitor.pk)}
    assert Payment.objects.get().stripe_payment_intent == "pi_real_123"


@pytest.mark.django_db
def test_intent_rounds_amount_to_nearest_cent(monkeypatch, stripe_live, visitor_client):
    captured = {}

    def fake_create(**kwargs):
        captured.update(kwargs)
        return types.SimpleNamespace(id="pi_round", client_secret="s", status="requires_payment_method")

    monkeypatch.setattr(stripe.PaymentIntent, "create", fake_create)

    response = visitor_client.post(
        "/api/payments/create-payment-intent/", {"amount": "19.99"}, format="json"
    )

    assert response.status_code == 200
    assert captured["amount"] == 1999


@pytest.mark.django_db
@pytest.mark.parametrize("payload", [{}, {"amount": 0}, {"amount": "-5"}, {"amount": "abc"}])
def test_invalid_amount_is_rejected(visitor_client, payload):
    response = visitor_client.post(
        "/api/payments/create-payment-intent/", payload, format="json"
    )

    assert response.status_code == 400
    assert "amount" in response.data
    assert not Payment.objects.exists()


@pytest.mark.django_db
def test_gateway_failure_returns_500(monkeypatch, stripe_live, visitor_client):
    def failing_create(**kwargs):
        raise stripe.APIConnectionError("Network unreachable")

    monkeypatch.setattr(stripe.PaymentIntent, "create", failing_create)

    response = visitor_client.post(
        "/api/payments/create-payment-intent/", {"amount": "10.00"}, format="json"
    )

    assert response.status_code == 500
    assert response.data["detail"] == "Error creating payment intent"
    assert "Network unreachable" in response.data["error"]
    assert not Payment.objects.exists()


@pytest.mark.django_db
def test_intent_requires_authentication(anon_client):
    response = anon_client.post(
        "/api/payments/create-payment-intent/", {"amount": "10.00"}, format="json"
    )
    assert response.status_code == 401


def test_gateway_falls_back_to_stub_without_api_key():
    stripe_gateway = gateway.StripeGateway(api_key="", webhook_secret="whsec", use_stub=False)

    intent = stripe_gateway.create_payment_intent(amount_cents=500, currency="usd", metadata={"user_id": "7"})

    assert stripe_gateway.use_stub is True
    assert isinstance(intent, gateway.PaymentIntentStub)
    assert intent.amount == 500
    assert intent.metadata == {"user_id": "7"}


@pytest.mark.django_db
def test_payment_list_shows_only_callers_intents(visitor_client, other_visitor, paid_intent, open_intent):
    Payment.objects.create(
        user=other_visitor,
        amount_cents=100,
        stripe_payment_intent="pi_test_someone_else",
        status="requires_payment_method",
    )

    response = visitor_client.get("/api/payments/")

    assert response.status_code == 200
    assert {item["stripe_payment_intent"] for item in response.data} == {"pi_test_paid", "pi_test_open"}
    assert response.data[0]["amount_cents"] == 5998


@pytest.mark.django_db
def test_payment_list_requires_authentication(anon_client):
    assert anon_client.get("/api/payments/").status_code == 401
