from decimal import Decimal

import pytest

from bookings.models import Booking, BookingRide
from rides.models import Ride


def _booking_payload(ride, visit_date, quantity=2, **overrides):
    payload = {
        "rides": [{"ride": ride.id, "date": visit_date.isoformat(), "quantity": quantity}],
        "payment_method": Booking.CREDIT_CARD,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def booking(visitor, ride, visit_date):
    booking = Booking.objects.create(
        user=visitor,
        total_amount=Decimal("29.99"),
        payment_method=Booking.CREDIT_CARD,
        payment_id="pi_test_existing",
    )
    BookingRide.objects.create(booking=booking, ride=ride, date=visit_date, quantity=1, price=ride.price)
    return booking


@pytest.mark.django_db
def test_create_booking_prices_lines_from_catalogue(visitor_client, visitor, ride, visit_date, paid_intent):
    response = visitor_client.post(
        "/api/bookings/",
        _booking_payload(ride, visit_date, payment_id=paid_intent.stripe_payment_intent),
        format="json",
    )

    assert response.status_code == 201
    body = response.data
    assert body["total_amount"] == Decimal("59.98")
    assert body["status"] == Booking.CONFIRMED
    assert body["payment_status"] == Booking.COMPLETED
    assert body["user"]["email"] == visitor.email
    assert body["rides"][0]["ride"] == ride.id
    assert body["rides"][0]["price"] == Decimal("29.99")
    assert body["rides"][0]["subtotal"] == Decimal("59.98")

    booking = Booking.objects.get()
    assert booking.user == visitor
    assert booking.payment_id == "pi_test_paid"


@pytest.mark.django_db
def test_create_booking_without_payment_id_is_pending(visitor_client, ride, visit_date):
    response = visitor_client.post(
        "/api/bookings/", _booking_payload(ride, visit_date), format="json"
    )

    assert response.status_code == 201
    assert response.data["payment_status"] == Booking.PENDING
    assert response.data["payment_id"] == ""


@pytest.mark.django_db
def test_booking_against_unpaid_intent_stays_pending(visitor_client, ride, visit_date, open_intent):
    response = visitor_client.post(
        "/api/bookings/",
        _booking_payload(ride, visit_date, payment_id=open_intent.stripe_payment_intent),
        format="json",
    )

    assert response.status_code == 201
    assert response.data["payment_status"] == Booking.PENDING
    assert response.data["payment_id"] == "pi_test_open"


@pytest.mark.django_db
def test_booking_with_unknown_payment_id_is_rejected(visitor_client, ride, visit_date):
    response = visitor_client.post(
        "/api/bookings/",
        _booking_payload(ride, visit_date, payment_id="pi_i_made_this_up"),
        format="json",
    )

    assert response.status_code == 400
    assert "payment_id" in response.data
    assert not Booking.objects.exists()


@pytest.mark.django_db
def test_booking_with_someone_elses_payment_is_rejected(other_client, ride, visit_date, paid_intent):
    response = other_client.post(
        "/api/bookings/",
        _booking_payload(ride, visit_date, payment_id=paid_intent.stripe_payment_intent),
        format="json",
    )

    assert response.status_code == 400
    assert "payment_id" in response.data
    assert not Booking.objects.exists()


@pytest.mark.django_db
def test_client_supplied_prices_are_ignored(visitor_client, ride, visit_date):
    payload = _booking_payload(ride, visit_date, total_amount="0.01")
    payload["rides"][0]["price"] = "0.01"

    response = visitor_client.post("/api/bookings/", payload, format="json")

    assert response.status_code == 201
    assert response.data["total_amount"] == Decimal("59.98")
    assert BookingRide.objects.get().price == Decimal("29.99")


@pytest.mark.django_db
def test_booking_total_spans_several_rides(visitor_client, ride, visit_date):
    river = Ride.objects.create(
        name="River Rapids",
        description="Rushing waters.",
        image="https://images.test/rapids.jpeg",
        price=Decimal("24.99"),
        thrill_level=Ride.MODERATE,
        min_height=120,
        duration=8,
        capacity=6,
    )
    payload = {
        "rides": [
            {"ride": ride.id, "date": visit_date.isoformat(), "quantity": 1},
            {"ride": river.id, "date": visit_date.isoformat(), "quantity": 3},
        ],
        "payment_method": Booking.PAYPAL,
    }

    response = visitor_client.post("/api/bookings/", payload, format="json")

    assert response.status_code == 201
    assert response.data["total_amount"] == Decimal("104.96")
    assert len(response.data["rides"]) == 2


@pytest.mark.django_db
@pytest.mark.parametrize("rides", [[], None])
def test_booking_without_rides_is_rejected(visitor_client, rides):
    payload = {"payment_method": Booking.CREDIT_CARD}
    if rides is not None:
        payload["rides"] = rides

    response = visitor_client.post("/api/bookings/", payload, format="json")

    assert response.status_code == 400
    assert "No rides selected for booking" in str(response.data["rides"])
    assert not Booking.objects.exists()


@pytest.mark.django_db
def test_booking_unavailable_ride_is_rejected(visitor_client, ride, visit_date):
    ride.is_available = False
    ride.save()

    response = visitor_client.post(
        "/api/bookings/", _booking_payload(ride, visit_date), format="json"
    )

    assert response.status_code == 400
    assert not Booking.objects.exists()


@pytest.mark.django_db
def test_booking_zero_quantity_is_rejected(visitor_client, ride, visit_date):
    response = visitor_client.post(
        "/api/bookings/", _booking_payload(ride, visit_date, quantity=0), format="json"
    )

    assert response.status_code == 400
    assert not Booking.objects.exists()


@pytest.mark.django_db
def test_booking_requires_authentication(anon_client, ride, visit_date):
    response = anon_client.post(
        "/api/bookings/", _booking_payload(ride, visit_date), format="json"
    )
    assert response.status_code == 401


@pytest.mark.django_db
def test_list_returns_only_callers_bookings(visitor_client, other_client, booking):
    own = visitor_client.get("/api/bookings/")
    other = other_client.get("/api/bookings/")

    assert [item["id"] for item in own.data] == [booking.id]
    assert other.data == []


@pytest.mark.django_db
def test_owner_can_view_booking(visitor_client, booking):
    response = visitor_client.get(f"/api/bookings/{booking.id}/")

    assert response.status_code == 200
    assert response.data["rides"][0]["ride_detail"]["name"] == "Tsunami Twister"


@pytest.mark.django_db
def test_other_visitor_cannot_view_booking(other_client, booking):
    response = other_client.get(f"/api/bookings/{booking.id}/")

    assert response.status_code == 403
    assert response.data["detail"] == "Not authorized to view this booking"
    assert "rides" not in response.data


@pytest.mark.django_db
def test_admin_can_view_any_booking(admin_client, booking):
    assert admin_client.get(f"/api/bookings/{booking.id}/").status_code == 200


@pytest.mark.django_db
def test_missing_booking_returns_404(visitor_client):
    assert visitor_client.get("/api/bookings/31337/").status_code == 404


@pytest.mark.django_db
def test_owner_can_cancel_confirmed_booking(visitor_client, booking):
    response = visitor_client.delete(f"/api/bookings/{booking.id}/")

    assert response.status_code == 200
    assert response.data == {"detail": "Booking cancelled successfully"}
    listed = visitor_client.get("/api/bookings/").data
    assert listed[0]["status"] == Booking.CANCELLED
    assert Booking.objects.filter(id=booking.id).exists()


@pytest.mark.django_db
def test_completed_booking_cannot_be_cancelled(visitor_client, booking):
    booking.status = Booking.COMPLETED
    booking.save()

    response = visitor_client.delete(f"/api/bookings/{booking.id}/")

    assert response.status_code == 400
    assert response.data["detail"] == "Cannot cancel a completed booking"
    booking.refresh_from_db()
    assert booking.status == Booking.COMPLETED


@pytest.mark.django_db
def test_other_visitor_cannot_cancel_booking(other_client, booking):
    response = other_client.delete(f"/api/bookings/{booking.id}/")

    assert response.status_code == 403
    booking.refresh_from_db()
    assert booking.status == Booking.CONFIRMED


@pytest.mark.django_db
def test_admin_can_update_booking_status(admin_client, booking):
    response = admin_client.put(
        f"/api/bookings/{booking.id}/",
        {"status": Booking.COMPLETED},
        format="json",
    )

    assert response.status_code == 200
    assert response.data["status"] == Booking.COMPLETED
    booking.refresh_from_db()
    assert booking.status == Booking.COMPLETED
    assert booking.payment_status == Booking.PENDING


@pytest.mark.django_db
def test_admin_update_rejects_unknown_status(admin_client, booking):
    response = admin_client.patch(
        f"/api/bookings/{booking.id}/", {"status": "Teleported"}, format="json"
    )

    assert response.status_code == 400
    booking.refresh_from_db()
    assert booking.status == Booking.CONFIRMED


@pytest.mark.django_db
def test_owner_cannot_update_booking(visitor_client, booking):
    response = visitor_client.patch(
        f"/api/bookings/{booking.id}/", {"payment_status": Booking.COMPLETED}, format="json"
    )

    assert response.status_code == 403
    booking.refresh_from_db()
    assert booking.payment_status == Booking.PENDING


@pytest.mark.django_db
def test_admin_lists_all_bookings(admin_client, other_client, booking, ride, visit_date):
    other_client.post("/api/bookings/", _booking_payload(ride, visit_date), format="json")

    response = admin_client.get("/api/bookings/admin/all/")

    assert response.status_code == 200
    assert len(response.data) == 2
    assert {item["user"]["email"] for item in response.data} == {
        "vera@example.com",
        "olly@example.com",
    }


@pytest.mark.django_db
def test_visitor_cannot_list_all_bookings(visitor_client, booking):
    assert visitor_client.get("/api/bookings/admin/all/").status_code == 403
