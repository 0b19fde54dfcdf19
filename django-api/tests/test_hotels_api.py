"""Integration tests for the hotels endpoints.

Run with: pytest tests/test_hotels_api.py -v
"""

import pytest
from rest_framework import status
from rest_framework.test import APIClient

from factories import (
    create_eligible_user,
    create_enrollment,
    create_hotel,
    create_hotel_with_rooms,
    create_ok_ticket_type,
    create_remote_ticket_type,
    create_ticket,
    create_ticket_type_without_hotel,
    create_user,
    generate_valid_token,
)
from registrations.models import Ticket


def authorize(client: APIClient, token: str) -> APIClient:
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    return client


def token_with_ticket(ticket_type_factory, status_value: str) -> str:
    user = create_user()
    token = generate_valid_token(user)
    enrollment = create_enrollment(user)
    create_ticket(enrollment, ticket_type_factory(), status_value)
    return token


@pytest.mark.django_db
@pytest.mark.parametrize("url", ["/hotels", "/hotels/1"])
class TestAuthentication:
    """Unauthenticated requests to every hotels endpoint."""

    def test_no_token_returns_401(self, api_client: APIClient, url):
        """Given no token, returns 401."""
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response["WWW-Authenticate"] == "Bearer"

    def test_malformed_token_returns_401(self, api_client: APIClient, url):
        """Given a header without credentials, returns 401."""
        api_client.credentials(HTTP_AUTHORIZATION="Bearer")

        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_unknown_token_returns_401(self, api_client: APIClient, url):
        """Given a token that was never issued, returns 401."""
        response = authorize(api_client, "not-a-real-token").get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_token_without_session_returns_401(self, api_client: APIClient, url):
        """Given a token whose session ended, returns 401."""
        user = create_user()
        key = generate_valid_token(user)
        user.auth_token.delete()

        response = authorize(api_client, key).get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestHotelList:
    """Tests for GET /hotels"""

    def test_empty_list_when_no_hotels(self, api_client: APIClient):
        """Given no hotels, returns an empty list."""
        response = authorize(api_client, create_eligible_user()).get("/hotels")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_returns_hotels(self, api_client: APIClient):
        """Given a hotel exists, returns it without rooms."""
        token = create_eligible_user()
        hotel = create_hotel()

        response = authorize(api_client, token).get("/hotels")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert len(body) == 1
        assert body[0]["id"] == hotel.pk
        assert body[0]["name"] == hotel.name
        assert body[0]["image"] == hotel.image
        assert body[0]["createdAt"].startswith(hotel.created_at.strftime("%Y-%m-%dT%H:%M:%S"))
        assert "updatedAt" in body[0]
        assert "Rooms" not in body[0]

    def test_returns_every_stored_hotel(self, api_client: APIClient):
        """Given several hotels, returns all of them."""
        token = create_eligible_user()
        hotels = [create_hotel() for _ in range(3)]

        response = authorize(api_client, token).get("/hotels")

        assert {h["id"] for h in response.json()} == {h.pk for h in hotels}

    def test_not_enrolled_returns_404(self, api_client: APIClient):
        """Given no enrollment, returns 404."""
        response = authorize(api_client, generate_valid_token()).get("/hotels")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["code"] == "ENROLLMENT_NOT_FOUND"

    def test_no_ticket_returns_404(self, api_client: APIClient):
        """Given an enrollment without ticket, returns 404."""
        user = create_user()
        token = generate_valid_token(user)
        create_enrollment(user)

        response = authorize(api_client, token).get("/hotels")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["code"] == "TICKET_NOT_FOUND"

    @pytest.mark.parametrize("ticket_status", [Ticket.Status.RESERVED, Ticket.Status.PENDING])
    def test_unpaid_ticket_returns_402(self, api_client: APIClient, ticket_status):
        """Given an unpaid ticket, returns 402."""
        token = token_with_ticket(create_ok_ticket_type, ticket_status)

        response = authorize(api_client, token).get("/hotels")

        assert response.status_code == status.HTTP_402_PAYMENT_REQUIRED

    def test_ticket_without_hotel_returns_402(self, api_client: APIClient):
        """Given a ticket type without hotel, returns 402."""
        token = token_with_ticket(create_ticket_type_without_hotel, Ticket.Status.PAID)

        response = authorize(api_client, token).get("/hotels")

        assert response.status_code == status.HTTP_402_PAYMENT_REQUIRED

    def test_remote_ticket_returns_402(self, api_client: APIClient):
        """Given a remote ticket type, returns 402."""
        token = token_with_ticket(create_remote_ticket_type, Ticket.Status.PAID)

        response = authorize(api_client, token).get("/hotels")

        assert response.status_code == status.HTTP_402_PAYMENT_REQUIRED


@pytest.mark.django_db
class TestHotelDetail:
    """Tests for GET /hotels/{hotel_id}"""

    def test_returns_hotel_with_rooms(self, api_client: APIClient):
        """Given a hotel with five rooms, returns it with those rooms."""
        token = create_eligible_user()
        hotel = create_hotel_with_rooms(rooms=5)

        response = authorize(api_client, token).get(f"/hotels/{hotel.pk}")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["id"] == hotel.pk
        assert body["name"] == hotel.name
        assert body["image"] == hotel.image
        assert isinstance(body["createdAt"], str)
        assert isinstance(body["updatedAt"], str)
        assert len(body["Rooms"]) == 5
        for room in body["Rooms"]:
            assert room["hotelId"] == hotel.pk
            assert isinstance(room["id"], int)
            assert isinstance(room["name"], str)
            assert 1 <= room["capacity"] <= 4
            assert isinstance(room["createdAt"], str)
            assert isinstance(room["updatedAt"], str)

    def test_hotel_without_rooms_has_empty_room_list(self, api_client: APIClient):
        """Given a hotel without rooms, returns an empty Rooms list."""
        token = create_eligible_user()
        hotel = create_hotel()

        response = authorize(api_client, token).get(f"/hotels/{hotel.pk}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["Rooms"] == []

    def test_nonexistent_hotel_returns_404(self, api_client: APIClient):
        """Given an unknown hotel id, returns 404."""
        token = create_eligible_user()
        hotel = create_hotel_with_rooms()

        response = authorize(api_client, token).get(f"/hotels/{hotel.pk + 1000}")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["code"] == "HOTEL_NOT_FOUND"

    def test_invalid_hotel_id_returns_400(self, api_client: APIClient):
        """Given a non-integer hotel id, returns 400."""
        response = authorize(api_client, create_eligible_user()).get("/hotels/abc")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["code"] == "INVALID_HOTEL_ID"

    @pytest.mark.parametrize("hotel_id", ["0", "-1"])
    def test_non_positive_hotel_id_returns_404(self, api_client: APIClient, hotel_id):
        """Given a zero or negative hotel id, returns 404."""
        create_hotel_with_rooms()

        response = authorize(api_client, create_eligible_user()).get(f"/hotels/{hotel_id}")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["code"] == "HOTEL_NOT_FOUND"

    def test_not_enrolled_returns_404(self, api_client: APIClient):
        """Given no enrollment, returns 404."""
        hotel = create_hotel_with_rooms()

        response = authorize(api_client, generate_valid_token()).get(f"/hotels/{hotel.pk}")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_no_ticket_returns_404(self, api_client: APIClient):
        """Given an enrollment without ticket, returns 404."""
        user = create_user()
        token = generate_valid_token(user)
        create_enrollment(user)
        hotel = create_hotel_with_rooms()

        response = authorize(api_client, token).get(f"/hotels/{hotel.pk}")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_unpaid_ticket_returns_402(self, api_client: APIClient):
        """Given a reserved ticket, returns 402."""
        token = token_with_ticket(create_ok_ticket_type, Ticket.Status.RESERVED)
        hotel = create_hotel_with_rooms()

        response = authorize(api_client, token).get(f"/hotels/{hotel.pk}")

        assert response.status_code == status.HTTP_402_PAYMENT_REQUIRED

    def test_ticket_without_hotel_returns_402(self, api_client: APIClient):
        """Given a ticket type without hotel, returns 402."""
        token = token_with_ticket(create_ticket_type_without_hotel, Ticket.Status.PAID)
        hotel = create_hotel_with_rooms()

        response = authorize(api_client, token).get(f"/hotels/{hotel.pk}")

        assert response.status_code == status.HTTP_402_PAYMENT_REQUIRED

    def test_remote_ticket_returns_402(self, api_client: APIClient):
        """Given a remote ticket type, returns 402."""
        token = token_with_ticket(create_remote_ticket_type, Ticket.Status.PAID)
        hotel = create_hotel_with_rooms()

        response = authorize(api_client, token).get(f"/hotels/{hotel.pk}")

        assert response.status_code == status.HTTP_402_PAYMENT_REQUIRED


@pytest.mark.django_db
class TestUnexpectedErrors:
    """Unexpected failures surface as a generic 400."""

    def test_store_failure_returns_400(self, api_client: APIClient, monkeypatch):
        """Given a store failure while listing, returns a generic 400."""
        token = create_eligible_user()

        def explode(self):
            raise RuntimeError("database went away")

        monkeypatch.setattr("hotels.stores.django_store.DjangoHotelStore.find_all", explode)

        response = authorize(api_client, token).get("/hotels")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "database" not in response.content.decode()

    def test_store_failure_on_detail_returns_400(self, api_client: APIClient, monkeypatch):
        """Given a store failure while fetching a hotel, returns a generic 400."""
        token = create_eligible_user()
        hotel = create_hotel_with_rooms()

        def explode(self, hotel_id):
            raise RuntimeError("database went away")

        monkeypatch.setattr(
            "hotels.stores.django_store.DjangoHotelStore.find_by_id_with_rooms", explode
        )

        response = authorize(api_client, token).get(f"/hotels/{hotel.pk}")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["code"] == "BAD_REQUEST"
        assert "database" not in response.content.decode()
