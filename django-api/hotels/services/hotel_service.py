"""Hotel service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from hotels.domain import Hotel, HotelId
from hotels.domain.errors import HotelNotFoundError, InvalidHotelIdError
from hotels.services.eligibility import HotelAccessChecker
from hotels.stores.interfaces import HotelStore


class HotelService:
    """Service for browsing hotels and their rooms."""

    def __init__(self, store: HotelStore, access: HotelAccessChecker) -> None:
        self._store = store
        self._access = access

    def list_hotels(self, user_id: int) -> list[Hotel]:
        """Return all hotels.

        Raises:
            NotFoundError: If the user has no enrollment or no ticket.
            PaymentRequiredError: If the user's ticket does not cover hotels.
        """
        self._access.check_hotel_access(user_id)
        return self._store.find_all()

    def get_hotel_detail(self, user_id: int, hotel_id: str) -> Hotel:
        """Return a hotel by ID with its rooms.

        Raises:
            NotFoundError: If the user has no enrollment or no ticket.
            PaymentRequiredError: If the user's ticket does not cover hotels.
            InvalidHotelIdError: If the hotel_id is not an integer.
            HotelNotFoundError: If the hotel does not exist.
        """
        self._access.check_hotel_access(user_id)

        try:
            parsed_id = HotelId.from_string(hotel_id)
        except ValueError as exc:
            raise InvalidHotelIdError() from exc

        hotel = self._store.find_by_id_with_rooms(parsed_id)
        if hotel is None:
            raise HotelNotFoundError(parsed_id.value)
        return hotel
