"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from hotels.domain import Hotel, HotelId


class HotelStore(ABC):
    """Interface for hotel persistence operations."""

    @abstractmethod
    def find_all(self) -> list[Hotel]:
        """Return all hotels without rooms, ordered by id ascending."""
        ...

    @abstractmethod
    def find_by_id_with_rooms(self, hotel_id: HotelId) -> Hotel | None:
        """Return a hotel with its rooms, or None if not found."""
        ...
