from hotels.domain.models import Hotel, Room
from hotels.domain.value_objects import HotelId, RoomCapacity, RoomId

__all__ = [
    "Hotel",
    "Room",
    "HotelId",
    "RoomId",
    "RoomCapacity",
]
