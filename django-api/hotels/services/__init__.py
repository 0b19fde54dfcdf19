from hotels.services.eligibility import HotelAccessChecker
from hotels.services.hotel_service import HotelService

__all__ = ["HotelAccessChecker", "HotelService"]
