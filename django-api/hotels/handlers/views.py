"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from hotels.domain.errors import (
    DomainError,
    NotFoundError,
    PaymentRequiredError,
)
from hotels.handlers.serializers import HotelSerializer, HotelWithRoomsSerializer
from hotels.services import HotelAccessChecker, HotelService
from hotels.stores import DjangoHotelStore
from registrations.stores import DjangoEnrollmentStore, DjangoTicketStore

logger = logging.getLogger(__name__)


def build_hotel_service() -> HotelService:
    access = HotelAccessChecker(DjangoEnrollmentStore(), DjangoTicketStore())
    return HotelService(DjangoHotelStore(), access)


def _error_response(error: DomainError) -> Response:
    if isinstance(error, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, PaymentRequiredError):
        status_code = status.HTTP_402_PAYMENT_REQUIRED
    else:
        status_code = status.HTTP_400_BAD_REQUEST
    return Response(
        {"code": error.code.value, "message": error.message}, status=status_code
    )


def _unexpected_error_response() -> Response:
    return Response(
        {"code": "BAD_REQUEST", "message": "The request could not be processed"},
        status=status.HTTP_400_BAD_REQUEST,
    )


class HotelListView(APIView):
    """Handler for GET /hotels"""

    def get(self, request: Request) -> Response:
        service = build_hotel_service()
        try:
            hotels = service.list_hotels(request.user.pk)
        except DomainError as exc:
            return _error_response(exc)
        except Exception:
            logger.exception("Unexpected error listing hotels")
            return _unexpected_error_response()

        return Response(HotelSerializer(hotels, many=True).data)


class HotelDetailView(APIView):
    """Handler for GET /hotels/{hotel_id}"""

    def get(self, request: Request, hotel_id: str) -> Response:
        service = build_hotel_service()
        try:
            hotel = service.get_hotel_detail(request.user.pk, hotel_id)
        except DomainError as exc:
            return _error_response(exc)
        except Exception:
            logger.exception("Unexpected error fetching hotel %s", hotel_id)
            return _unexpected_error_response()

        return Response(HotelWithRoomsSerializer(hotel).data)
