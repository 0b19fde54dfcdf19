"""Domain error codes for hotel access."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    ENROLLMENT_NOT_FOUND = "ENROLLMENT_NOT_FOUND"
    TICKET_NOT_FOUND = "TICKET_NOT_FOUND"
    HOTEL_NOT_FOUND = "HOTEL_NOT_FOUND"
    TICKET_EXCLUDES_HOTEL = "TICKET_EXCLUDES_HOTEL"
    TICKET_IS_REMOTE = "TICKET_IS_REMOTE"
    TICKET_NOT_PAID = "TICKET_NOT_PAID"
    INVALID_HOTEL_ID = "INVALID_HOTEL_ID"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class NotFoundError(DomainError):
    """Base for lookups that found nothing."""


class EnrollmentNotFoundError(NotFoundError):
    """Raised when the user has no enrollment."""

    def __init__(self, user_id: int) -> None:
        super().__init__(
            code=ErrorCode.ENROLLMENT_NOT_FOUND,
            message="Enrollment not found",
        )
        self.user_id = user_id


class TicketNotFoundError(NotFoundError):
    """Raised when the enrollment has no ticket."""

    def __init__(self, enrollment_id: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_FOUND,
            message="Ticket not found",
        )
        self.enrollment_id = enrollment_id


class HotelNotFoundError(NotFoundError):
    """Raised when a hotel is not found."""

    def __init__(self, hotel_id: int) -> None:
        super().__init__(
            code=ErrorCode.HOTEL_NOT_FOUND,
            message="Hotel not found",
        )
        self.hotel_id = hotel_id


class PaymentRequiredError(DomainError):
    """Raised when the ticket exists but does not entitle hotel access."""

    def __init__(self, code: ErrorCode) -> None:
        super().__init__(
            code=code,
            message="The requested content is not available until the client makes a payment",
        )


class InvalidHotelIdError(DomainError):
    """Raised when a hotel ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_HOTEL_ID,
            message="Invalid hotel ID format",
        )
