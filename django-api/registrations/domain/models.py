"""Domain models representing persisted registration state.

Django ORM models are in registrations/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from registrations.domain.value_objects import (
    EnrollmentId,
    Money,
    TicketId,
    TicketTypeId,
    UserId,
)


class TicketStatus(Enum):
    """Lifecycle of a ticket purchase."""

    PENDING = "PENDING"
    RESERVED = "RESERVED"
    PAID = "PAID"


@dataclass(frozen=True)
class Enrollment:
    """Domain representation of a user's enrollment in the event."""

    id: EnrollmentId
    user_id: UserId
    created_at: datetime


@dataclass(frozen=True)
class TicketType:
    """Domain representation of a TicketType."""

    id: TicketTypeId
    name: str
    price: Money
    is_remote: bool
    includes_hotel: bool


@dataclass(frozen=True)
class Ticket:
    """Domain representation of a Ticket with its type."""

    id: TicketId
    enrollment_id: EnrollmentId
    status: TicketStatus
    ticket_type: TicketType
    created_at: datetime

    @property
    def is_paid(self) -> bool:
        return self.status is TicketStatus.PAID
