from registrations.domain.models import Enrollment, Ticket, TicketStatus, TicketType
from registrations.domain.value_objects import (
    EnrollmentId,
    Money,
    TicketId,
    TicketTypeId,
    UserId,
)

__all__ = [
    "Enrollment",
    "Ticket",
    "TicketStatus",
    "TicketType",
    "UserId",
    "EnrollmentId",
    "TicketId",
    "TicketTypeId",
    "Money",
]
