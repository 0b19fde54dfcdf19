"""Django ORM implementations of the registration stores."""

from decimal import Decimal

from registrations import models
from registrations.domain import (
    Enrollment,
    EnrollmentId,
    Money,
    Ticket,
    TicketId,
    TicketStatus,
    TicketType,
    TicketTypeId,
    UserId,
)
from registrations.stores.interfaces import EnrollmentStore, TicketStore


def _to_ticket_type(row: models.TicketType) -> TicketType:
    return TicketType(
        id=TicketTypeId(row.pk),
        name=row.name,
        price=Money(Decimal(row.price)),
        is_remote=row.is_remote,
        includes_hotel=row.includes_hotel,
    )


class DjangoEnrollmentStore(EnrollmentStore):
    """Enrollment store backed by the Django ORM."""

    def find_by_user_id(self, user_id: UserId) -> Enrollment | None:
        row = models.Enrollment.objects.filter(user_id=user_id.value).first()
        if row is None:
            return None
        return Enrollment(
            id=EnrollmentId(row.pk),
            user_id=UserId(row.user_id),
            created_at=row.created_at,
        )


class DjangoTicketStore(TicketStore):
    """Ticket store backed by the Django ORM."""

    def find_by_enrollment_id(self, enrollment_id: EnrollmentId) -> Ticket | None:
        row = (
            models.Ticket.objects.select_related("ticket_type")
            .filter(enrollment_id=enrollment_id.value)
            .first()
        )
        if row is None:
            return None
        return Ticket(
            id=TicketId(row.pk),
            enrollment_id=EnrollmentId(row.enrollment_id),
            status=TicketStatus(row.status),
            ticket_type=_to_ticket_type(row.ticket_type),
            created_at=row.created_at,
        )
