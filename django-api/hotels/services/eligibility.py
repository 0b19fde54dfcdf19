"""Eligibility gate for hotel browsing.

Only a user holding a paid, non-remote, hotel-inclusive ticket may view
hotel data. Checks run in a fixed order and the first failure is reported.
"""

import logging

from hotels.domain.errors import (
    EnrollmentNotFoundError,
    ErrorCode,
    PaymentRequiredError,
    TicketNotFoundError,
)
from registrations.domain import Ticket, UserId
from registrations.stores.interfaces import EnrollmentStore, TicketStore

logger = logging.getLogger(__name__)


class HotelAccessChecker:
    """Decides whether a user may view hotels."""

    def __init__(self, enrollments: EnrollmentStore, tickets: TicketStore) -> None:
        self._enrollments = enrollments
        self._tickets = tickets

    def check_hotel_access(self, user_id: int) -> None:
        """Return normally when the user is entitled to hotel data.

        Raises:
            EnrollmentNotFoundError: If the user has no enrollment.
            TicketNotFoundError: If the enrollment has no ticket.
            PaymentRequiredError: If the ticket does not entitle hotel access.
        """
        enrollment = self._enrollments.find_by_user_id(UserId(user_id))
        if enrollment is None:
            logger.info("Hotel access denied for user %s: no enrollment", user_id)
            raise EnrollmentNotFoundError(user_id)

        ticket = self._tickets.find_by_enrollment_id(enrollment.id)
        if ticket is None:
            logger.info("Hotel access denied for user %s: no ticket", user_id)
            raise TicketNotFoundError(enrollment.id.value)

        reason = _payment_block_reason(ticket)
        if reason is not None:
            logger.info("Hotel access denied for user %s: %s", user_id, reason.value)
            raise PaymentRequiredError(reason)


def _payment_block_reason(ticket: Ticket) -> ErrorCode | None:
    if not ticket.ticket_type.includes_hotel:
        return ErrorCode.TICKET_EXCLUDES_HOTEL
    if ticket.ticket_type.is_remote:
        return ErrorCode.TICKET_IS_REMOTE
    if not ticket.is_paid:
        return ErrorCode.TICKET_NOT_PAID
    return None
