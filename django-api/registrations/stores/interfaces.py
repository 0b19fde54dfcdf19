"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from registrations.domain import Enrollment, EnrollmentId, Ticket, UserId


class EnrollmentStore(ABC):
    """Interface for enrollment lookups."""

    @abstractmethod
    def find_by_user_id(self, user_id: UserId) -> Enrollment | None:
        """Return the enrollment owned by a user, or None if not enrolled."""
        ...


class TicketStore(ABC):
    """Interface for ticket lookups."""

    @abstractmethod
    def find_by_enrollment_id(self, enrollment_id: EnrollmentId) -> Ticket | None:
        """Return the ticket of an enrollment with its type, or None."""
        ...
