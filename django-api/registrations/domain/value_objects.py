"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class UserId:
    """Identifier of the user owning an enrollment."""

    value: int


@dataclass(frozen=True)
class EnrollmentId:
    """Unique identifier for an Enrollment."""

    value: int


@dataclass(frozen=True)
class TicketId:
    """Unique identifier for a Ticket."""

    value: int


@dataclass(frozen=True)
class TicketTypeId:
    """Unique identifier for a TicketType."""

    value: int


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount:.2f}"
