"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True)
class HotelId:
    """Unique identifier for a Hotel."""

    value: int

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=int(value))


@dataclass(frozen=True)
class RoomId:
    """Unique identifier for a Room."""

    value: int


@dataclass(frozen=True)
class RoomCapacity:
    """Number of guests a room sleeps; always at least one."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("Room capacity must be at least 1")
