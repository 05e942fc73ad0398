"""Typed domain errors for the bus seat planner.

All errors inherit from SeatingError and can optionally wrap a root
cause exception for debugging.

A roster line that cannot be parsed is not an error: the parser returns
``None`` for it and the line contributes nothing to the roster.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class SeatingError(Exception):
    """Base error for the seat planner domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidSeatNumberError(SeatingError):
    """One or more seat numbers fall outside the bus.

    Attributes:
        offending_seats: The out-of-range seat numbers, in roster order
    """

    offending_seats: tuple[int, ...] = ()


@dataclass
class DuplicateSeatNumberError(SeatingError):
    """The same seat is claimed by more than one passenger.

    Attributes:
        offending_seats: Each duplicated seat number once, in the order
            the second claim appears in the roster
    """

    offending_seats: tuple[int, ...] = ()


@dataclass
class EmptyRosterInputError(SeatingError):
    """No text was supplied to plan from."""


@dataclass
class NoPassengersFoundError(SeatingError):
    """The text held no line that parses as a passenger.

    Attributes:
        line_count: Number of non-blank lines that were examined
    """

    line_count: int = 0
