"""Seating ports - Contracts for roster parsing and seat resolution.

These protocols let SeatingService run against any parser or resolver,
which is how tests substitute their own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import PassengerRecord


class RosterParserPort(Protocol):
    """Port for turning roster text into passenger records.

    Implementations:
    - parsing/roster.py (RosterParser)
    """

    def parse(self, text: str) -> Sequence[PassengerRecord]:
        """Parse a roster.

        Args:
            text: The pasted roster.

        Returns:
            Freshly created records in roster order.
        """
        ...

    def count_lines(self, text: str) -> int:
        """Number of non-blank lines in the roster."""
        ...


class SeatResolverPort(Protocol):
    """Port for seat validation and assignment.

    Implementations:
    - seating/resolver.py (SeatResolver)
    """

    def resolve(self, records: Sequence[PassengerRecord]) -> Sequence[PassengerRecord]:
        """Validate seats and fill in the missing ones.

        Raises:
            InvalidSeatNumberError: If a seat is outside the bus.
            DuplicateSeatNumberError: If a seat is claimed twice.
        """
        ...
