"""Seat validation and automatic assignment.

Passengers who did not ask for a seat are seated from the back of the
bus forward: the highest free seat goes to the first such passenger in
roster order, the next highest to the second, and so on.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from ..domain.errors import DuplicateSeatNumberError, InvalidSeatNumberError
from ..domain.models import SEAT_COUNT, PassengerRecord, is_valid_seat


@dataclass
class SeatResolver:
    """Validates requested seats and fills in the missing ones."""

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def resolve(self, records: Sequence[PassengerRecord]) -> Sequence[PassengerRecord]:
        """Validate and complete the seating of a roster.

        Both validation gates run before anything is touched, so a
        rejected roster is returned to the caller exactly as it came in.

        Args:
            records: Parsed roster, in roster order.

        Returns:
            The same records, seated wherever a free seat was left.

        Raises:
            InvalidSeatNumberError: If a requested seat is outside the bus.
            DuplicateSeatNumberError: If two passengers request one seat.
        """
        self.validate(records)
        self._assign_free_seats(records)
        return records

    def validate(self, records: Sequence[PassengerRecord]) -> None:
        """Run the range and duplicate checks without mutating anything."""
        invalid = [
            r.seat_number
            for r in records
            if r.seat_number is not None and not is_valid_seat(r.seat_number)
        ]
        if invalid:
            seats = tuple(dict.fromkeys(invalid))
            self._logger.warning("Seat numbers out of range", extra={"seats": seats})
            raise InvalidSeatNumberError(
                f"Seat numbers must be between 1 and {SEAT_COUNT}: "
                + ", ".join(map(str, seats)),
                offending_seats=seats,
            )

        requested = [r.seat_number for r in records if r.seat_number is not None]
        duplicates: dict[int, None] = {}
        seen: set[int] = set()
        for seat in requested:
            if seat in seen:
                duplicates.setdefault(seat, None)
            seen.add(seat)
        if duplicates:
            seats = tuple(duplicates)
            self._logger.warning("Duplicate seat numbers", extra={"seats": seats})
            raise DuplicateSeatNumberError(
                "Duplicate seat numbers: " + ", ".join(map(str, seats)),
                offending_seats=seats,
            )

    def _assign_free_seats(self, records: Sequence[PassengerRecord]) -> None:
        unseated = [r for r in records if r.seat_number is None]
        if not unseated:
            return

        occupied = {r.seat_number for r in records if r.seat_number is not None}
        free_seats = [s for s in range(SEAT_COUNT, 0, -1) if s not in occupied]

        for record, seat in zip(unseated, free_seats):
            record.seat_number = seat
            record.is_temporary_assignment = True

        assigned = min(len(unseated), len(free_seats))
        self._logger.info(
            "Assigned seats from the back",
            extra={"assigned": assigned, "unseated": len(unseated)},
        )
        if assigned < len(unseated):
            # The rest keep seat_number=None; not an error.
            self._logger.warning(
                "Ran out of free seats",
                extra={"left_without_seat": len(unseated) - assigned},
            )


def resolve_seats(records: Sequence[PassengerRecord]) -> Sequence[PassengerRecord]:
    """Resolve a roster with a fresh SeatResolver."""
    return SeatResolver().resolve(records)
