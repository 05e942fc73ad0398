"""Domain models for the bus seat planner.

``PassengerRecord`` is deliberately mutable: the seat resolver fills in
``seat_number`` and ``is_temporary_assignment`` on the records it is handed.
Aggregates computed from a roster are frozen.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

SEAT_COUNT = 28
"""Number of seats on the bus; valid seat numbers are 1..SEAT_COUNT."""


class PaymentStatus(Enum):
    """Whether a passenger's fare has been deposited."""

    PAID = "paid"
    PENDING = "pending"


class Location(Enum):
    """Boarding points the bus stops at.

    Values are the place names as they appear in rosters, which is what
    the parser matches against.
    """

    SADANG = "사당"
    YANGJAE = "양재"
    JUKJEON = "죽전"
    SINGAL = "신갈"
    BOKJEONG = "복정"
    UNSPECIFIED = "미지정"

    @classmethod
    def boarding_points(cls) -> tuple[Location, ...]:
        """All real stops, in route order, without UNSPECIFIED."""
        return tuple(loc for loc in cls if loc is not cls.UNSPECIFIED)


def is_valid_seat(seat_number: Optional[int]) -> bool:
    """Return True for ``None`` (unresolved) or a seat inside the bus."""
    if seat_number is None:
        return True
    return 1 <= seat_number <= SEAT_COUNT


@dataclass(slots=True)
class PassengerRecord:
    """One passenger extracted from a roster line.

    Attributes:
        order_number: Sequence label typed in the roster (display only)
        name: Passenger name, stripped and non-empty
        payment_status: Deposit state, PENDING unless the line said otherwise
        location: Boarding point, UNSPECIFIED unless the line named one
        seat_number: Seat in 1..SEAT_COUNT, or None while unresolved
        is_temporary_assignment: True when the resolver picked the seat
    """

    order_number: int
    name: str
    payment_status: PaymentStatus = PaymentStatus.PENDING
    location: Location = Location.UNSPECIFIED
    seat_number: Optional[int] = None
    is_temporary_assignment: bool = False

    @property
    def is_paid(self) -> bool:
        return self.payment_status is PaymentStatus.PAID

    @property
    def has_seat(self) -> bool:
        return self.seat_number is not None


@dataclass(frozen=True, slots=True)
class LocationStats:
    """Passenger counts for a single boarding point."""

    total: int = 0
    paid: int = 0
    pending: int = 0


@dataclass(frozen=True, slots=True)
class RosterStatistics:
    """Roster-wide passenger and seat counts.

    Attributes:
        total: Number of passengers
        paid: Passengers marked PAID
        pending: Passengers marked PENDING
        confirmed_seats: Seats taken as stated in the roster
        temporary_assignments: Seats picked by the resolver
        unassigned_passengers: Passengers still without a seat
        empty_seats: Seats nobody occupies
    """

    total: int
    paid: int
    pending: int
    confirmed_seats: int
    temporary_assignments: int
    unassigned_passengers: int
    empty_seats: int

    @property
    def occupied_seats(self) -> int:
        return self.confirmed_seats + self.temporary_assignments
