"""Aggregates over a resolved roster.

These are what the seating chart, the per-location summary and the
grouped passenger list are drawn from.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence, TypeVar, Union

from ..domain.models import (
    SEAT_COUNT,
    Location,
    LocationStats,
    PassengerRecord,
    RosterStatistics,
)

V = TypeVar("V", bound=Union[LocationStats, Sequence[PassengerRecord]])


def _count(records: Iterable[PassengerRecord]) -> LocationStats:
    total = paid = 0
    for record in records:
        total += 1
        if record.is_paid:
            paid += 1
    return LocationStats(total=total, paid=paid, pending=total - paid)


def location_stats(records: Sequence[PassengerRecord]) -> dict[Location, LocationStats]:
    """Passenger counts per boarding location, in first-seen order."""
    return {
        location: _count(members)
        for location, members in _bucket(records).items()
    }


def roster_statistics(records: Sequence[PassengerRecord]) -> RosterStatistics:
    """Roster-wide counts.

    ``confirmed_seats`` counts seats that came from the roster itself,
    ``empty_seats`` is whatever is left of the bus after every seated
    passenger.
    """
    counts = _count(records)
    assigned = sum(1 for r in records if r.has_seat)
    temporary = sum(1 for r in records if r.is_temporary_assignment)
    return RosterStatistics(
        total=counts.total,
        paid=counts.paid,
        pending=counts.pending,
        confirmed_seats=assigned - temporary,
        temporary_assignments=temporary,
        unassigned_passengers=counts.total - assigned,
        empty_seats=SEAT_COUNT - assigned,
    )


def group_by_location(
    records: Sequence[PassengerRecord],
) -> dict[Location, list[PassengerRecord]]:
    """Records bucketed by location, each bucket ordered by seat.

    Passengers without a seat come last in their bucket; ties keep roster
    order.
    """
    return {
        location: sorted(members, key=_seat_order)
        for location, members in _bucket(records).items()
    }


def rank_by_size(mapping: Mapping[Location, V]) -> list[tuple[Location, V]]:
    """Order location entries with the largest group first.

    Equal sizes keep their first-seen order.
    """

    def size(item: tuple[Location, V]) -> int:
        value = item[1]
        return value.total if isinstance(value, LocationStats) else len(value)

    return sorted(mapping.items(), key=size, reverse=True)


def _bucket(records: Iterable[PassengerRecord]) -> dict[Location, list[PassengerRecord]]:
    groups: dict[Location, list[PassengerRecord]] = {}
    for record in records:
        groups.setdefault(record.location, []).append(record)
    return groups


def _seat_order(record: PassengerRecord) -> tuple[bool, int]:
    return (record.seat_number is None, record.seat_number or 0)
