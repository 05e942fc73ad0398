"""Tests for roster aggregates."""

import pytest

from seatplan.domain.models import (
    Location,
    LocationStats,
    PassengerRecord,
    PaymentStatus,
    RosterStatistics,
)
from seatplan.parsing.roster import parse_roster
from seatplan.pipeline import EXAMPLE_ROSTER
from seatplan.seating.resolver import resolve_seats
from seatplan.seating.stats import (
    group_by_location,
    location_stats,
    rank_by_size,
    roster_statistics,
)


@pytest.fixture
def example_roster():
    return list(resolve_seats(parse_roster(EXAMPLE_ROSTER)))


def test_example_roster_seating(example_roster):
    seats = {r.name: (r.seat_number, r.is_temporary_assignment) for r in example_roster}

    assert seats == {
        "김진욱": (1, False),
        "나정선": (3, False),
        "박민수": (5, False),
        "이영희": (28, True),
        "최철수": (27, True),
        "정민수": (26, True),
        "강수진": (25, True),
        "홍길동": (24, True),
    }


def test_roster_statistics(example_roster):
    assert roster_statistics(example_roster) == RosterStatistics(
        total=8,
        paid=5,
        pending=3,
        confirmed_seats=3,
        temporary_assignments=5,
        unassigned_passengers=0,
        empty_seats=20,
    )


def test_roster_statistics_before_resolution():
    stats = roster_statistics(parse_roster(EXAMPLE_ROSTER))

    assert stats.confirmed_seats == 3
    assert stats.temporary_assignments == 0
    assert stats.unassigned_passengers == 5
    assert stats.empty_seats == 25
    assert stats.occupied_seats == 3


def test_location_stats_in_first_seen_order(example_roster):
    stats = location_stats(example_roster)

    assert list(stats) == [
        Location.YANGJAE,
        Location.SADANG,
        Location.JUKJEON,
        Location.SINGAL,
        Location.BOKJEONG,
    ]
    assert stats[Location.YANGJAE] == LocationStats(total=2, paid=2, pending=0)
    assert stats[Location.SADANG] == LocationStats(total=2, paid=1, pending=1)
    assert stats[Location.SINGAL] == LocationStats(total=1, paid=0, pending=1)
    assert stats[Location.BOKJEONG] == LocationStats(total=1, paid=1, pending=0)


def test_groups_are_sorted_by_seat(example_roster):
    groups = group_by_location(example_roster)

    assert [r.name for r in groups[Location.SADANG]] == ["나정선", "홍길동"]
    assert [r.name for r in groups[Location.YANGJAE]] == ["김진욱", "정민수"]


def test_unseated_passengers_sort_last():
    records = [
        PassengerRecord(order_number=1, name="가", seat_number=None),
        PassengerRecord(order_number=2, name="나", seat_number=9),
        PassengerRecord(order_number=3, name="다", seat_number=None),
        PassengerRecord(order_number=4, name="라", seat_number=2),
    ]

    group = group_by_location(records)[Location.UNSPECIFIED]

    assert [r.name for r in group] == ["라", "나", "가", "다"]


def test_rank_by_size_keeps_first_seen_order_for_ties(example_roster):
    ranked = rank_by_size(location_stats(example_roster))

    assert [location for location, _ in ranked] == [
        Location.YANGJAE,
        Location.SADANG,
        Location.JUKJEON,
        Location.SINGAL,
        Location.BOKJEONG,
    ]


def test_rank_by_size_on_groups():
    records = [
        PassengerRecord(order_number=1, name="가", location=Location.SADANG),
        PassengerRecord(order_number=2, name="나", location=Location.BOKJEONG),
        PassengerRecord(order_number=3, name="다", location=Location.BOKJEONG),
    ]

    ranked = rank_by_size(group_by_location(records))

    assert [location for location, _ in ranked] == [Location.BOKJEONG, Location.SADANG]


def test_empty_roster_statistics():
    stats = roster_statistics([])

    assert stats.total == 0
    assert stats.empty_seats == 28
    assert location_stats([]) == {}
    assert group_by_location([]) == {}


def test_paid_and_pending_add_up():
    records = [
        PassengerRecord(order_number=1, name="가", payment_status=PaymentStatus.PAID),
        PassengerRecord(order_number=2, name="나"),
    ]

    stats = location_stats(records)[Location.UNSPECIFIED]

    assert stats.paid + stats.pending == stats.total == 2
