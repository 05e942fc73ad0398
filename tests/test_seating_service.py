"""Tests for the seating service commit policy."""

import pytest

from seatplan.domain.errors import (
    DuplicateSeatNumberError,
    EmptyRosterInputError,
    InvalidSeatNumberError,
    NoPassengersFoundError,
)
from seatplan.domain.models import Location, PassengerRecord
from seatplan.pipeline import EXAMPLE_ROSTER
from seatplan.services.seating_service import SeatingService


class StubParser:
    """Returns a fixed roster regardless of the text."""

    def __init__(self, records):
        self.records = records

    def parse(self, text):
        return list(self.records)

    def count_lines(self, text):
        return len(self.records)


def test_plan_commits_resolved_roster():
    service = SeatingService()

    roster = service.plan(EXAMPLE_ROSTER)

    assert len(roster) == 8
    assert service.roster == roster
    assert all(r.seat_number is not None for r in roster)
    assert service.statistics().temporary_assignments == 5


def test_failed_plan_keeps_previous_roster():
    service = SeatingService()
    service.plan(EXAMPLE_ROSTER)
    before = [(r.name, r.seat_number) for r in service.roster]

    with pytest.raises(DuplicateSeatNumberError):
        service.plan("1. A(1)\n2. B(1)")

    assert [(r.name, r.seat_number) for r in service.roster] == before


@pytest.mark.parametrize("text", [None, "", "   \n  "])
def test_empty_input_is_rejected(text):
    with pytest.raises(EmptyRosterInputError):
        SeatingService().plan(text)


def test_roster_without_passengers_is_rejected():
    with pytest.raises(NoPassengersFoundError) as exc_info:
        SeatingService().plan("* 공지\n* 출발 7시")

    assert exc_info.value.line_count == 2


def test_invalid_seat_from_parser_is_rejected():
    parser = StubParser([PassengerRecord(order_number=1, name="가", seat_number=30)])
    service = SeatingService(roster_parser=parser)

    with pytest.raises(InvalidSeatNumberError) as exc_info:
        service.plan("anything")

    assert exc_info.value.offending_seats == (30,)
    assert service.roster == []


def test_palette_is_updated_and_kept_across_plans():
    service = SeatingService()
    service.plan("1. 가(죽전, 1)")
    first_colour = service.palette.color_for(Location.JUKJEON)

    service.plan("1. 나(사당, 2)\n2. 다(죽전, 3)")

    assert service.palette.color_for(Location.JUKJEON) == first_colour
    assert service.palette.color_for(Location.SADANG) is not None


def test_reset_clears_roster_and_palette():
    service = SeatingService()
    service.plan(EXAMPLE_ROSTER)

    service.reset()

    assert service.roster == []
    assert service.palette.legend() == {}
    assert service.statistics().total == 0


def test_grouped_passengers_and_location_stats():
    service = SeatingService()
    service.plan(EXAMPLE_ROSTER)

    grouped = service.grouped_passengers()
    stats = service.location_stats()

    assert set(grouped) == set(stats)
    assert all(stats[loc].total == len(members) for loc, members in grouped.items())
