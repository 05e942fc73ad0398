"""Tests for location colour assignment."""

import pytest

from seatplan.config import PaletteConfig
from seatplan.domain.models import Location, PassengerRecord
from seatplan.seating.palette import LocationPalette


def _at(*locations):
    return [
        PassengerRecord(order_number=i, name=f"승객{i}", location=location)
        for i, location in enumerate(locations, start=1)
    ]


def test_colours_follow_first_seen_order():
    palette = LocationPalette(PaletteConfig(colors=("#111111", "#222222", "#333333")))

    legend = palette.assign(_at(Location.JUKJEON, Location.SADANG, Location.JUKJEON))

    assert legend == {Location.JUKJEON: "#111111", Location.SADANG: "#222222"}


def test_existing_colours_survive_later_rosters():
    palette = LocationPalette(PaletteConfig(colors=("#111111", "#222222", "#333333")))
    palette.assign(_at(Location.JUKJEON))

    palette.assign(_at(Location.SADANG, Location.JUKJEON))

    assert palette.color_for(Location.JUKJEON) == "#111111"
    assert palette.color_for(Location.SADANG) == "#222222"


def test_palette_cycles_when_exhausted():
    palette = LocationPalette(PaletteConfig(colors=("#111111", "#222222")))

    palette.assign(_at(Location.SADANG, Location.YANGJAE, Location.SINGAL))

    assert palette.color_for(Location.SINGAL) == "#111111"


def test_clear_forgets_assignments():
    palette = LocationPalette()
    palette.assign(_at(Location.SADANG, Location.YANGJAE))

    assert palette.clear() == 2
    assert palette.legend() == {}
    assert palette.color_for(Location.SADANG) is None


def test_default_palette_starts_with_red():
    palette = LocationPalette()
    palette.assign(_at(Location.BOKJEONG))
    assert palette.color_for(Location.BOKJEONG) == "#e74c3c"


def test_empty_palette_is_rejected():
    with pytest.raises(ValueError):
        LocationPalette(PaletteConfig(colors=()))
