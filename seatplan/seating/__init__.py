"""Seating layer - Seat resolution and roster aggregates."""

from .palette import LocationPalette
from .resolver import SeatResolver, resolve_seats
from .stats import group_by_location, location_stats, rank_by_size, roster_statistics

__all__ = [
    "SeatResolver",
    "resolve_seats",
    "LocationPalette",
    "location_stats",
    "roster_statistics",
    "group_by_location",
    "rank_by_size",
]
