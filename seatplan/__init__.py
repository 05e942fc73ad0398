"""Top-level package for the bus seat planner.

The package turns chat-pasted passenger rosters into a seated bus:
``parsing`` reads the roster text, ``seating`` validates requested seats,
fills in the missing ones and aggregates the result, and ``services``
ties both together behind a single commit point.
"""

from .domain.models import SEAT_COUNT, Location, PassengerRecord, PaymentStatus
from .parsing.roster import parse_roster
from .seating.resolver import resolve_seats

__all__ = [
    "SEAT_COUNT",
    "Location",
    "PassengerRecord",
    "PaymentStatus",
    "parse_roster",
    "resolve_seats",
]
