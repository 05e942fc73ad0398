"""Ports layer - Abstract interfaces (Protocols) for the application."""

from .seating import RosterParserPort, SeatResolverPort

__all__ = [
    "RosterParserPort",
    "SeatResolverPort",
]
