"""Services layer - Application orchestration.

Available services:
- SeatingService: Parses, seats and commits rosters
"""

from .seating_service import SeatingService

__all__ = ["SeatingService"]
