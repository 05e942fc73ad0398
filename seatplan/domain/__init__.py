"""Domain layer - Core models and errors.

No external dependencies.
"""

from .errors import (
    DuplicateSeatNumberError,
    EmptyRosterInputError,
    InvalidSeatNumberError,
    NoPassengersFoundError,
    SeatingError,
)
from .models import (
    SEAT_COUNT,
    Location,
    LocationStats,
    PassengerRecord,
    PaymentStatus,
    RosterStatistics,
    is_valid_seat,
)

__all__ = [
    # Models
    "SEAT_COUNT",
    "Location",
    "LocationStats",
    "PassengerRecord",
    "PaymentStatus",
    "RosterStatistics",
    "is_valid_seat",
    # Errors
    "SeatingError",
    "InvalidSeatNumberError",
    "DuplicateSeatNumberError",
    "EmptyRosterInputError",
    "NoPassengersFoundError",
]
