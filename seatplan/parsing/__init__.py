"""Parsing layer - From pasted roster text to passenger records.

Available components:
- LineClassifier: Filters announcement text out of a roster
- StatusNormalizer: Payment status vocabulary
- PassengerLineParser: One line to one PassengerRecord
- RosterParser: Whole roster to an ordered list of records
"""

from .line_classifier import LineClassifier, is_noise
from .passenger_line import PassengerLineParser, parse_passenger_line
from .roster import RosterParser, parse_roster
from .status import StatusNormalizer, is_payment_status_keyword, normalize_payment_status

__all__ = [
    "LineClassifier",
    "PassengerLineParser",
    "RosterParser",
    "StatusNormalizer",
    "is_noise",
    "parse_passenger_line",
    "parse_roster",
    "normalize_payment_status",
    "is_payment_status_keyword",
]
