"""Passenger line parsing.

Lines look like ``3. 박민수(5, 죽전, 입완)`` but the fields inside the
parentheses come in whatever order the author typed them, some are
missing, and extra remarks are common. Each token is therefore
recognized by its shape or vocabulary rather than by its position.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Optional

from ..config import ParserConfig, get_config
from ..domain.models import SEAT_COUNT, Location, PassengerRecord, PaymentStatus
from .status import StatusNormalizer

_logger = logging.getLogger(__name__)

# "<n>. <name>(<info>)"; the name may not contain an opening parenthesis.
_INFO_LINE = re.compile(r"(\d+)\.\s*([^(]+)\(([^)]+)\)")
_ORDER_ONLY = re.compile(r"^\d+\.\s*$")
_NAME_ONLY = re.compile(r"^(\d+)\.\s*([^\s(]+)$")
_TOKEN_SEPARATORS = re.compile(r"[,.\s]+")
# "12", "12번", "12!!!"
_SEAT_TOKEN = re.compile(r"^([0-9]+)[^0-9]*$")


@dataclass
class _Fields:
    payment_status: PaymentStatus = PaymentStatus.PENDING
    status_consumed: bool = False
    location: Location = Location.UNSPECIFIED
    seat_number: Optional[int] = None


@dataclass
class PassengerLineParser:
    """Turns a classified roster line into a PassengerRecord.

    Attributes:
        config: Parser configuration holding the keyword tables
    """

    config: ParserConfig = field(default_factory=lambda: get_config().parser)
    _status: StatusNormalizer = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._status = StatusNormalizer(self.config)

    def parse(self, line: str) -> Optional[PassengerRecord]:
        """Parse one line.

        Args:
            line: A line the LineClassifier accepted.

        Returns:
            The extracted record, or None if the line holds no passenger.
        """
        line = line.strip()

        match = _INFO_LINE.search(line)
        if match:
            order_number, name, info = match.groups()
            name = name.strip()
            if not name:
                _logger.debug("Skipping line without a name", extra={"line": line})
                return None
            fields = self._classify_tokens(_tokenize(info))
            return PassengerRecord(
                order_number=int(order_number),
                name=name,
                payment_status=fields.payment_status,
                location=fields.location,
                seat_number=fields.seat_number,
            )

        if _ORDER_ONLY.match(line):
            return None

        match = _NAME_ONLY.match(line)
        if match:
            order_number, name = match.groups()
            return PassengerRecord(order_number=int(order_number), name=name)

        _logger.debug("Unparseable passenger line", extra={"line": line})
        return None

    def _classify_tokens(self, tokens: list[str]) -> _Fields:
        fields = _Fields()
        for token in tokens:
            if self._is_unassigned_marker(token):
                continue

            seat_match = _SEAT_TOKEN.match(token)
            if seat_match and fields.seat_number is None:
                seat = int(seat_match.group(1))
                if 1 <= seat <= SEAT_COUNT:
                    fields.seat_number = seat
                    continue

            location = _find_location(token)
            if location is not None and fields.location is Location.UNSPECIFIED:
                fields.location = location
                continue

            if not fields.status_consumed and self._status.is_status_keyword(token):
                fields.payment_status = self._status.normalize(token)
                fields.status_consumed = True
        return fields

    def _is_unassigned_marker(self, token: str) -> bool:
        return any(
            token == keyword or keyword in token
            for keyword in self.config.unassigned_seat_keywords
        )


def _tokenize(info: str) -> list[str]:
    return [part for part in _TOKEN_SEPARATORS.split(info) if part]


def _find_location(token: str) -> Optional[Location]:
    for location in Location.boarding_points():
        if location.value in token:
            return location
    return None


def parse_passenger_line(line: str) -> Optional[PassengerRecord]:
    """Parse a line with the default vocabulary."""
    return PassengerLineParser().parse(line)
