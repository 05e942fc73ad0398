"""Roster parsing: free text in, ordered passenger records out.

Parsing is best effort. Lines that are noise or cannot be read as a
passenger are dropped without raising; the only trace of a bad line is
its absence from the result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..config import ParserConfig, get_config
from ..domain.models import PassengerRecord
from .line_classifier import LineClassifier
from .passenger_line import PassengerLineParser


@dataclass
class RosterParser:
    """Applies the line classifier and line parser to a whole roster.

    Attributes:
        config: Parser configuration shared by both stages
    """

    config: ParserConfig = field(default_factory=lambda: get_config().parser)
    _classifier: LineClassifier = field(init=False, repr=False)
    _line_parser: PassengerLineParser = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._classifier = LineClassifier(self.config)
        self._line_parser = PassengerLineParser(self.config)
        self._logger = logging.getLogger(__name__)

    def parse(self, text: str) -> list[PassengerRecord]:
        """Parse every passenger line of a roster.

        Args:
            text: The pasted roster, one candidate record per line.

        Returns:
            Fresh records in input order.
        """
        lines = [line for line in text.split("\n") if line.strip()]

        records: list[PassengerRecord] = []
        for line in lines:
            if self._classifier.is_noise(line):
                continue
            record = self._line_parser.parse(line)
            if record is not None:
                records.append(record)

        self._logger.debug(
            "Roster parsed",
            extra={"lines": len(lines), "records": len(records)},
        )
        return records

    def count_lines(self, text: str) -> int:
        """Number of non-blank lines the parser would look at."""
        return sum(1 for line in text.split("\n") if line.strip())


def parse_roster(text: str) -> list[PassengerRecord]:
    """Parse a roster with the default vocabulary."""
    return RosterParser().parse(text)
