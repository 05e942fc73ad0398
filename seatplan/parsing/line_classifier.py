"""Noise filtering for chat-pasted rosters.

A roster usually arrives wrapped in trip announcements: a dated title,
itinerary bullets, a bank account, boarding point lists, video links.
Only lines of the form ``<n>. ...`` can describe a passenger, and even
some of those are announcement text. The checks below run in a fixed
order and the first one that fires decides.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from ..config import ParserConfig, get_config

_URL_SCHEME = re.compile(r"https?://")
# 3333-16-1619747, 3333 16 1619747, 3333161619747
_ACCOUNT_NUMBER = re.compile(r"\d{4}[\s-]?\d{2}[\s-]?\d{7}")
_CURRENCY_AMOUNT = re.compile(r"\d+만원")
# "1/10,토)" or "10/25)"
_DATE_WITH_WEEKDAY = re.compile(r"^\d+/\d+[,\s]*[월화수목금토일]?\)")
_ORDER_PREFIX = re.compile(r"^\d+\.")


@dataclass
class LineClassifier:
    """Decides whether a raw roster line can hold a passenger.

    Attributes:
        config: Parser configuration holding the marker vocabularies
    """

    config: ParserConfig = field(default_factory=lambda: get_config().parser)

    def is_noise(self, line: str) -> bool:
        """Return True if the line is not a passenger record."""
        line = line.strip()
        if not line:
            return True
        if line.startswith(self.config.noise_prefixes):
            return True
        if self._is_link(line):
            return True
        if self._is_account(line):
            return True
        if self._is_boarding_notice(line):
            return True
        if _DATE_WITH_WEEKDAY.match(line):
            return True
        return not _ORDER_PREFIX.match(line)

    def is_candidate(self, line: str) -> bool:
        return not self.is_noise(line)

    def _is_link(self, line: str) -> bool:
        if line.startswith("http") or _URL_SCHEME.search(line):
            return True
        return any(term in line for term in self.config.video_keywords)

    def _is_account(self, line: str) -> bool:
        if any(term in line for term in self.config.account_keywords):
            return True
        return _ACCOUNT_NUMBER.search(line) is not None

    def _is_boarding_notice(self, line: str) -> bool:
        if any(term in line for term in self.config.boarding_list_keywords):
            return True
        return _CURRENCY_AMOUNT.search(line) is not None


def is_noise(line: str) -> bool:
    """Classify a line with the default vocabulary."""
    return LineClassifier().is_noise(line)
