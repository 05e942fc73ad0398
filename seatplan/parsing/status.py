"""Payment status vocabulary.

Roster authors write the deposit state in many ways (``입완``,
``입금완료``, ``예정`` ...). Matching is by substring so decorated tokens
such as ``입완!!`` are still recognized.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..config import ParserConfig, get_config
from ..domain.models import PaymentStatus


@dataclass
class StatusNormalizer:
    """Maps free-text payment tokens onto PaymentStatus.

    Attributes:
        config: Parser configuration holding the paid/pending vocabularies
    """

    config: ParserConfig = field(default_factory=lambda: get_config().parser)

    def normalize(self, token: str) -> PaymentStatus:
        """Return PAID if the token uses the paid vocabulary.

        Anything else, recognized pending wording or not, is PENDING:
        an unknown token is treated as not yet paid.
        """
        if any(keyword in token for keyword in self.config.paid_keywords):
            return PaymentStatus.PAID
        return PaymentStatus.PENDING

    def is_status_keyword(self, token: str) -> bool:
        """Return True if the token matches either vocabulary at all."""
        return any(
            keyword in token
            for keyword in (*self.config.paid_keywords, *self.config.pending_keywords)
        )


def normalize_payment_status(token: str) -> PaymentStatus:
    """Normalize a token with the default vocabulary."""
    return StatusNormalizer().normalize(token)


def is_payment_status_keyword(token: str) -> bool:
    """Check a token against the default vocabulary."""
    return StatusNormalizer().is_status_keyword(token)
