"""Seating service - Plans a bus from a pasted roster.

The service owns the committed roster and the location palette. A plan
either succeeds completely and replaces the previous roster, or fails
and leaves it as it was.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..domain.errors import EmptyRosterInputError, NoPassengersFoundError, SeatingError
from ..domain.models import Location, LocationStats, PassengerRecord, RosterStatistics
from ..parsing.roster import RosterParser
from ..ports.seating import RosterParserPort, SeatResolverPort
from ..seating.palette import LocationPalette
from ..seating.resolver import SeatResolver
from ..seating.stats import group_by_location, location_stats, roster_statistics


@dataclass
class SeatingService:
    """Parse, resolve and commit rosters.

    Attributes:
        roster_parser: Turns text into records
        seat_resolver: Validates and completes seating
        palette: Location colours, kept across plans until reset
    """

    roster_parser: RosterParserPort = field(default_factory=RosterParser)
    seat_resolver: SeatResolverPort = field(default_factory=SeatResolver)
    palette: LocationPalette = field(default_factory=LocationPalette)

    _roster: list[PassengerRecord] = field(default_factory=list, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def roster(self) -> list[PassengerRecord]:
        """The committed roster (a copy of the list, same records)."""
        return list(self._roster)

    def plan(self, text: Optional[str]) -> list[PassengerRecord]:
        """Parse and seat a roster, then commit it.

        Args:
            text: The pasted roster.

        Returns:
            The committed, resolved roster.

        Raises:
            EmptyRosterInputError: If the text is empty.
            NoPassengersFoundError: If no line parses as a passenger.
            InvalidSeatNumberError: If a requested seat is outside the bus.
            DuplicateSeatNumberError: If a seat is requested twice.
        """
        text = (text or "").strip()
        if not text:
            raise EmptyRosterInputError("No roster text supplied")

        records = list(self.roster_parser.parse(text))
        if not records:
            line_count = self.roster_parser.count_lines(text)
            self._logger.warning(
                "No passengers found in roster",
                extra={"line_count": line_count},
            )
            raise NoPassengersFoundError(
                "No passenger lines found", line_count=line_count
            )

        try:
            resolved = list(self.seat_resolver.resolve(records))
        except SeatingError:
            self._logger.warning(
                "Roster rejected, keeping previous roster",
                extra={"kept": len(self._roster)},
            )
            raise

        self._roster = resolved
        self.palette.assign(resolved)

        stats = roster_statistics(resolved)
        self._logger.info(
            "Roster committed",
            extra={
                "passengers": stats.total,
                "temporary": stats.temporary_assignments,
                "unassigned": stats.unassigned_passengers,
            },
        )
        return self.roster

    def reset(self) -> None:
        """Drop the committed roster and every colour assignment."""
        self._roster = []
        cleared = self.palette.clear()
        self._logger.info("Seating reset", extra={"colors_cleared": cleared})

    def statistics(self) -> RosterStatistics:
        return roster_statistics(self._roster)

    def location_stats(self) -> dict[Location, LocationStats]:
        return location_stats(self._roster)

    def grouped_passengers(self) -> dict[Location, list[PassengerRecord]]:
        return group_by_location(self._roster)
