"""Location colour assignment.

The palette is memoized state owned by whoever renders the roster: once
a location has a colour it keeps it across re-plans until ``clear`` is
called, and new locations take the next colour, wrapping around when
the palette is exhausted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from ..config import PaletteConfig, get_config
from ..domain.models import Location, PassengerRecord


@dataclass
class LocationPalette:
    """Append-only mapping from boarding location to display colour.

    Attributes:
        config: Palette configuration holding the colour sequence
    """

    config: PaletteConfig = field(default_factory=lambda: get_config().palette)

    _colors: dict[Location, str] = field(default_factory=dict, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.config.colors:
            raise ValueError("Palette needs at least one colour")
        self._logger = logging.getLogger(__name__)

    def assign(self, records: Iterable[PassengerRecord]) -> dict[Location, str]:
        """Give every not-yet-coloured location of the roster a colour.

        Args:
            records: Roster whose locations should be coloured.

        Returns:
            The full legend after assignment.
        """
        for record in records:
            if record.location in self._colors:
                continue
            colors = self.config.colors
            color = colors[len(self._colors) % len(colors)]
            self._colors[record.location] = color
            self._logger.debug(
                "Location colour assigned",
                extra={"location": record.location.value, "color": color},
            )
        return self.legend()

    def color_for(self, location: Location) -> Optional[str]:
        return self._colors.get(location)

    def legend(self) -> dict[Location, str]:
        """Copy of the current assignments, in assignment order."""
        return dict(self._colors)

    def clear(self) -> int:
        """Forget every assignment.

        Returns:
            Number of assignments that were cleared.
        """
        count = len(self._colors)
        self._colors.clear()
        return count
