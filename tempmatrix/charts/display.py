import enum
import logging
from typing import Callable

from tempmatrix import models


logger = logging.getLogger(__name__)


class DisplayMode(enum.Enum):
    """Which monthly statistic drives the cell colors."""

    MAXIMUM = "max"
    MINIMUM = "min"

    @property
    def field(self) -> str:
        """Name of the MonthlySummary field visualized in this mode."""
        return "avg_max" if self is DisplayMode.MAXIMUM else "avg_min"

    @property
    def label(self) -> str:
        if self is DisplayMode.MAXIMUM:
            return "Showing: Maximum Temperature"
        return "Showing: Minimum Temperature"

    def toggled(self) -> "DisplayMode":
        if self is DisplayMode.MAXIMUM:
            return DisplayMode.MINIMUM
        return DisplayMode.MAXIMUM


ModeListener = Callable[[DisplayMode], None]


class DisplayController:
    """Owns the display mode and notifies listeners when it changes."""

    def __init__(self, mode: DisplayMode = DisplayMode.MAXIMUM):
        self._mode = mode
        self._listeners: list[ModeListener] = []

    @property
    def mode(self) -> DisplayMode:
        return self._mode

    @property
    def showing_maximum(self) -> bool:
        return self._mode is DisplayMode.MAXIMUM

    def subscribe(self, listener: ModeListener) -> None:
        self._listeners.append(listener)

    def toggle(self) -> DisplayMode:
        """Flips the display mode and notifies all listeners. Returns the new mode."""
        self._mode = self._mode.toggled()
        logger.debug("Display mode changed to %s", self._mode.value)
        for listener in self._listeners:
            listener(self._mode)
        return self._mode

    def cell_value(self, summary: models.MonthlySummary) -> float:
        """Returns the value of summary that determines its cell color."""
        return getattr(summary, self._mode.field)
