from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date


class Clock(ABC):
    """
    Port for the evaluation date.

    The engine never reads the wall clock itself. Use cases ask the clock for
    "today" once per simulation and pass the date down explicitly, so the same
    inputs on the same date always produce the same result.
    """

    @abstractmethod
    def today(self) -> date:
        """Return the current evaluation date."""
        ...
