from __future__ import annotations

from datetime import date, datetime, tzinfo

from loan_simulator.infra.config import app_timezone
from loan_simulator.ports.clock import Clock


class SystemClock(Clock):
    """Wall-clock date in the configured application timezone."""

    def __init__(self, tz: tzinfo | None = None) -> None:
        self._tz = tz if tz is not None else app_timezone()

    def today(self) -> date:
        return datetime.now(self._tz).date()


class FixedClock(Clock):
    """
    Clock frozen on a given date.

    Used by tests to make age tiering and birth date checks deterministic.
    """

    def __init__(self, fixed_date: date) -> None:
        self._date = fixed_date

    def today(self) -> date:
        return self._date
