"""
Dependency injection for FastAPI routes.

The use case is stateless; only the clock is shared, and it is cached so the
APP_TIMEZONE lookup happens once per process.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from loan_simulator.adapters.clock import SystemClock
from loan_simulator.ports.clock import Clock
from loan_simulator.use_cases.simulate_loan import SimulateLoan


@lru_cache(maxsize=1)
def get_clock() -> Clock:
    """Process-wide system clock in the configured timezone."""
    return SystemClock()


def get_simulate_loan_use_case(clock: Clock = Depends(get_clock)) -> SimulateLoan:
    """
    Factory function that returns a configured SimulateLoan use case.

    Args:
        clock: Evaluation date source (injected by FastAPI via Depends(get_clock))

    Returns:
        SimulateLoan: Configured use case instance
    """
    return SimulateLoan(clock=clock)
