from __future__ import annotations

import logging

from loan_simulator.infra.config import log_level

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging() -> None:
    """Configure root logging from the environment (LOG_LEVEL)."""
    logging.basicConfig(level=log_level(), format=LOG_FORMAT)
    logging.getLogger().setLevel(log_level())
