"""
Logging setup shared by anything that drives a simulation.

Library modules only ever do `logger = logging.getLogger(__name__)`.
Whoever owns the process (a script, a notebook, a test) calls
configure_logging() once to decide where records go.
"""

import logging
from typing import Optional

from config.settings import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Apply the project log format at `level` (defaults to settings.LOG_LEVEL)."""
    level_name = (level or settings.LOG_LEVEL).upper()
    numeric = getattr(logging, level_name, None)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level_name}")

    logging.basicConfig(level=numeric, format=LOG_FORMAT, force=True)
