"""
Logging setup for the phenoadapt dashboard.

The library modules only create module loggers. Handlers and levels are
configured here, once, by the Streamlit entry point. The default level is
read from the ``LOG_LEVEL`` environment variable.
"""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"

# Streamlit and its web stack are chatty at INFO
_QUIET_LOGGERS = ("streamlit", "tornado", "urllib3")


def setup_logging(log_level: str | None = None) -> None:
    """Route phenoadapt logs to stderr at ``log_level`` (or ``$LOG_LEVEL``)."""
    level = (log_level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S")
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("phenoadapt").debug("Logging configured at %s", level)
