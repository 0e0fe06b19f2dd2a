"""Shared logging helpers.

Library modules only ask for a named logger; the CLI configures the root
handler once.  Records go to stderr and stay silent at the default WARNING
level, so they never mix with the calculator's own output.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

_LOGGER_INITIALISED = False


def configure_logging(level: Optional[str] = None) -> None:
    """Set up the root handler; POLYCALC_LOG_LEVEL overrides ``level``."""
    global _LOGGER_INITIALISED
    if _LOGGER_INITIALISED:
        return
    name = os.getenv("POLYCALC_LOG_LEVEL", level or "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or "polycalc")
