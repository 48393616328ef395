# utils.py
from __future__ import annotations

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional

from config import settings


LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Returns a named logger with a single stream handler attached.

    The level defaults to settings.log_level (LOG_LEVEL in the environment).
    Calling this twice for the same name does not stack handlers.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel((level or settings.log_level).upper())
    return logger


# ---------------------------------------------------------------------------
# Money helpers (prices are PHP with two decimal places)
# ---------------------------------------------------------------------------

CENTS = Decimal("0.01")

def to_money(value: Any) -> Decimal:
    """Coerce a price (int, float, str or Decimal) to a 2-place Decimal."""
    if value is None:
        return Decimal("0.00")
    if isinstance(value, float):
        value = repr(value)
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)
