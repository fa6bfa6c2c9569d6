"""
Defensive parsing of monetary values read from the store.

Amounts arrive as numbers, numeric strings (Postgres ``numeric`` over
JSON), ``Decimal`` (SQLAlchemy ``Numeric``) or not at all. Anything that
does not yield a finite number contributes ``0`` so a sum can never turn
into NaN.
"""

import math
import re
from decimal import Decimal
from typing import Any

_LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_amount(value: Any) -> float:
    """
    Parse a monetary value, falling back to ``0.0``.

    Strings are read up to the first character that cannot continue a
    number, so ``"120.50 INR"`` parses as ``120.5``.

    Args:
        value: Raw column value

    Returns:
        A finite float, ``0.0`` for missing or non-numeric input
    """
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, (int, float, Decimal)):
        number = float(value)
    elif isinstance(value, str):
        match = _LEADING_NUMBER.match(value.strip())
        if match is None:
            return 0.0
        number = float(match.group(0))
    else:
        return 0.0

    if not math.isfinite(number):
        return 0.0
    return number


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going towards +infinity."""
    return int(math.floor(value + 0.5))
