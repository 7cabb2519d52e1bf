# backend/app/utils/scoring_utils.py
import math
import re
from typing import Any

# Leading decimal literal, the same prefix a browser's parseFloat() accepts
_NUMBER_PREFIX = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def parse_number(value: Any) -> float:
    """
    Turn a raw form value into a float.
    Missing, empty, unparseable, NaN and infinite values all come back as 0.0.
    Strings are read up to the first character that can't continue a number,
    so "12.5 hrs" -> 12.5.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            # ints wider than a double
            return 0.0
    elif isinstance(value, str):
        match = _NUMBER_PREFIX.match(value.strip())
        if not match:
            return 0.0
        number = float(match.group(0))
    else:
        return 0.0

    if not math.isfinite(number):
        return 0.0
    return number


def round_half_up(value: float) -> int:
    # Math.round semantics: 2.5 -> 3, -2.5 -> -2
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float = 0, high: float = 100) -> float:
    return max(low, min(high, value))
