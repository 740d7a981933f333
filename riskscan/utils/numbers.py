"""Defensive parsing for the decimal strings security providers return."""

import math
import re

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_float(val: object) -> float:
    """Parse a percent/amount value to a non-negative float, 0.0 on anything malformed."""
    if val is None or val == "":
        return 0.0
    try:
        num = float(val)  # type: ignore[arg-type]
    except (ValueError, TypeError):
        return 0.0
    if math.isnan(num) or math.isinf(num) or num < 0:
        return 0.0
    return num


def parse_int(val: object) -> int:
    """Parse a count from its leading integer digits, clamped at 0.

    "50", "50.9" and "50abc" all give 50; "1e3" gives 1 (the exponent is
    trailing text, not part of the count). Garbage gives 0.
    """
    if val is None or isinstance(val, bool):
        return 0
    if isinstance(val, float) and not math.isfinite(val):
        return 0
    match = _LEADING_INT.match(str(val))
    if match is None:
        return 0
    return max(int(match.group(1)), 0)


def round_half_up(val: float) -> int:
    """Round .5 away from zero for non-negative scores (round() would give 10 for 10.5)."""
    return int(math.floor(val + 0.5))


def fmt_num(val: float) -> str:
    """Render 12.0 as "12" and 7.5 as "7.5" for warning text."""
    if val.is_integer():
        return str(int(val))
    return str(val)
