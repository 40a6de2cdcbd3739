"""Text formatting for chart labels and tooltips."""

from __future__ import annotations

import math
from datetime import datetime
from functools import lru_cache
from zoneinfo import ZoneInfo

INVALID_DATE = "Invalid Date"


@lru_cache(maxsize=32)
def _zone(name: str) -> ZoneInfo:
    return ZoneInfo(name)


def format_timestamp(timestamp: float, *, fmt: str, time_zone: str = "UTC") -> str:
    """Format an epoch-millisecond timestamp.

    Args:
        timestamp: Epoch milliseconds.
        fmt: strftime format string.
        time_zone: IANA zone name.

    Returns:
        The formatted date, or "Invalid Date" when the timestamp is out of range.
    """

    try:
        moment = datetime.fromtimestamp(timestamp / 1000, tz=_zone(time_zone))
    except (OverflowError, OSError, ValueError):
        return INVALID_DATE
    return moment.strftime(fmt)


def format_value(value: float) -> str:
    """Format a metric value like a JavaScript number ("10", "1.5", "NaN")."""

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    digits, point = _shortest_digits(abs(value))
    return sign + _layout_digits(digits, point)


def _shortest_digits(value: float) -> tuple[str, int]:
    """Return shortest round-trip digits and the decimal point position.

    The value equals `0.<digits> * 10**point`.
    """

    mantissa, _, exponent = repr(value).partition("e")
    whole, _, fraction = mantissa.partition(".")
    raw = whole + fraction
    significant = raw.lstrip("0")
    point = len(whole) + (int(exponent) if exponent else 0) - (len(raw) - len(significant))
    return significant.rstrip("0"), point


def _layout_digits(digits: str, point: int) -> str:
    """Lay out digits the way `Number.prototype.toString` does."""

    size = len(digits)
    if size <= point <= 21:
        return digits + "0" * (point - size)
    if 0 < point <= 21:
        return f"{digits[:point]}.{digits[point:]}"
    if -6 < point <= 0:
        return "0." + "0" * -point + digits
    exponent = point - 1
    exponent_text = f"e+{exponent}" if exponent >= 0 else f"e-{-exponent}"
    if size == 1:
        return digits + exponent_text
    return f"{digits[0]}.{digits[1:]}{exponent_text}"
