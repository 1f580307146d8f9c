"""Percentage formatting for scores.

Rounding follows JavaScript's ``Math.round`` (halves round towards +inf) and
numbers are printed the way Lighthouse reports print them: ``14%`` rather
than ``14.0%``.
"""

import math


def js_round(value: float) -> int:
    """Round half towards positive infinity."""
    floor = math.floor(value)
    return floor + (value - floor >= 0.5)


def format_number(value: float) -> str:
    """Render a number without a trailing ``.0`` for integral values."""
    if value == int(value):
        return str(int(value))
    return repr(value)


def percentage_value(fraction: float) -> float:
    """Convert a fraction to a percentage rounded to 2 decimals."""
    return js_round(fraction * 10000) / 100


def format_percentage(value: float) -> str:
    """Append ``%`` to an already scaled percentage value."""
    return f"{format_number(value)}%"


def perc(fraction: float) -> str:
    """Format a fraction as a percentage string, e.g. ``1/3 -> '33.33%'``."""
    return format_percentage(percentage_value(fraction))


def perc_diff(value: float, reference: float) -> str:
    """Format the difference between two fractions in percentage points.

    Both fractions are rounded to percentages first, then subtracted, then
    the difference is rounded again.
    """
    delta = percentage_value(value) - percentage_value(reference)
    return format_percentage(js_round(delta * 100) / 100)
