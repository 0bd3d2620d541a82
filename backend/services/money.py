"""Currency rounding and display helpers shared by the pipeline stages."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest whole unit, halves toward positive infinity.

    Python's built-in ``round`` uses banker's rounding (``round(2.5) == 2``),
    which would shift currency amounts and week counts by one on exact halves.
    """
    return int(math.floor(value + 0.5))


def format_currency(amount: float) -> str:
    """Format a CAD amount without cents, e.g. ``$5,000`` or ``-$1,250``."""
    rounded = round_half_up(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,}"
