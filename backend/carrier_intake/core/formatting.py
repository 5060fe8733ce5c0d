"""Display formatting shared by citations, reports and notifications."""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional


def format_usd(amount: Optional[float]) -> str:
    """
    Format an amount as whole US dollars, e.g. ``$2,400,000``.

    Unknown amounts (None or NaN) render as ``$0``.
    """
    if amount is None or math.isnan(amount) or math.isinf(amount):
        return "$0"

    rounded = int(Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    if rounded < 0:
        return f"-${-rounded:,}"
    return f"${rounded:,}"


def format_number(value: Optional[float]) -> str:
    """Render a normalized numeric field without a trailing ``.0``."""
    if value is None:
        return ""
    if math.isnan(value):
        return "NaN"
    if float(value).is_integer():
        return str(int(value))
    return str(value)
