"""Display formatting for calculator results (US dollars, percentages)."""
from __future__ import annotations

import math
from typing import Optional


def format_currency(value: Optional[float], digits: int = 2) -> str:
    """Format as US dollars, e.g. ``$1,234.56`` or ``-$20.00``."""
    if value is None or not math.isfinite(value):
        return "N/A"
    sign = "-" if value < 0 and round(abs(value), digits) != 0 else ""
    return f"{sign}${abs(value):,.{digits}f}"


def format_percent(value: Optional[float], decimals: int = 1) -> str:
    """Format a percentage that is already scaled to 0-100."""
    if value is None or not math.isfinite(value):
        return "N/A"
    return f"{value:.{decimals}f}%"


def format_months(months: Optional[float]) -> str:
    """Render a month count as ``N years, M months``."""
    if months is None or not math.isfinite(months):
        return "Never"
    total = int(math.ceil(months))
    years, rem = divmod(total, 12)
    parts = []
    if years:
        parts.append(f"{years} year{'s' if years != 1 else ''}")
    if rem or not parts:
        parts.append(f"{rem} month{'s' if rem != 1 else ''}")
    return ", ".join(parts)
