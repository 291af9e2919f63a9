"""Mini README: Display helpers for the dashboard.

Structure:
    * format_currency - grouped, two-decimal amount with a currency symbol.
    * format_percent - compact percentage, ``35`` rather than ``35.0``.
    * remaining_budget_tone - colour hint for the remaining-budget card.

The calculation core never formats money; everything the dashboard shows
goes through these helpers.
"""

from __future__ import annotations

import math
from typing import Optional

from ..configuration import get_settings


def format_currency(amount: object, symbol: Optional[str] = None) -> str:
    """Format ``amount`` like ``$1,234.50``; negatives read ``-$1,234.50``."""

    symbol = get_settings().currency_symbol if symbol is None else symbol
    try:
        value = float(amount)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        value = 0.0
    if not math.isfinite(value):
        value = 0.0
    sign = "-" if round(value, 2) < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def format_percent(value: float) -> str:
    """Format a percentage without trailing zeros, e.g. ``35`` or ``42.5``."""

    return f"{round(value, 2):g}"


def remaining_budget_tone(remaining_budget: float) -> str:
    """Return ``"overspent"`` below zero, otherwise ``"on-track"``."""

    return "overspent" if remaining_budget < 0 else "on-track"
