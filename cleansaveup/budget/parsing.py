"""Mini README: Coercion of raw form input into numbers.

Structure:
    * is_blank - detect empty or whitespace-only input.
    * parse_decimal - longest leading decimal, like a browser number field.
    * parse_integer - longest leading integer, ignoring any fraction.

Values typed into the planner arrive as text. Both parsers skip leading
whitespace and read the longest numeric prefix (``"12abc"`` reads as 12),
returning ``None`` when nothing numeric is found so that callers decide
whether to default, clamp or reject. Numbers passed straight through from
Python callers are accepted as-is when finite.
"""

from __future__ import annotations

import math
import re
from typing import Optional

_DECIMAL_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INTEGER_PREFIX = re.compile(r"\s*([+-]?\d+)")


def is_blank(raw: object) -> bool:
    """Return ``True`` for ``None`` and strings holding only whitespace."""

    return raw is None or (isinstance(raw, str) and not raw.strip())


def _finite_number(raw: object) -> Optional[float]:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        return None
    value = float(raw)
    return value if math.isfinite(value) else None


def parse_decimal(raw: object) -> Optional[float]:
    """Parse the leading decimal of ``raw`` or return ``None``."""

    if isinstance(raw, (int, float)):
        return _finite_number(raw)
    if not isinstance(raw, str):
        return None
    match = _DECIMAL_PREFIX.match(raw)
    if not match:
        return None
    value = float(match.group(1))
    # Huge exponents overflow to inf.
    return value if math.isfinite(value) else None


def parse_integer(raw: object) -> Optional[int]:
    """Parse the leading integer of ``raw`` or return ``None``."""

    if isinstance(raw, (int, float)):
        value = _finite_number(raw)
        return None if value is None else int(value)
    if not isinstance(raw, str):
        return None
    match = _INTEGER_PREFIX.match(raw)
    if not match:
        return None
    return int(match.group(1))
