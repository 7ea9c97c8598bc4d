"""
Color Input Parser
==================

Parses loosely formatted color strings into CanonicalColor values.

Accepted forms:
- Hex: "#RRGGBB" (opaque) or "#AARRGGBB" (alpha first)
- Decimal: "r,g,b" (opaque) or "r,g,b,a" with alpha in 0-1

Unusable input is an expected outcome, so parse functions return None
instead of raising.
"""

import re
from typing import Any, List, Optional

from tee_skin_api.models.schemas import CanonicalColor

_HEX_PATTERN = re.compile(r"#([0-9a-fA-F]{6}|[0-9a-fA-F]{8})")
DECIMAL_NUMBER_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

CHANNEL_MAX = 255.0
ALPHA_MAX = 1.0


def _in_range(value: float, upper: float) -> bool:
    # NaN compares false and infinities exceed the bound
    return 0.0 <= value <= upper


def _parse_hex(digits: str) -> CanonicalColor:
    """Build a color from 6 or 8 already validated hex digits."""
    alpha = 1.0
    if len(digits) == 8:
        alpha = int(digits[:2], 16) / 255.0
        digits = digits[2:]

    return CanonicalColor(
        r=int(digits[0:2], 16),
        g=int(digits[2:4], 16),
        b=int(digits[4:6], 16),
        a=alpha,
    )


def _parse_number(token: str) -> Optional[float]:
    token = token.strip()
    if not DECIMAL_NUMBER_PATTERN.fullmatch(token):
        return None
    return float(token)


def _parse_decimal(value: str) -> Optional[CanonicalColor]:
    parts: List[Optional[float]] = [_parse_number(p) for p in value.split(",")]
    if len(parts) not in (3, 4) or any(p is None for p in parts):
        return None

    r, g, b = parts[0], parts[1], parts[2]
    a = parts[3] if len(parts) == 4 else 1.0

    if not all(_in_range(c, CHANNEL_MAX) for c in (r, g, b)) or not _in_range(a, ALPHA_MAX):
        return None

    return CanonicalColor(r=r, g=g, b=b, a=a)


def parse_color_input(value: Any) -> Optional[CanonicalColor]:
    """
    Parse a color string.

    Args:
        value: Raw query value, e.g. "#FF0000", "#80FF0000", "255,0,0" or "255,0,0,0.5"

    Returns:
        CanonicalColor, or None when the value is missing, malformed or out of range
    """
    if not value or not isinstance(value, str):
        return None

    value = value.strip()
    if not value:
        return None

    if value.startswith("#"):
        match = _HEX_PATTERN.fullmatch(value)
        return _parse_hex(match.group(1)) if match else None

    return _parse_decimal(value)
