"""Domain helpers for input validation and parameter parsing."""
from __future__ import annotations

import re

EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s.]+")
COLOR_PATTERN = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")
INT_PATTERN = re.compile(r"[+-]?[0-9]+")

# row ids are 32-bit INTEGER columns; paging values are 64-bit
ID_BITS = 32
PAGING_BITS = 64


def is_valid_email(value: str | None) -> bool:
    """Return True when value looks like local@domain.tld."""
    if not value:
        return False
    return bool(EMAIL_PATTERN.fullmatch(value))


def is_valid_color(value: str | None) -> bool:
    """Colors are optional; when given they must be #RGB or #RRGGBB."""
    if value is None:
        return True
    return bool(COLOR_PATTERN.fullmatch(value))


def parse_int(value: str, *, bits: int = ID_BITS) -> int:
    """Strict signed integer parsing: optional sign, ASCII digits, within `bits` range."""
    if value is None or not INT_PATTERN.fullmatch(value):
        raise ValueError(f"not an integer: {value!r}")
    parsed = int(value)
    bound = 1 << (bits - 1)
    if not -bound <= parsed < bound:
        raise ValueError(f"out of range for {bits}-bit integer: {value!r}")
    return parsed


def parse_int_or_default(value: str | None, default: int, *, bits: int = PAGING_BITS) -> int:
    """Parse a non-negative integer, falling back to default when absent or invalid."""
    if value is None:
        return default
    try:
        parsed = parse_int(value, bits=bits)
    except ValueError:
        return default
    return parsed if parsed >= 0 else default
