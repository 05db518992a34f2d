from __future__ import annotations

import re

MIN_QUANTITY = 1

_LEADING_INT = re.compile(r"^\s*[+-]?\d+")


def parse_quantity(raw: str | int | None) -> int:
    """Read a quantity field the way a number input is read: leading integer, anything else is 1."""
    if isinstance(raw, bool):
        return MIN_QUANTITY
    if isinstance(raw, int):
        value = raw
    else:
        match = _LEADING_INT.match(raw or "")
        value = int(match.group(0)) if match else 0
    return clamp_quantity(value or MIN_QUANTITY)


def clamp_quantity(value: int) -> int:
    return max(MIN_QUANTITY, value)
