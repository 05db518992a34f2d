from __future__ import annotations

import math
import re

from curtain_widget.domain.entities.catalog import ProductCatalog

PANEL_WIDTH_CM = 100

_LEADING_NUMBER = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_width(width: str) -> float | None:
    """Read the leading decimal number of a width label ("150cm" -> 150.0)."""
    match = _LEADING_NUMBER.match(width or "")
    if not match:
        return None
    value = float(match.group(0))
    if not math.isfinite(value):
        return None
    return value


def calculate_panels(width: str, catalog: ProductCatalog) -> int:
    """
    Number of fabric panels needed for a width.
    An exact entry in the catalog's panel mapping wins; otherwise one panel per 100cm, minimum 1.
    """
    mapped = catalog.panel_mapping.get(width)
    if mapped and mapped > 0:
        return int(mapped)

    value = parse_width(width)
    if value is None:
        return 1
    return max(1, math.ceil(value / PANEL_WIDTH_CM))
