from __future__ import annotations

from decimal import Decimal

from curtain_widget.core.config import settings


def format_price(minor_units: int, prefix: str | None = None) -> str:
    """Format a minor-unit amount, e.g. 12345 -> "Rs.123.45"."""
    if prefix is None:
        prefix = settings.CURRENCY_PREFIX
    amount = Decimal(int(minor_units)) / 100
    return f"{prefix}{amount:.2f}"
