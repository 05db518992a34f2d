from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Surface(str, Enum):
    PRICE = "price"  # dynamic price text
    BUTTON_PRICE = "button_price"
    SUBMIT_ENABLED = "submit_enabled"
    VARIANT_ID = "variant_id"  # hidden form field
    FABRIC_PANELS = "fabric_panels"  # hidden form field
    DIAGNOSTICS = "diagnostics"
    ALERT = "alert"
    CART_UPDATED = "cart_updated"


@dataclass(frozen=True)
class DisplayUpdate:
    surface: Surface
    value: Any = None
