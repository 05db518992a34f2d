from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from curtain_widget.domain.entities.catalog import Variant


class SelectionStatus(str, Enum):
    EMPTY = "empty"
    WIDTH_ONLY = "width_only"
    AWAITING_MATCH = "awaiting_match"
    MATCHED = "matched"
    UNMATCHED = "unmatched"


@dataclass(frozen=True)
class SelectionState:
    width: str | None = None
    drop: str | None = None
    panel_count: int | None = None  # derived from width
    variant: Variant | None = None  # derived from drop + panel_count
    quantity: int = 1
    status: SelectionStatus = SelectionStatus.EMPTY

    @property
    def is_complete(self) -> bool:
        return bool(self.width and self.drop and self.variant)

    @property
    def unit_price(self) -> int | None:
        return self.variant.price if self.variant else None

    @property
    def total_price(self) -> int | None:
        if not self.variant:
            return None
        return self.variant.price * self.quantity
