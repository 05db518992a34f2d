from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartSnapshot:
    item_count: int = 0


@dataclass(frozen=True)
class LineItemRequest:
    variant_id: int | str
    quantity: int = 1
    width: str | None = None
    drop: str | None = None
    fabric_panels: int | None = None

    def properties(self) -> dict[str, str | int | None]:
        return {
            "Width": f"{self.width}cm" if self.width else None,
            "Drop": self.drop,
            "Fabric Panels": self.fabric_panels,
        }
