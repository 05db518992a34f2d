from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class Variant:
    id: int | str
    price: int  # minor units
    option1: str | None = None  # drop label
    option2: str | None = None  # panel label


@dataclass(frozen=True)
class ProductCatalog:
    panel_mapping: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    variants: tuple[Variant, ...] = ()
