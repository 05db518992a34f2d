from __future__ import annotations

from types import MappingProxyType

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from curtain_widget.domain.entities.catalog import ProductCatalog, Variant


class VariantDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int | str
    price: int
    option1: str | None = None
    option2: str | None = None


class CatalogPayloadDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    panel_mapping: dict[str, int] | None = Field(
        default=None,
        validation_alias=AliasChoices("fabricPanelMapping", "panelMapping", "panel_mapping"),
    )
    variants: list[VariantDTO]

    def to_catalog(self) -> ProductCatalog:
        return ProductCatalog(
            panel_mapping=MappingProxyType(dict(self.panel_mapping or {})),
            variants=tuple(
                Variant(id=v.id, price=v.price, option1=v.option1, option2=v.option2)
                for v in self.variants
            ),
        )
