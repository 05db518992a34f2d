from __future__ import annotations

from curtain_widget.domain.entities.catalog import ProductCatalog, Variant


def panel_patterns(panel_count: int) -> list[str]:
    """Panel label patterns, most specific first."""
    n = str(panel_count)
    return [f"{n} Panel", f"{n} Panels", f"{n}Panel", f"{n}Panels", n]


def _drop_matches(variant: Variant, drop: str) -> bool:
    if not variant.option1:
        return False
    return variant.option1.strip().lower() == drop.strip().lower()


def _panel_matches(variant: Variant, pattern: str) -> bool:
    if not variant.option2:
        return False
    # Substring match on purpose: catalog panel labels are not consistent.
    return pattern.lower() in variant.option2.lower()


def resolve_variant(drop: str, panel_count: int, catalog: ProductCatalog) -> Variant | None:
    for pattern in panel_patterns(panel_count):
        for variant in catalog.variants:
            if _drop_matches(variant, drop) and _panel_matches(variant, pattern):
                return variant
    return None


def matched_pattern(variant: Variant, panel_count: int) -> str | None:
    """The first pattern that a resolved variant's panel label satisfies."""
    for pattern in panel_patterns(panel_count):
        if _panel_matches(variant, pattern):
            return pattern
    return None
