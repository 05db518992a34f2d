from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from curtain_widget.application.exceptions import NoVariantMatch
from curtain_widget.application.utils.money import format_price
from curtain_widget.application.utils.panels import calculate_panels
from curtain_widget.application.utils.quantity import clamp_quantity, parse_quantity
from curtain_widget.application.utils.variant_resolver import matched_pattern, resolve_variant
from curtain_widget.domain.entities.catalog import ProductCatalog
from curtain_widget.domain.entities.display_update import DisplayUpdate, Surface
from curtain_widget.domain.entities.selection_state import SelectionState, SelectionStatus


@dataclass(frozen=True)
class SelectionResult:
    """Result of one selection transition."""

    updated_state: SelectionState
    updates: list[DisplayUpdate]


class SelectionUseCase:
    """
    Transitions of the width/drop/quantity selection.

    Each method is a function of (current state, input) and returns the next state
    plus the display updates that bring every surface in line with it.
    """

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog
        self._logger = logging.getLogger(__name__)

    def set_width(self, state: SelectionState, width: str | None) -> SelectionResult:
        self._logger.info("Width selected", extra={"width": width or None})

        # The raw value is kept: the panel mapping is keyed on exact width labels.
        if not width or not width.strip():
            # Drop is kept so the shopper does not have to pick it again.
            return self._finish(
                replace(state, width=None, panel_count=None, variant=None, status=SelectionStatus.EMPTY)
            )

        panels = calculate_panels(width, self._catalog)
        self._logger.info("Calculated panels", extra={"width": width, "panels": panels})
        state = replace(state, width=width, panel_count=panels, variant=None)

        if state.drop:
            return self._resolve(state)
        return self._finish(replace(state, status=SelectionStatus.WIDTH_ONLY))

    def set_drop(self, state: SelectionState, drop: str | None) -> SelectionResult:
        drop = (drop or "").strip()
        self._logger.info("Drop selected", extra={"drop": drop or None})

        if not drop:
            status = SelectionStatus.WIDTH_ONLY if state.width else SelectionStatus.EMPTY
            return self._finish(replace(state, drop=None, variant=None, status=status))

        state = replace(state, drop=drop, variant=None)
        if state.width and state.panel_count:
            return self._resolve(state)
        return self._finish(replace(state, status=SelectionStatus.EMPTY))

    def set_quantity(self, state: SelectionState, raw: str | int | None) -> SelectionResult:
        return self._finish(replace(state, quantity=parse_quantity(raw)))

    def change_quantity(self, state: SelectionState, delta: int) -> SelectionResult:
        return self._finish(replace(state, quantity=clamp_quantity(state.quantity + delta)))

    def render(self, state: SelectionState) -> list[DisplayUpdate]:
        """Display updates for a state without changing it."""
        updates: list[DisplayUpdate] = []
        if state.variant:
            total = format_price(state.total_price)
            updates.append(DisplayUpdate(Surface.PRICE, total))
            updates.append(DisplayUpdate(Surface.BUTTON_PRICE, total))
            updates.append(DisplayUpdate(Surface.VARIANT_ID, state.variant.id))
        else:
            updates.append(DisplayUpdate(Surface.PRICE, None))
            updates.append(DisplayUpdate(Surface.BUTTON_PRICE, ""))
            updates.append(DisplayUpdate(Surface.VARIANT_ID, None))
        updates.append(DisplayUpdate(Surface.FABRIC_PANELS, state.panel_count))
        updates.append(DisplayUpdate(Surface.SUBMIT_ENABLED, state.status == SelectionStatus.MATCHED))
        updates.append(DisplayUpdate(Surface.DIAGNOSTICS, self._diagnostics(state)))
        return updates

    def _resolve(self, state: SelectionState) -> SelectionResult:
        state = replace(state, status=SelectionStatus.AWAITING_MATCH)
        self._logger.info(
            "Finding variant",
            extra={"panels": state.panel_count, "drop": state.drop},
        )
        variant = resolve_variant(state.drop, state.panel_count, self._catalog)

        if variant is None:
            error = NoVariantMatch(f"No variant for drop={state.drop!r} panels={state.panel_count}")
            self._logger.warning("No matching variant found", extra={"error": str(error)})
            result = self._finish(replace(state, variant=None, status=SelectionStatus.UNMATCHED))
            result.updates.append(DisplayUpdate(Surface.ALERT, error.user_message))
            return result

        self._logger.info(
            "Variant found",
            extra={
                "variant_id": variant.id,
                "pattern": matched_pattern(variant, state.panel_count),
            },
        )
        return self._finish(replace(state, variant=variant, status=SelectionStatus.MATCHED))

    def _finish(self, state: SelectionState) -> SelectionResult:
        return SelectionResult(updated_state=state, updates=self.render(state))

    def _diagnostics(self, state: SelectionState) -> dict[str, str]:
        return {
            "width": f"{state.width}cm" if state.width else "-",
            "panels": str(state.panel_count) if state.panel_count else "-",
            "drop": state.drop or "-",
            "variant": str(state.variant.id) if state.variant else "-",
            "price": format_price(state.variant.price) if state.variant else "-",
        }
