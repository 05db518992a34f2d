from __future__ import annotations

import logging

from curtain_widget.application.exceptions import (
    AddToCartFailed,
    IncompleteSelection,
    RefreshFailed,
)
from curtain_widget.application.ports.cart_service import CartServicePort
from curtain_widget.application.ports.display import DisplayPort
from curtain_widget.application.use_cases.cart_count import CartCountAnimator
from curtain_widget.domain.entities.cart import CartSnapshot, LineItemRequest
from curtain_widget.domain.entities.display_update import DisplayUpdate, Surface
from curtain_widget.domain.entities.selection_state import SelectionState
from curtain_widget.domain.entities.submission import SubmissionResult


class SubmitCartUseCase:
    """
    Add-to-cart pipeline: precondition check, add request, cart count refresh, drawer refresh.

    Stages run in order and are never retried. Once the add request succeeds the
    submission counts as successful; the two refresh stages only log their failures.
    """

    def __init__(
        self,
        cart: CartServicePort,
        display: DisplayPort,
        animator: CartCountAnimator,
        drawer_section_id: str = "cart-drawer",
    ) -> None:
        self._cart = cart
        self._display = display
        self._animator = animator
        self._drawer_section_id = drawer_section_id
        self._logger = logging.getLogger(__name__)

    async def execute(self, snapshot: SelectionState) -> SubmissionResult:
        try:
            item = self._check_selection(snapshot)
            await self._add_to_cart(item)
        except (IncompleteSelection, AddToCartFailed) as e:
            self._display.apply(DisplayUpdate(Surface.ALERT, e.user_message))
            return SubmissionResult(ok=False, error=type(e).__name__, message=e.user_message)

        cart: CartSnapshot | None = None
        try:
            cart = await self._refresh_count()
        except RefreshFailed as e:
            self._logger.error("Failed to update cart count", extra={"error": str(e)})

        try:
            await self._refresh_drawer()
        except RefreshFailed as e:
            self._logger.error("Failed to open cart drawer", extra={"error": str(e)})

        return SubmissionResult(ok=True, cart=cart)

    def _check_selection(self, snapshot: SelectionState) -> LineItemRequest:
        if not snapshot.is_complete:
            self._logger.info("Submit blocked, selection incomplete", extra={"status": snapshot.status.value})
            raise IncompleteSelection("width, drop and variant are required")
        return LineItemRequest(
            variant_id=snapshot.variant.id,
            quantity=snapshot.quantity,
            width=snapshot.width,
            drop=snapshot.drop,
            fabric_panels=snapshot.panel_count,
        )

    async def _add_to_cart(self, item: LineItemRequest) -> None:
        self._logger.info(
            "Adding to cart",
            extra={"variant_id": item.variant_id, "quantity": item.quantity, "properties": item.properties()},
        )
        try:
            await self._cart.add_item(item)
        except AddToCartFailed:
            self._logger.error("Add to cart failed", extra={"variant_id": item.variant_id})
            raise
        except Exception as e:
            self._logger.exception("Add to cart failed", extra={"error": str(e)})
            raise AddToCartFailed(str(e)) from e

    async def _refresh_count(self) -> CartSnapshot:
        try:
            cart = await self._cart.get_cart()
        except Exception as e:
            raise RefreshFailed(f"cart fetch failed: {e}") from e

        self._logger.info("Cart fetched", extra={"item_count": cart.item_count})
        self._animator.start(cart.item_count)
        self._display.apply(DisplayUpdate(Surface.CART_UPDATED, cart))
        return cart

    async def _refresh_drawer(self) -> None:
        if not self._display.has_drawer():
            return
        try:
            markup = await self._cart.get_drawer_section(self._drawer_section_id)
            if markup:
                self._display.replace_drawer(markup)
            self._display.open_drawer()
        except Exception as e:
            raise RefreshFailed(f"drawer refresh failed: {e}") from e
