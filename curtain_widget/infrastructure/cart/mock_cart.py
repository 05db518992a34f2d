from __future__ import annotations

import logging

from curtain_widget.application.exceptions import AddToCartFailed
from curtain_widget.application.ports.cart_service import CartServicePort
from curtain_widget.domain.entities.cart import CartSnapshot, LineItemRequest


class MockCartService(CartServicePort):
    def __init__(self, fail_add: bool = False, fail_cart: bool = False, fail_drawer: bool = False) -> None:
        self.lines: list[LineItemRequest] = []
        self.calls: list[str] = []
        self.fail_add = fail_add
        self.fail_cart = fail_cart
        self.fail_drawer = fail_drawer
        self._logger = logging.getLogger(__name__)

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)

    async def add_item(self, item: LineItemRequest) -> None:
        self.calls.append("add")
        if self.fail_add:
            raise AddToCartFailed("mock cart rejected the item")
        self.lines.append(item)
        self._logger.info(
            "Mock cart add", extra={"variant_id": item.variant_id, "quantity": item.quantity}
        )

    async def get_cart(self) -> CartSnapshot:
        self.calls.append("cart")
        if self.fail_cart:
            raise RuntimeError("mock cart unavailable")
        return CartSnapshot(item_count=self.item_count)

    async def get_drawer_section(self, section_id: str) -> str | None:
        self.calls.append("drawer")
        if self.fail_drawer:
            raise RuntimeError("mock drawer unavailable")
        return f'<cart-drawer id="{section_id}" data-item-count="{self.item_count}"></cart-drawer>'
