from __future__ import annotations

from abc import ABC, abstractmethod

from curtain_widget.domain.entities.cart import CartSnapshot, LineItemRequest


class CartServicePort(ABC):
    @abstractmethod
    async def add_item(self, item: LineItemRequest) -> None:
        """Add a line item. Raises AddToCartFailed on rejection or transport error."""
        raise NotImplementedError

    @abstractmethod
    async def get_cart(self) -> CartSnapshot:
        """Fetch the current cart summary."""
        raise NotImplementedError

    @abstractmethod
    async def get_drawer_section(self, section_id: str) -> str | None:
        """Fetch the rendered drawer section. Returns the drawer element markup, or None if absent."""
        raise NotImplementedError
