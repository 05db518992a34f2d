from __future__ import annotations

import logging

import httpx

from curtain_widget.application.exceptions import AddToCartFailed
from curtain_widget.application.ports.cart_service import CartServicePort
from curtain_widget.core.config import settings
from curtain_widget.domain.entities.cart import CartSnapshot, LineItemRequest
from curtain_widget.infrastructure.cart.drawer_fragment import extract_drawer


class ShopifyCartClient(CartServicePort):
    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url or settings.CART_BASE_URL
        if not self._base_url:
            raise ValueError("CART_BASE_URL is required for the storefront cart client")
        self._client = client or httpx.AsyncClient(
            base_url=self._base_url,
            timeout=timeout or settings.CART_TIMEOUT_SECONDS,
        )
        self._logger = logging.getLogger(__name__)

    async def add_item(self, item: LineItemRequest) -> None:
        payload = {"id": item.variant_id, "quantity": item.quantity}
        try:
            resp = await self._client.post(settings.CART_ADD_PATH, json=payload)
        except httpx.HTTPError as e:
            self._logger.error("Cart add request failed", extra={"error": str(e)})
            raise AddToCartFailed(f"transport error: {e}") from e

        if resp.status_code >= 400:
            try:
                description = resp.json().get("description")
            except Exception:
                description = resp.text
            self._logger.error(
                "Cart add rejected",
                extra={"status": resp.status_code, "error": description, "variant_id": item.variant_id},
            )
            raise AddToCartFailed(f"cart service returned {resp.status_code}: {description}")

    async def get_cart(self) -> CartSnapshot:
        resp = await self._client.get(settings.CART_PATH)
        resp.raise_for_status()
        data = resp.json()
        return CartSnapshot(item_count=int(data.get("item_count") or 0))

    async def get_drawer_section(self, section_id: str) -> str | None:
        resp = await self._client.get(settings.CART_URL, params={"section_id": section_id})
        resp.raise_for_status()
        return extract_drawer(resp.text)

    async def aclose(self) -> None:
        await self._client.aclose()
