from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any

from curtain_widget.application.ports.display import DisplayPort
from curtain_widget.domain.entities.cart import CartSnapshot
from curtain_widget.domain.entities.display_update import DisplayUpdate, Surface
from curtain_widget.infrastructure.cart.drawer_fragment import is_drawer_open, mark_drawer_open


class MemoryDisplay(DisplayPort):
    """Display surfaces held in memory and served as JSON."""

    def __init__(self, drawer_markup: str | None = "<cart-drawer></cart-drawer>", cart_count: int | None = None) -> None:
        self.price: str | None = None
        self.button_price: str = ""
        self.submit_enabled = False
        self.variant_id: int | str | None = None
        self.fabric_panels: int | None = None
        self.diagnostics: dict[str, str] = {}
        self.alerts: list[str] = []
        self.last_cart: CartSnapshot | None = None
        self.cart_count = cart_count
        self.drawer_markup = drawer_markup
        self._logger = logging.getLogger(__name__)

    def apply(self, update: DisplayUpdate) -> None:
        if update.surface == Surface.PRICE:
            self.price = update.value
        elif update.surface == Surface.BUTTON_PRICE:
            self.button_price = update.value or ""
        elif update.surface == Surface.SUBMIT_ENABLED:
            self.submit_enabled = bool(update.value)
        elif update.surface == Surface.VARIANT_ID:
            self.variant_id = update.value
        elif update.surface == Surface.FABRIC_PANELS:
            self.fabric_panels = update.value
        elif update.surface == Surface.DIAGNOSTICS:
            self.diagnostics = dict(update.value or {})
        elif update.surface == Surface.ALERT:
            self._logger.warning("Alert shown", extra={"reason": update.value})
            self.alerts.append(update.value)
        elif update.surface == Surface.CART_UPDATED:
            self.last_cart = update.value

    def get_cart_count(self) -> int:
        # A missing badge starts at zero.
        return self.cart_count or 0

    def set_cart_count(self, count: int) -> None:
        self.cart_count = count

    def has_drawer(self) -> bool:
        return self.drawer_markup is not None

    def replace_drawer(self, markup: str) -> None:
        self.drawer_markup = markup

    def open_drawer(self) -> None:
        if self.drawer_markup is not None:
            self.drawer_markup = mark_drawer_open(self.drawer_markup)

    @property
    def drawer_open(self) -> bool:
        return is_drawer_open(self.drawer_markup)

    def snapshot(self) -> dict[str, Any]:
        return {
            "price": self.price,
            "button_price": self.button_price,
            "submit_enabled": self.submit_enabled,
            "variant_id": self.variant_id,
            "fabric_panels": self.fabric_panels,
            "diagnostics": dict(self.diagnostics),
            "alerts": list(self.alerts),
            "cart_count": self.cart_count,
            "last_cart": asdict(self.last_cart) if self.last_cart else None,
            "drawer_open": self.drawer_open,
            "drawer_markup": self.drawer_markup,
        }
