from __future__ import annotations

from dataclasses import dataclass

from curtain_widget.domain.entities.cart import CartSnapshot


@dataclass(frozen=True)
class SubmissionResult:
    ok: bool
    error: str | None = None  # error kind, e.g. "AddToCartFailed"
    message: str | None = None
    cart: CartSnapshot | None = None
