from __future__ import annotations

import pytest

from curtain_widget.application.use_cases.cart_count import CartCountAnimator
from curtain_widget.domain.entities.catalog import ProductCatalog, Variant
from curtain_widget.infrastructure.cart.mock_cart import MockCartService
from curtain_widget.infrastructure.display.memory_display import MemoryDisplay
from curtain_widget.wiring.dependencies import build_widget


async def no_sleep(_: float) -> None:
    return None


@pytest.fixture
def catalog() -> ProductCatalog:
    return ProductCatalog(
        panel_mapping={"120": 2, "240": 3},
        variants=(
            Variant(id=101, price=125000, option1="Window", option2="1 Panel"),
            Variant(id=102, price=250000, option1="Window", option2="2 Panels"),
            Variant(id=201, price=145000, option1="Ceiling", option2="1 Panel"),
            Variant(id=202, price=250000, option1="Ceiling", option2="2 Panels"),
            Variant(id=203, price=435000, option1="Ceiling", option2="3 Panels"),
        ),
    )


@pytest.fixture
def cart() -> MockCartService:
    return MockCartService()


@pytest.fixture
def display() -> MemoryDisplay:
    return MemoryDisplay()


@pytest.fixture
def animator(display: MemoryDisplay) -> CartCountAnimator:
    return CartCountAnimator(display, tick_seconds=0, sleep=no_sleep)


@pytest.fixture
def widget(catalog, cart, display, animator):
    return build_widget("test", catalog=catalog, cart=cart, display=display, animator=animator)
