from functools import lru_cache
import logging

from curtain_widget.core.config import settings
from curtain_widget.application.ports.cart_service import CartServicePort
from curtain_widget.application.use_cases.cart_count import CartCountAnimator
from curtain_widget.application.use_cases.selection import SelectionUseCase
from curtain_widget.application.use_cases.submit_cart import SubmitCartUseCase
from curtain_widget.application.use_cases.widget import CurtainWidget
from curtain_widget.domain.entities.catalog import ProductCatalog
from curtain_widget.infrastructure.cart.mock_cart import MockCartService
from curtain_widget.infrastructure.cart.shopify_cart_client import ShopifyCartClient
from curtain_widget.infrastructure.catalog.catalog_loader import load_catalog
from curtain_widget.infrastructure.display.memory_display import MemoryDisplay
from curtain_widget.infrastructure.store.memory_store import MemoryWidgetStore


_widget_store: MemoryWidgetStore | None = None


@lru_cache
def get_catalog() -> ProductCatalog:
    return load_catalog(settings.CATALOG_PATH)


@lru_cache
def get_cart_service() -> CartServicePort:
    logger = logging.getLogger(__name__)
    if not settings.CART_BASE_URL or settings.ENV.lower() in {"dev", "local"}:
        logger.info("Using MockCartService (ENV=%s, CART_BASE_URL set=%s)", settings.ENV, bool(settings.CART_BASE_URL))
        return MockCartService()
    logger.info("Using ShopifyCartClient base_url=%s", settings.CART_BASE_URL)
    return ShopifyCartClient()


def build_widget(
    session_id: str,
    catalog: ProductCatalog | None = None,
    cart: CartServicePort | None = None,
    display: MemoryDisplay | None = None,
    animator: CartCountAnimator | None = None,
) -> CurtainWidget:
    display = display or MemoryDisplay()
    animator = animator or CartCountAnimator(display, tick_seconds=settings.CART_COUNT_TICK_SECONDS)
    submit_cart = SubmitCartUseCase(
        cart=cart or get_cart_service(),
        display=display,
        animator=animator,
        drawer_section_id=settings.CART_DRAWER_SECTION_ID,
    )
    return CurtainWidget(
        selection=SelectionUseCase(catalog=catalog or get_catalog()),
        submit_cart=submit_cart,
        display=display,
        session_id=session_id,
    )


async def get_widget_store() -> MemoryWidgetStore:
    # Async so FastAPI resolves it on the event loop, not in the threadpool.
    global _widget_store
    if _widget_store is None:
        _widget_store = MemoryWidgetStore(factory=build_widget)
    return _widget_store
