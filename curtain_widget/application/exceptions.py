class WidgetError(RuntimeError):
    """Base class for curtain configurator errors."""

    user_message: str | None = None


class DataUnavailable(WidgetError):
    """Raised when the embedded product payload is missing or unparseable."""
    pass


class NoVariantMatch(WidgetError):
    """Raised when no catalog variant matches the selected drop and panel count."""

    user_message = "No matching variant found. Please check product setup."


class IncompleteSelection(WidgetError):
    """Raised when submit is attempted before width, drop and variant are resolved."""

    user_message = "Please select both Width and Drop"


class AddToCartFailed(WidgetError):
    """Raised when the cart service rejects the add request or is unreachable."""

    user_message = "Sorry, failed to add this product to cart."


class RefreshFailed(WidgetError):
    """Raised when the cart count or drawer cannot be refreshed after a successful add."""
    pass
