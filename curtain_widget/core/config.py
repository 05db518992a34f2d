from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    CATALOG_PATH: str = "data/product.json"

    CART_BASE_URL: str | None = None
    CART_ADD_PATH: str = "/cart/add.js"
    CART_PATH: str = "/cart.js"
    CART_URL: str = "/cart"
    CART_DRAWER_SECTION_ID: str = "cart-drawer"
    CART_TIMEOUT_SECONDS: float = 10.0
    CART_COUNT_TICK_SECONDS: float = 0.05

    CURRENCY_PREFIX: str = "Rs."


settings = Settings()
