import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from curtain_widget.api.widget import router as widget_router
from curtain_widget.core.config import settings
from curtain_widget.wiring.dependencies import get_catalog


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in (
            "session_id", "width", "drop", "panels", "variant_id", "quantity", "status", "item_count", "reason", "error",
        ):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Missing or broken product data stops start-up.
    catalog = get_catalog()
    logging.getLogger(__name__).info("Catalog ready with %s variants", len(catalog.variants))
    yield


app = FastAPI(title="Curtain Configurator", version="1.0.0", lifespan=lifespan)

app.include_router(widget_router, tags=["widget"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
