from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from curtain_widget.application.dto.catalog_payload import CatalogPayloadDTO
from curtain_widget.application.exceptions import DataUnavailable
from curtain_widget.domain.entities.catalog import ProductCatalog

logger = logging.getLogger(__name__)


def parse_catalog(raw: str | bytes | None) -> ProductCatalog:
    """Build the catalog from the embedded product JSON. Raises DataUnavailable."""
    if not raw:
        raise DataUnavailable("Product data not found")
    try:
        payload = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise DataUnavailable(f"Failed to parse product data: {e}") from e

    try:
        dto = CatalogPayloadDTO.model_validate(payload)
    except ValidationError as e:
        raise DataUnavailable(f"Invalid product data: {e}") from e

    catalog = dto.to_catalog()
    logger.info(
        "Product data loaded",
        extra={"variant_count": len(catalog.variants), "mapping_count": len(catalog.panel_mapping)},
    )
    return catalog


def load_catalog(path: str | Path) -> ProductCatalog:
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DataUnavailable(f"Product data not found at {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise DataUnavailable(f"Product data at {path} is not valid UTF-8: {e}") from e
    return parse_catalog(raw)
