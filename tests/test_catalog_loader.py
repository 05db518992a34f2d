"""
Tests for loading the embedded product payload.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

import pytest

from curtain_widget.application.exceptions import DataUnavailable
from curtain_widget.infrastructure.catalog.catalog_loader import load_catalog, parse_catalog


def test_parse_storefront_payload():
    raw = json.dumps(
        {
            "fabricPanelMapping": {"150": 2, "300": "4"},
            "variants": [
                {"id": 1, "price": 250000, "option1": "Ceiling", "option2": "2 Panels", "sku": "C-2"},
                {"id": "gid-2", "price": 125000, "option1": "Window", "option2": None},
            ],
        }
    )
    catalog = parse_catalog(raw)
    assert dict(catalog.panel_mapping) == {"150": 2, "300": 4}
    assert len(catalog.variants) == 2
    assert catalog.variants[0].option2 == "2 Panels"
    assert catalog.variants[1].id == "gid-2"


def test_mapping_is_optional_and_read_only():
    catalog = parse_catalog('{"variants": []}')
    assert dict(catalog.panel_mapping) == {}
    with pytest.raises(TypeError):
        catalog.panel_mapping["100"] = 1


def test_panel_mapping_alias_is_accepted():
    catalog = parse_catalog('{"panelMapping": {"90": 1}, "variants": []}')
    assert catalog.panel_mapping["90"] == 1


def test_missing_payload_is_fatal():
    with pytest.raises(DataUnavailable):
        parse_catalog("")
    with pytest.raises(DataUnavailable):
        parse_catalog(None)


def test_unparseable_payload_is_fatal():
    with pytest.raises(DataUnavailable):
        parse_catalog("{not json")
    with pytest.raises(DataUnavailable):
        parse_catalog('{"fabricPanelMapping": {}}')
    with pytest.raises(DataUnavailable):
        parse_catalog('{"variants": [{"id": 1}]}')


def test_load_catalog_from_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "product.json"
        path.write_text('{"variants": [{"id": 5, "price": 100, "option1": "Floor", "option2": "1 Panel"}]}')
        catalog = load_catalog(path)
        assert catalog.variants[0].id == 5

        with pytest.raises(DataUnavailable):
            load_catalog(Path(tmpdir) / "missing.json")


def test_bundled_product_data_loads():
    catalog = load_catalog(Path(__file__).resolve().parents[1] / "data" / "product.json")
    assert catalog.panel_mapping["120"] == 2
    assert len(catalog.variants) == 10


def test_non_utf8_payload_file_is_fatal():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "product.json"
        path.write_bytes(b'{"variants": [], "x": "\xff\xfe"}')
        with pytest.raises(DataUnavailable):
            load_catalog(path)
