"""
Tests for the widget HTTP endpoints.
"""

from __future__ import annotations

import asyncio
import time

import httpx
import pytest
from fastapi.testclient import TestClient

from curtain_widget.application.exceptions import DataUnavailable
from curtain_widget.domain.entities.catalog import ProductCatalog
from curtain_widget.domain.entities.selection_state import SelectionStatus
from curtain_widget.infrastructure.cart.mock_cart import MockCartService
from curtain_widget.infrastructure.store.memory_store import MemoryWidgetStore
from curtain_widget.main import app
from curtain_widget.wiring import dependencies
from curtain_widget.wiring.dependencies import build_widget, get_widget_store


@pytest.fixture
def client(catalog):
    cart = MockCartService()
    store = MemoryWidgetStore(factory=lambda session_id: build_widget(session_id, catalog=catalog, cart=cart))
    app.dependency_overrides[get_widget_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_select_and_submit(client):
    resp = client.post("/widget/s1/width", json={"width": "150"})
    assert resp.status_code == 200
    assert resp.json()["selection"]["status"] == "width_only"
    assert resp.json()["selection"]["panel_count"] == 2

    resp = client.post("/widget/s1/drop", json={"drop": "Ceiling"})
    body = resp.json()
    assert body["selection"]["status"] == "matched"
    assert body["selection"]["variant_id"] == 202
    assert body["display"]["price"] == "Rs.2500.00"
    assert body["display"]["submit_enabled"] is True

    resp = client.post("/widget/s1/quantity/step", json={"delta": 1})
    assert resp.json()["display"]["price"] == "Rs.5000.00"

    resp = client.post("/widget/s1/submit")
    body = resp.json()
    assert body["ok"] is True
    assert body["display"]["last_cart"] == {"item_count": 2}
    assert body["display"]["drawer_open"] is True


def test_submit_incomplete(client):
    resp = client.post("/widget/s2/submit")
    body = resp.json()
    assert resp.status_code == 200
    assert body["ok"] is False
    assert body["error"] == "IncompleteSelection"
    assert body["display"]["alerts"] == ["Please select both Width and Drop"]


def test_sessions_are_independent(client):
    client.post("/widget/a/width", json={"width": "150"})
    resp = client.get("/widget/b")
    assert resp.json()["selection"]["width"] is None


def test_quantity_field_is_clamped(client):
    resp = client.post("/widget/s3/quantity", json={"quantity": "-3"})
    assert resp.json()["selection"]["quantity"] == 1


def test_step_only_accepts_unit_deltas(client):
    resp = client.post("/widget/s4/quantity/step", json={"delta": 5})
    assert resp.status_code == 422


def test_startup_fails_without_product_data(monkeypatch):
    monkeypatch.setattr(dependencies.settings, "CATALOG_PATH", "/nonexistent/product.json")
    dependencies.get_catalog.cache_clear()
    try:
        with pytest.raises(DataUnavailable):
            with TestClient(app):
                pass
    finally:
        dependencies.get_catalog.cache_clear()


def test_concurrent_events_for_one_session_are_applied_in_turn(catalog):
    """Width and drop sent together both land, even when the width lookup is slow."""

    class SlowMapping(dict):
        def get(self, key, default=None):
            time.sleep(0.05)
            return super().get(key, default)

    slow_catalog = ProductCatalog(panel_mapping=SlowMapping(catalog.panel_mapping), variants=catalog.variants)
    store = MemoryWidgetStore(
        factory=lambda session_id: build_widget(session_id, catalog=slow_catalog, cart=MockCartService())
    )
    app.dependency_overrides[get_widget_store] = lambda: store

    async def run():
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
            return await asyncio.gather(
                http.post("/widget/race/width", json={"width": "150"}),
                http.post("/widget/race/drop", json={"drop": "Ceiling"}),
            )

    try:
        responses = asyncio.run(run())
    finally:
        app.dependency_overrides.clear()

    assert [r.status_code for r in responses] == [200, 200]
    assert len(store) == 1
    state = store.get("race").state
    assert state.width == "150"
    assert state.drop == "Ceiling"
    assert state.status == SelectionStatus.MATCHED
    assert state.variant.id == 202
