from __future__ import annotations

from curtain_widget.infrastructure.cart.drawer_fragment import extract_drawer, is_drawer_open, mark_drawer_open


def test_extract_drawer_missing():
    assert extract_drawer("<div>no drawer here</div>") is None
    assert extract_drawer("") is None


def test_mark_drawer_open_keeps_existing_classes():
    markup = mark_drawer_open('<cart-drawer class="drawer is-empty"></cart-drawer>')
    assert is_drawer_open(markup)
    assert "drawer" in markup
    assert "is-empty" in markup


def test_closed_drawer_is_not_open():
    assert is_drawer_open("<cart-drawer></cart-drawer>") is False
    assert is_drawer_open(None) is False
