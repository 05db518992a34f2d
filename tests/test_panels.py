"""
Tests for fabric panel calculation.
"""

from __future__ import annotations

from curtain_widget.application.utils.panels import calculate_panels, parse_width
from curtain_widget.domain.entities.catalog import ProductCatalog


def test_mapped_width_wins_over_formula():
    catalog = ProductCatalog(panel_mapping={"120": 3, "90": 2})
    assert calculate_panels("120", catalog) == 3
    assert calculate_panels("90", catalog) == 2


def test_unmapped_width_uses_one_panel_per_100cm():
    catalog = ProductCatalog(panel_mapping={"120": 3})
    assert calculate_panels("150", catalog) == 2
    assert calculate_panels("100", catalog) == 1
    assert calculate_panels("101", catalog) == 2
    assert calculate_panels("300", catalog) == 3


def test_mapping_is_matched_on_exact_key_only():
    catalog = ProductCatalog(panel_mapping={"120": 5})
    assert calculate_panels("120cm", catalog) == 2
    assert calculate_panels(" 120", catalog) == 2


def test_small_zero_and_negative_widths_floor_at_one():
    catalog = ProductCatalog()
    assert calculate_panels("10", catalog) == 1
    assert calculate_panels("0", catalog) == 1
    assert calculate_panels("-250", catalog) == 1


def test_non_numeric_width_is_one_panel():
    catalog = ProductCatalog()
    assert calculate_panels("wide", catalog) == 1
    assert calculate_panels("", catalog) == 1
    assert calculate_panels("Infinity", catalog) == 1


def test_non_positive_mapping_value_falls_back_to_formula():
    catalog = ProductCatalog(panel_mapping={"250": 0})
    assert calculate_panels("250", catalog) == 3


def test_parse_width_reads_leading_number():
    assert parse_width("150cm") == 150.0
    assert parse_width("  82.5 cm") == 82.5
    assert parse_width("cm150") is None
