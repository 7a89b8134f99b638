"""Tests for display formatting"""

import pytest
from rich.console import Console

from marketview.domain.models import Category
from marketview.presentation import (
    display_assets,
    display_detail,
    format_category,
    format_change,
    format_price,
    format_price_change,
    is_positive,
    price_change,
)
from tests.factories import AssetFactory


@pytest.mark.parametrize(
    "price,expected",
    [(150, "$150.00"), (45000.0, "$45000.00"), (0.456, "$0.46"), (1.5, "$1.50")],
)
def test_format_price(price, expected):
    assert format_price(price) == expected


@pytest.mark.parametrize(
    "change,expected",
    [(2.5, "+2.50%"), (-1.2, "-1.20%"), (0, "+0.00%"), (5.8, "+5.80%")],
)
def test_format_change(change, expected):
    assert format_change(change) == expected


@pytest.mark.parametrize(
    "price,change,expected",
    [
        (150.0, 2.5, "+$3.75"),
        (45000.0, -1.2, "$-540.00"),
        (800.0, 0.0, "+$0.00"),
    ],
)
def test_format_price_change(price, change, expected):
    asset = AssetFactory.asset(price=price, change_percent=change)
    assert format_price_change(asset) == expected


def test_price_change_amount():
    asset = AssetFactory.asset(price=200.0, change_percent=-5.0)
    assert price_change(asset) == pytest.approx(-10.0)


def test_format_category():
    assert format_category(Category.EQUITY) == "EQUITY"
    assert format_category(Category.DIGITAL_ASSET) == "DIGITAL-ASSET"


def test_zero_counts_as_positive():
    assert is_positive(0.0)
    assert not is_positive(-0.01)


def test_display_assets_renders_rows(assets):
    console = Console(record=True, width=120)
    display_assets(assets, console)
    text = console.export_text()

    assert "AAPL" in text
    assert "+5.80%" in text
    assert "$45000.00" in text


def test_display_assets_empty():
    console = Console(record=True, width=120)
    display_assets([], console)
    assert "No assets match" in console.export_text()


def test_display_detail(example_assets):
    console = Console(record=True, width=120)
    display_detail(example_assets[0], example_assets[2:], console)
    text = console.export_text()

    assert "Apple Inc." in text
    assert "Price Change: +$3.75" in text
    assert "Similar Assets" in text
    assert "TSLA" in text
