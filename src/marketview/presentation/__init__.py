"""Presentation helpers for the terminal view"""

from .formatting import (
    format_category,
    format_change,
    format_price,
    format_price_change,
    is_positive,
    price_change,
)
from .tables import asset_table, display_assets, display_detail

__all__ = [
    "format_price",
    "format_change",
    "format_price_change",
    "price_change",
    "format_category",
    "is_positive",
    "asset_table",
    "display_assets",
    "display_detail",
]
