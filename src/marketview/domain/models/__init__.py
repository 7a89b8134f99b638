"""Domain models"""

from .asset import Asset, Category
from .view import FilterMode, SortDirection, SortField, ViewParameters

__all__ = [
    "Asset",
    "Category",
    "FilterMode",
    "SortField",
    "SortDirection",
    "ViewParameters",
]
