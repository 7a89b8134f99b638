"""Shared utilities for MarketView"""

from .exceptions import (
    AssetNotFoundError,
    ConfigurationError,
    DatasetError,
    DatasetValidationError,
    DuplicateAssetError,
    MarketViewError,
)

__all__ = [
    "MarketViewError",
    "ConfigurationError",
    "DatasetError",
    "DatasetValidationError",
    "DuplicateAssetError",
    "AssetNotFoundError",
]
