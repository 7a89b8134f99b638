"""Consolidated exceptions for MarketView.

All custom exceptions are defined here to provide a single source of truth
for error handling across the application.
"""


class MarketViewError(Exception):
    """Base exception for MarketView errors"""

    pass


class ConfigurationError(MarketViewError):
    """Raised when configuration is invalid or missing"""

    pass


class DatasetError(MarketViewError):
    """Base dataset error"""

    pass


class DatasetValidationError(DatasetError):
    """Raised when a dataset record fails validation"""

    pass


class DuplicateAssetError(DatasetError):
    """Raised when two assets share the same id"""

    pass


class AssetNotFoundError(MarketViewError):
    """Raised when an asset id is not part of the collection"""

    pass
