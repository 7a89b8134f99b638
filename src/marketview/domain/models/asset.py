"""Asset domain model"""

from dataclasses import dataclass, replace
from enum import Enum


class Category(Enum):
    """Closed classification of an asset, fixed at creation

    Legacy dataset values:
        - "stock" maps to EQUITY
        - "crypto" maps to DIGITAL_ASSET
    """

    EQUITY = "equity"
    DIGITAL_ASSET = "digital-asset"

    @classmethod
    def parse(cls, value: "str | Category") -> "Category":
        """Resolve a category from its value or a legacy alias

        Raises:
            ValueError: If the value names no category
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        if key in _CATEGORY_ALIASES:
            return _CATEGORY_ALIASES[key]
        return cls(key)


_CATEGORY_ALIASES = {
    "stock": Category.EQUITY,
    "crypto": Category.DIGITAL_ASSET,
}


@dataclass(frozen=True)
class Asset:
    """Value object for a tradable instrument

    Attributes:
        id: Stable identifier, unique within a collection
        name: Display name
        symbol: Short ticker symbol
        category: Asset category
        price: Current price, strictly positive
        change_percent: Most recent tick's percentage move
    """

    id: int
    name: str
    symbol: str
    category: Category
    price: float
    change_percent: float = 0.0

    def __post_init__(self):
        if not self.name:
            raise ValueError("Asset name cannot be empty")
        if not self.symbol:
            raise ValueError("Asset symbol cannot be empty")
        if self.price <= 0:
            raise ValueError(
                f"Asset price must be positive, got {self.price} for {self.symbol}"
            )

    @property
    def is_gainer(self) -> bool:
        return self.change_percent > 0

    @property
    def is_loser(self) -> bool:
        return self.change_percent < 0

    def with_quote(self, price: float, change_percent: float) -> "Asset":
        """Copy of this asset carrying a new price and change"""
        return replace(self, price=price, change_percent=change_percent)

    def __str__(self) -> str:
        return f"{self.symbol} ({self.name})"
