"""Pydantic models for asset dataset validation

Records come from a static JSON dataset. Both the current field names and
the legacy ones (type, currentPrice, dailyChangePercent) are accepted.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from marketview.domain.models import Asset, Category


class AssetRecord(BaseModel):
    """A single asset record from the initial dataset"""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: int = Field(..., ge=0, description="Stable asset id")
    name: str = Field(..., min_length=1, description="Display name")
    symbol: str = Field(..., min_length=1, description="Ticker symbol")
    category: Category = Field(
        ...,
        validation_alias=AliasChoices("category", "type"),
        description="Asset category",
    )
    price: float = Field(
        ...,
        gt=0,
        validation_alias=AliasChoices("price", "currentPrice"),
        description="Current price",
    )
    change_percent: float = Field(
        0.0,
        ge=-100,
        le=100,
        validation_alias=AliasChoices(
            "change_percent", "changePercent", "dailyChangePercent"
        ),
        description="Most recent percentage move",
    )

    @field_validator("category", mode="before")
    @classmethod
    def parse_category(cls, v):
        """Accept legacy category names"""
        try:
            return Category.parse(v)
        except ValueError:
            raise ValueError(
                f"Unknown category {v!r}, expected one of "
                f"{[c.value for c in Category]}"
            ) from None

    @field_validator("symbol")
    @classmethod
    def normalise_symbol(cls, v: str) -> str:
        return v.upper()

    def to_asset(self) -> Asset:
        return Asset(
            id=self.id,
            name=self.name,
            symbol=self.symbol,
            category=self.category,
            price=self.price,
            change_percent=self.change_percent,
        )
