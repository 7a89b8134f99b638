"""View parameter models"""

from dataclasses import dataclass, field
from enum import Enum


class FilterMode(Enum):
    """Categorical predicates applied by the filter stage"""

    ALL = "all"
    TOP_GAINERS = "topGainers"
    TOP_LOSERS = "topLosers"
    EQUITIES = "equities"
    DIGITAL_ASSETS = "digitalAssets"

    @classmethod
    def parse(cls, value: "str | FilterMode") -> "FilterMode | None":
        """Resolve a filter mode, returning None when unrecognised"""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        return _FILTER_ALIASES.get(value.strip().lower())


_FILTER_ALIASES = {mode.value.lower(): mode for mode in FilterMode}
_FILTER_ALIASES.update(
    {
        "gainers": FilterMode.TOP_GAINERS,
        "losers": FilterMode.TOP_LOSERS,
        "stocks": FilterMode.EQUITIES,
        "crypto": FilterMode.DIGITAL_ASSETS,
    }
)


class SortField(Enum):
    """Fields the sort stage can order by"""

    NAME = "name"
    CHANGE_PERCENT = "changePercent"

    @classmethod
    def parse(cls, value: "str | SortField") -> "SortField":
        """Resolve a sort field from its value or a legacy alias

        Raises:
            ValueError: If the value names no sort field
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        if key in _SORT_ALIASES:
            return _SORT_ALIASES[key]
        raise ValueError(
            f"Unknown sort field: {value}. "
            f"Available fields: {[f.value for f in cls]}"
        )


_SORT_ALIASES = {
    "name": SortField.NAME,
    "changepercent": SortField.CHANGE_PERCENT,
    "change": SortField.CHANGE_PERCENT,
    "dailychangepercent": SortField.CHANGE_PERCENT,
}


class SortDirection(Enum):
    ASC = "asc"
    DESC = "desc"

    def toggled(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


@dataclass(frozen=True)
class ViewParameters:
    """The tuple of (query, filter, sort field, sort direction) for a view"""

    query: str = field(default="")
    filter_mode: FilterMode = field(default=FilterMode.ALL)
    sort_field: SortField = field(default=SortField.NAME)
    sort_direction: SortDirection = field(default=SortDirection.ASC)
