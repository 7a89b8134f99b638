"""Sort stage: stable ordering by name or change percent

Descending order uses the mirrored comparator rather than reversing an
ascending sort, so equal keys keep their input order in both directions.
"""

from collections.abc import Callable, Sequence
from functools import cmp_to_key

from marketview.domain.models import Asset, SortDirection, SortField

_KEYS: dict[SortField, Callable[[Asset], str | float]] = {
    SortField.NAME: lambda asset: asset.name.casefold(),
    SortField.CHANGE_PERCENT: lambda asset: asset.change_percent,
}


def _compare(a: str | float, b: str | float) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def sort_assets(
    assets: Sequence[Asset],
    field: SortField | str,
    direction: SortDirection | str = SortDirection.ASC,
) -> list[Asset]:
    """Return a new list of assets ordered by field and direction

    Args:
        assets: Assets to order; left untouched
        field: Sort field or its string value
        direction: Sort direction or its string value

    Returns:
        New sorted list

    Raises:
        ValueError: If field or direction is not recognised
    """
    key = _KEYS[SortField.parse(field)]
    sign = 1 if SortDirection(direction) is SortDirection.ASC else -1

    def comparator(a: Asset, b: Asset) -> int:
        return sign * _compare(key(a), key(b))

    # sorted() is stable, ties keep input order
    return sorted(assets, key=cmp_to_key(comparator))


class SortStage:
    """Pipeline stage wrapping sort_assets"""

    def __init__(
        self,
        field: SortField | str = SortField.NAME,
        direction: SortDirection | str = SortDirection.ASC,
    ):
        self.field = field
        self.direction = direction

    @property
    def name(self) -> str:
        return "sort"

    def apply(self, assets: Sequence[Asset]) -> list[Asset]:
        return sort_assets(assets, self.field, self.direction)
