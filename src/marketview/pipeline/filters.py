"""Filter stage: categorical predicates over the asset collection"""

from collections.abc import Callable, Sequence

from loguru import logger

from marketview.domain.models import Asset, Category, FilterMode

_PREDICATES: dict[FilterMode, Callable[[Asset], bool]] = {
    FilterMode.TOP_GAINERS: lambda asset: asset.change_percent > 0,
    FilterMode.TOP_LOSERS: lambda asset: asset.change_percent < 0,
    FilterMode.EQUITIES: lambda asset: asset.category is Category.EQUITY,
    FilterMode.DIGITAL_ASSETS: lambda asset: asset.category
    is Category.DIGITAL_ASSET,
}


def filter_assets(
    assets: Sequence[Asset], mode: FilterMode | str
) -> list[Asset]:
    """Keep the assets matching a filter mode, preserving order

    Gainers and losers are strict: an asset with a zero change is in
    neither. An unrecognised mode returns the input unchanged.

    Args:
        assets: Assets to filter
        mode: Filter mode or its string value

    Returns:
        New list of matching assets
    """
    resolved = FilterMode.parse(mode)
    if resolved is None:
        logger.warning(f"Unknown filter mode {mode!r}, showing all assets")
        return list(assets)

    if resolved is FilterMode.ALL:
        return list(assets)

    predicate = _PREDICATES[resolved]
    return [asset for asset in assets if predicate(asset)]


class FilterStage:
    """Pipeline stage wrapping filter_assets"""

    def __init__(self, mode: FilterMode | str = FilterMode.ALL):
        self.mode = mode

    @property
    def name(self) -> str:
        return "filter"

    def apply(self, assets: Sequence[Asset]) -> list[Asset]:
        return filter_assets(assets, self.mode)
