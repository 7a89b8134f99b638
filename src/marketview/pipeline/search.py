"""Search stage: case-insensitive substring match on name or symbol"""

from collections.abc import Sequence

from marketview.domain.models import Asset


def matches(asset: Asset, query: str) -> bool:
    needle = query.casefold()
    return needle in asset.name.casefold() or needle in asset.symbol.casefold()


def search_assets(assets: Sequence[Asset], query: str | None) -> list[Asset]:
    """Keep assets whose name or symbol contains the query

    A blank query keeps everything. Otherwise the query is matched as
    given, surrounding whitespace included. Order is preserved.
    """
    if not query or not query.strip():
        return list(assets)
    return [asset for asset in assets if matches(asset, query)]


class SearchStage:
    """Pipeline stage wrapping search_assets"""

    def __init__(self, query: str | None = ""):
        self.query = query

    @property
    def name(self) -> str:
        return "search"

    def apply(self, assets: Sequence[Asset]) -> list[Asset]:
        return search_assets(assets, self.query)
