"""View controller - owns view parameters and drives the pipeline"""

from dataclasses import dataclass, replace

from loguru import logger

from marketview.domain.models import (
    Asset,
    FilterMode,
    SortDirection,
    SortField,
    ViewParameters,
)
from marketview.pipeline import build_view
from marketview.recommend import similar_assets
from marketview.shared.constants import SIMILAR_LIMIT
from marketview.store import AssetStore


@dataclass(frozen=True)
class AssetDetail:
    """An opened asset together with its similar assets"""

    asset: Asset
    similar: list[Asset]


class ViewController:
    """Holds the view parameters for a store and renders rows on demand

    Rows are recomputed from the store's latest snapshot on every call, so a
    tick or a parameter change is reflected the next time rows() is read.
    """

    def __init__(self, store: AssetStore, similar_limit: int = SIMILAR_LIMIT):
        self.store = store
        self.similar_limit = similar_limit
        self.params = ViewParameters()
        self.current_detail_id: int | None = None

    def set_query(self, query: str) -> None:
        self.params = replace(self.params, query=query)

    def set_filter(self, mode: FilterMode | str) -> None:
        """Select a filter; unknown modes fall back to all assets"""
        resolved = FilterMode.parse(mode)
        if resolved is None:
            logger.warning(f"Unknown filter mode {mode!r}, showing all assets")
            resolved = FilterMode.ALL
        self.params = replace(self.params, filter_mode=resolved)

    def sort_by(self, field: SortField | str) -> ViewParameters:
        """Select a sort field

        Choosing the active field flips the direction; choosing another field
        switches to it in ascending order.
        """
        field = SortField.parse(field)
        if field is self.params.sort_field:
            direction = self.params.sort_direction.toggled()
        else:
            direction = SortDirection.ASC
        self.params = replace(
            self.params, sort_field=field, sort_direction=direction
        )
        return self.params

    def set_sort(
        self, field: SortField | str, direction: SortDirection | str
    ) -> None:
        self.params = replace(
            self.params,
            sort_field=SortField.parse(field),
            sort_direction=SortDirection(direction),
        )

    def rows(self) -> list[Asset]:
        return build_view(self.store.snapshot, self.params)

    def detail(self, asset_id: int) -> AssetDetail:
        """Open the detail view for an asset

        Raises:
            AssetNotFoundError: If the id is not in the store
        """
        asset = self.store.get(asset_id)
        self.current_detail_id = asset_id
        return AssetDetail(
            asset=asset,
            similar=similar_assets(
                self.store.snapshot, asset, self.similar_limit
            ),
        )

    def select_similar(self, asset_id: int) -> AssetDetail:
        """Replace the open detail with one of its similar assets"""
        logger.debug(
            f"Switching detail from {self.current_detail_id} to {asset_id}"
        )
        return self.detail(asset_id)
