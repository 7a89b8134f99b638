"""Asset store - holds the authoritative snapshot of the asset universe"""

from collections.abc import Callable, Iterable, Iterator, Sequence

from loguru import logger

from marketview.domain.models import Asset
from marketview.shared.exceptions import (
    AssetNotFoundError,
    DatasetError,
    DuplicateAssetError,
)


def _index(assets: Iterable[Asset]) -> dict[int, Asset]:
    index: dict[int, Asset] = {}
    for asset in assets:
        if asset.id in index:
            raise DuplicateAssetError(
                f"Duplicate asset id {asset.id}: "
                f"{index[asset.id].symbol} and {asset.symbol}"
            )
        index[asset.id] = asset
    return index


class AssetStore:
    """Holds the current ordered asset collection

    The universe is closed: a replacement snapshot must carry exactly the
    same ids as the current one.
    """

    def __init__(self, assets: Iterable[Asset]):
        snapshot = tuple(assets)
        self._index = _index(snapshot)
        self._snapshot = snapshot
        self.tick_count = 0
        logger.debug(f"Asset store initialised with {len(snapshot)} assets")

    @property
    def snapshot(self) -> tuple[Asset, ...]:
        return self._snapshot

    def replace(self, assets: Iterable[Asset]) -> tuple[Asset, ...]:
        """Swap in a new snapshot

        Raises:
            DuplicateAssetError: If the new snapshot repeats an id
            DatasetError: If the new snapshot adds or drops assets
        """
        snapshot = tuple(assets)
        index = _index(snapshot)
        if index.keys() != self._index.keys():
            added = sorted(index.keys() - self._index.keys())
            removed = sorted(self._index.keys() - index.keys())
            raise DatasetError(
                f"Snapshot changes the asset universe (added={added}, removed={removed})"
            )
        for asset_id, asset in index.items():
            if asset.category is not self._index[asset_id].category:
                raise DatasetError(f"Category of asset {asset_id} cannot change")

        self._snapshot = snapshot
        self._index = index
        return snapshot

    def apply_tick(
        self, step: Callable[[Sequence[Asset]], Sequence[Asset]]
    ) -> tuple[Asset, ...]:
        """Replace the snapshot with step(snapshot) and count the tick"""
        snapshot = self.replace(step(self._snapshot))
        self.tick_count += 1
        logger.debug(f"Tick {self.tick_count} applied to {len(snapshot)} assets")
        return snapshot

    def find(self, asset_id: int) -> Asset | None:
        return self._index.get(asset_id)

    def get(self, asset_id: int) -> Asset:
        """Look up an asset by id

        Raises:
            AssetNotFoundError: If no asset has this id
        """
        asset = self._index.get(asset_id)
        if asset is None:
            raise AssetNotFoundError(f"No asset with id {asset_id}")
        return asset

    def __len__(self) -> int:
        return len(self._snapshot)

    def __iter__(self) -> Iterator[Asset]:
        return iter(self._snapshot)
