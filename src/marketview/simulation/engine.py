"""Price simulation engine - bounded uniform random walk

Each tick draws an independent move uniformly from
[-max_move_percent, +max_move_percent] for every asset. Price and change are
rounded to 2 decimals with Python's built-in round (round-half-to-even).
The engine keeps no state between ticks beyond its random source.
"""

import random
from collections.abc import Sequence

from marketview.domain.models import Asset
from marketview.shared.constants import (
    MAX_MOVE_PERCENT,
    MIN_PRICE,
    PRICE_DECIMALS,
)


class PriceSimulator:
    """Produces a new asset collection per tick from a seedable random source"""

    def __init__(
        self,
        rng: random.Random | None = None,
        max_move_percent: float = MAX_MOVE_PERCENT,
    ):
        """Initialise simulator

        Args:
            rng: Random source; a fresh unseeded one is created if omitted
            max_move_percent: Bound of the uniform move, must be in (0, 100)
        """
        if not 0 < max_move_percent < 100:
            raise ValueError(
                f"max_move_percent must be between 0 and 100, got {max_move_percent}"
            )
        self.rng = rng or random.Random()
        self.max_move_percent = max_move_percent

    @classmethod
    def seeded(
        cls, seed: int | None, max_move_percent: float = MAX_MOVE_PERCENT
    ) -> "PriceSimulator":
        return cls(random.Random(seed), max_move_percent)

    def move(self, asset: Asset) -> Asset:
        """Advance a single asset by one tick"""
        delta = self.rng.uniform(-self.max_move_percent, self.max_move_percent)
        new_price = round(asset.price * (1 + delta / 100), PRICE_DECIMALS)
        # sub-cent prices could round to zero
        new_price = max(new_price, MIN_PRICE)
        return asset.with_quote(
            price=new_price, change_percent=round(delta, PRICE_DECIMALS)
        )

    def tick(self, assets: Sequence[Asset]) -> list[Asset]:
        """Advance every asset by one tick

        Args:
            assets: Current collection, left untouched

        Returns:
            New collection in the same order
        """
        return [self.move(asset) for asset in assets]


def tick(
    assets: Sequence[Asset], rng: random.Random | None = None
) -> list[Asset]:
    """Advance every asset by one tick

    Args:
        assets: Current collection
        rng: Optional random source for deterministic runs; a fresh unseeded
            one is created per call if omitted

    Returns:
        New collection with updated price and change_percent
    """
    return PriceSimulator(rng).tick(assets)
