"""Stage protocol for the asset view pipeline"""

from collections.abc import Sequence
from typing import Protocol

from ..models import Asset


class AssetStage(Protocol):
    """Protocol for pipeline stages

    A stage turns one ordered asset sequence into a new one. Stages must not
    mutate their input.
    """

    @property
    def name(self) -> str:
        """Stage identifier"""
        ...

    def apply(self, assets: Sequence[Asset]) -> list[Asset]:
        """Transform assets into the next sequence

        Args:
            assets: Ordered assets from the previous stage

        Returns:
            New ordered list of assets
        """
        ...
