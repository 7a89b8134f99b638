"""Stage chain for composing the asset view pipeline"""

from collections.abc import Sequence

from loguru import logger

from marketview.domain.models import Asset, ViewParameters
from marketview.domain.stages import AssetStage

from .filters import FilterStage
from .search import SearchStage
from .sort import SortStage


class StageChain:
    """Applies multiple stages in sequence"""

    def __init__(self, stages: list[AssetStage]):
        """Initialize stage chain

        Args:
            stages: Ordered list of stage instances
        """
        self.stages = stages

    def apply(self, assets: Sequence[Asset]) -> list[Asset]:
        """Apply all stages in sequence

        Args:
            assets: Collection to transform

        Returns:
            Result of the last stage, always a new list
        """
        result = list(assets)
        initial_count = len(result)

        for stage in self.stages:
            previous_count = len(result)
            result = stage.apply(result)
            dropped = previous_count - len(result)

            stage_name = getattr(stage, "name", type(stage).__name__)

            if dropped > 0:
                logger.debug(f"{stage_name} stage: dropped {dropped} assets")
            else:
                logger.debug(f"{stage_name} stage: all assets passed")

        logger.debug(
            f"Stage chain complete: {initial_count} -> {len(result)} assets"
        )

        return result


def view_chain(params: ViewParameters) -> StageChain:
    """Build the filter -> search -> sort chain for a set of view parameters"""
    return StageChain(
        [
            FilterStage(params.filter_mode),
            SearchStage(params.query),
            SortStage(params.sort_field, params.sort_direction),
        ]
    )


def build_view(
    assets: Sequence[Asset], params: ViewParameters | None = None
) -> list[Asset]:
    """Produce the render sequence for a collection and view parameters

    Equivalent to sort(search(filter(assets, F), Q), S, D).
    """
    return view_chain(params or ViewParameters()).apply(assets)
