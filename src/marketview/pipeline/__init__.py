"""Asset view pipeline: filter, search and sort stages"""

from .chain import StageChain, build_view, view_chain
from .filters import FilterStage, filter_assets
from .search import SearchStage, search_assets
from .sort import SortStage, sort_assets

__all__ = [
    "StageChain",
    "build_view",
    "view_chain",
    "FilterStage",
    "filter_assets",
    "SearchStage",
    "search_assets",
    "SortStage",
    "sort_assets",
]
