"""Similarity recommender - same-category peers of a focal asset"""

from collections.abc import Sequence
from itertools import islice

from marketview.domain.models import Asset
from marketview.shared.constants import SIMILAR_LIMIT


def is_peer(candidate: Asset, focal: Asset) -> bool:
    return candidate.id != focal.id and candidate.category is focal.category


def similar_assets(
    assets: Sequence[Asset], focal: Asset, limit: int = SIMILAR_LIMIT
) -> list[Asset]:
    """Select up to limit peers of focal in collection order

    Peers share focal's category; focal itself is excluded by id.

    Raises:
        ValueError: If limit is negative
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    peers = (asset for asset in assets if is_peer(asset, focal))
    return list(islice(peers, limit))
