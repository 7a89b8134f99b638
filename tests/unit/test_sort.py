"""Tests for the sort stage"""

import copy

import pytest

from marketview.domain.models import SortDirection, SortField
from marketview.pipeline import SortStage, sort_assets
from tests.factories import AssetFactory


def ids(assets):
    return [a.id for a in assets]


@pytest.fixture
def tied():
    """Assets with repeated keys on both sort fields"""
    return [
        AssetFactory.equity(1, "beta", 1.0),
        AssetFactory.equity(2, "Alpha", 0.5),
        AssetFactory.digital(3, "BETA", 1.0),
        AssetFactory.digital(4, "alpha", 1.0),
        AssetFactory.equity(5, "Gamma", 0.5),
    ]


class TestSortAssets:
    """Tests for sort_assets"""

    def test_name_ascending(self, assets):
        result = sort_assets(assets, SortField.NAME, SortDirection.ASC)
        assert [a.name for a in result] == [
            "Apple Inc.",
            "Bitcoin",
            "Ethereum",
            "Tesla Inc.",
        ]

    def test_name_descending(self, assets):
        result = sort_assets(assets, SortField.NAME, SortDirection.DESC)
        assert [a.name for a in result] == [
            "Tesla Inc.",
            "Ethereum",
            "Bitcoin",
            "Apple Inc.",
        ]

    def test_change_ascending(self, assets):
        result = sort_assets(assets, "changePercent", "asc")
        assert [a.change_percent for a in result] == [-3.1, -1.2, 2.5, 5.8]

    def test_change_descending(self, assets):
        result = sort_assets(assets, "changePercent", "desc")
        assert [a.change_percent for a in result] == [5.8, 2.5, -1.2, -3.1]

    def test_name_is_case_insensitive(self):
        collection = [
            AssetFactory.equity(1, "zeta"),
            AssetFactory.equity(2, "Alpha"),
            AssetFactory.equity(3, "beta"),
        ]
        assert ids(sort_assets(collection, SortField.NAME)) == [2, 3, 1]

    def test_name_ties_keep_input_order_both_directions(self, tied):
        """Test that equal names resolve to input order, not reversed"""
        assert ids(sort_assets(tied, SortField.NAME, "asc")) == [2, 4, 1, 3, 5]
        assert ids(sort_assets(tied, SortField.NAME, "desc")) == [5, 1, 3, 2, 4]

    def test_change_ties_keep_input_order_both_directions(self, tied):
        asc = sort_assets(tied, SortField.CHANGE_PERCENT, SortDirection.ASC)
        desc = sort_assets(tied, SortField.CHANGE_PERCENT, SortDirection.DESC)
        assert ids(asc) == [2, 5, 1, 3, 4]
        assert ids(desc) == [1, 3, 4, 2, 5]

    @pytest.mark.parametrize("field", list(SortField))
    @pytest.mark.parametrize("direction", list(SortDirection))
    def test_idempotent(self, tied, field, direction):
        once = sort_assets(tied, field, direction)
        assert sort_assets(once, field, direction) == once

    @pytest.mark.parametrize("field", list(SortField))
    def test_descending_mirrors_ascending_keys(self, assets, field):
        key = (
            (lambda a: a.name.casefold())
            if field is SortField.NAME
            else (lambda a: a.change_percent)
        )
        asc_keys = [key(a) for a in sort_assets(assets, field, "asc")]
        desc_keys = [key(a) for a in sort_assets(assets, field, "desc")]
        assert desc_keys == list(reversed(asc_keys))

    def test_returns_new_list_and_keeps_input(self, assets):
        before = copy.deepcopy(assets)
        result = sort_assets(assets, SortField.CHANGE_PERCENT, SortDirection.DESC)
        assert result is not assets
        assert assets == before

    def test_empty(self):
        assert sort_assets([], SortField.NAME, SortDirection.DESC) == []

    def test_unknown_field_raises(self, assets):
        with pytest.raises(ValueError):
            sort_assets(assets, "price")

    def test_stage_wraps_function(self, example_assets):
        stage = SortStage(SortField.CHANGE_PERCENT, SortDirection.DESC)
        assert stage.name == "sort"
        assert ids(stage.apply(example_assets)) == [3, 1, 2]
