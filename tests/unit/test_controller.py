"""Tests for the view controller"""

import pytest

from marketview.controller import ViewController
from marketview.domain.models import FilterMode, SortDirection, SortField
from marketview.shared.exceptions import AssetNotFoundError
from marketview.simulation import PriceSimulator


@pytest.fixture
def controller(store):
    return ViewController(store)


class TestViewController:
    """Tests for ViewController"""

    def test_default_rows_sorted_by_name(self, controller):
        assert [a.symbol for a in controller.rows()] == [
            "AAPL",
            "BTC",
            "ETH",
            "TSLA",
        ]

    def test_sort_by_same_field_toggles_direction(self, controller):
        params = controller.sort_by(SortField.NAME)
        assert params.sort_direction is SortDirection.DESC

        params = controller.sort_by("name")
        assert params.sort_direction is SortDirection.ASC

    def test_sort_by_new_field_starts_ascending(self, controller):
        controller.sort_by(SortField.NAME)
        params = controller.sort_by(SortField.CHANGE_PERCENT)

        assert params.sort_field is SortField.CHANGE_PERCENT
        assert params.sort_direction is SortDirection.ASC
        assert [a.change_percent for a in controller.rows()] == [
            -3.1,
            -1.2,
            2.5,
            5.8,
        ]

    def test_set_sort(self, controller):
        controller.set_sort("changePercent", "desc")
        assert [a.id for a in controller.rows()] == [3, 1, 2, 4]

    def test_query_and_filter(self, controller):
        controller.set_filter(FilterMode.DIGITAL_ASSETS)
        controller.set_query("eth")
        assert [a.symbol for a in controller.rows()] == ["ETH"]

    def test_unknown_filter_shows_all(self, controller):
        controller.set_filter("everything")
        assert controller.params.filter_mode is FilterMode.ALL
        assert len(controller.rows()) == 4

    def test_rows_follow_ticks(self, controller, store, rng):
        before = controller.rows()
        store.apply_tick(PriceSimulator(rng).tick)
        after = controller.rows()

        assert [a.id for a in before] == [a.id for a in after]
        assert {a.id: a for a in after} == {a.id: a for a in store.snapshot}

    def test_detail_includes_similar(self, controller):
        detail = controller.detail(1)

        assert detail.asset.symbol == "AAPL"
        assert [a.id for a in detail.similar] == [3]
        assert controller.current_detail_id == 1

    def test_detail_respects_limit(self, store):
        controller = ViewController(store, similar_limit=0)
        assert controller.detail(2).similar == []

    def test_select_similar_replaces_detail(self, controller):
        controller.detail(2)
        detail = controller.select_similar(4)

        assert detail.asset.symbol == "ETH"
        assert [a.id for a in detail.similar] == [2]
        assert controller.current_detail_id == 4

    def test_detail_unknown_asset(self, controller):
        with pytest.raises(AssetNotFoundError):
            controller.detail(404)
