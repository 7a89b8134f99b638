"""Pytest fixtures for MarketView tests"""

import random

import pytest

from marketview.store import AssetStore

from tests.factories import AssetFactory


@pytest.fixture
def assets():
    """Four-asset universe: two equities, two digital assets"""
    return AssetFactory.universe()


@pytest.fixture
def example_assets():
    """Apple, Bitcoin and Tesla"""
    return AssetFactory.example()


@pytest.fixture
def store(assets) -> AssetStore:
    return AssetStore(assets)


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for deterministic ticks"""
    return random.Random(1234)


@pytest.fixture
def clean_env(monkeypatch, mocker):
    """Environment without MarketView variables or a .env file"""
    for key in [
        "MARKETVIEW_DATASET",
        "MARKETVIEW_TICK_INTERVAL",
        "MARKETVIEW_MAX_MOVE_PERCENT",
        "MARKETVIEW_SEED",
        "MARKETVIEW_SIMILAR_LIMIT",
        "MARKETVIEW_LOG_LEVEL",
    ]:
        monkeypatch.delenv(key, raising=False)
    mocker.patch("marketview.core.config.load_dotenv")
    return monkeypatch
