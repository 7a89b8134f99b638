"""Shared constants for the asset view and price simulation."""

TICK_INTERVAL_SECONDS = 5.0
MAX_MOVE_PERCENT = 5.0
SIMILAR_LIMIT = 3
PRICE_DECIMALS = 2
MIN_PRICE = 0.01
