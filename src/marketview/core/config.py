"""Configuration management for MarketView"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv
from loguru import logger

from marketview.shared.constants import (
    MAX_MOVE_PERCENT,
    SIMILAR_LIMIT,
    TICK_INTERVAL_SECONDS,
)
from marketview.shared.exceptions import ConfigurationError

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class SimulationConfig:
    """Configuration for the price simulation"""

    # Bound of the uniform per-tick move (percent)
    max_move_percent: float = MAX_MOVE_PERCENT

    # Seed for the random source, None for a non-deterministic run
    seed: int | None = None


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None


def _env_int(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class Config:
    """Configuration for MarketView loaded from environment variables"""

    simulation: SimulationConfig = field(default_factory=SimulationConfig)

    # JSON dataset path, None uses the bundled dataset
    dataset_path: str | None = None

    # Seconds between simulated ticks
    tick_interval_seconds: float = TICK_INTERVAL_SECONDS

    # Similar assets shown in a detail view
    similar_limit: int = SIMILAR_LIMIT

    log_level: str = "INFO"

    def validate(self) -> None:
        """Check value ranges

        Raises:
            ConfigurationError: If any value is out of range
        """
        if self.tick_interval_seconds <= 0:
            raise ConfigurationError(
                f"Tick interval must be positive, got {self.tick_interval_seconds}"
            )
        if self.similar_limit < 0:
            raise ConfigurationError(
                f"Similar limit must be >= 0, got {self.similar_limit}"
            )
        if not 0 < self.simulation.max_move_percent < 100:
            raise ConfigurationError(
                "Max move percent must be between 0 and 100, "
                f"got {self.simulation.max_move_percent}"
            )
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Log level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            )

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables

        Values in a local .env file are loaded first; variables already set
        in the environment take precedence.

        Returns:
            Config instance with values from environment

        Raises:
            ConfigurationError: If a variable is malformed or out of range
        """
        load_dotenv()

        config = cls(
            simulation=SimulationConfig(
                max_move_percent=_env_float(
                    "MARKETVIEW_MAX_MOVE_PERCENT", MAX_MOVE_PERCENT
                ),
                seed=_env_int("MARKETVIEW_SEED", None),
            ),
            dataset_path=os.getenv("MARKETVIEW_DATASET") or None,
            tick_interval_seconds=_env_float(
                "MARKETVIEW_TICK_INTERVAL", TICK_INTERVAL_SECONDS
            ),
            similar_limit=_env_int("MARKETVIEW_SIMILAR_LIMIT", SIMILAR_LIMIT),
            log_level=os.getenv("MARKETVIEW_LOG_LEVEL", "INFO").upper(),
        )
        config.validate()
        return config

    def log_summary(self) -> None:
        """Log the loaded values, one field per line"""
        logger.info("Configuration loaded:")
        logger.info(f"  Dataset: {self.dataset_path or 'bundled'}")
        logger.info(f"  Tick Interval: {self.tick_interval_seconds} seconds")
        logger.info(f"  Max Move: {self.simulation.max_move_percent}%")
        logger.info(
            f"  Seed: {self.simulation.seed if self.simulation.seed is not None else 'random'}"
        )
        logger.info(f"  Similar Limit: {self.similar_limit}")
        logger.info(f"  Log Level: {self.log_level}")
