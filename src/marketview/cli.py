"""Command-line entry point for MarketView"""

import argparse
import asyncio
import sys

from loguru import logger
from rich.console import Console

from marketview.controller import ViewController
from marketview.core.config import Config
from marketview.data import load_assets
from marketview.domain.models import FilterMode, SortDirection, SortField
from marketview.presentation import display_assets, display_detail
from marketview.shared.exceptions import (
    AssetNotFoundError,
    ConfigurationError,
    DatasetError,
)
from marketview.simulation import PriceSimulator, TickScheduler
from marketview.store import AssetStore


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="marketview",
        description="Browse simulated asset prices in the terminal",
    )
    parser.add_argument(
        "--dataset",
        help="JSON dataset of assets (defaults to MARKETVIEW_DATASET or the bundled set)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--log-file",
        help="Also write logs to this file, rotated daily",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    list_cmd = commands.add_parser("list", help="Show the filtered, sorted asset list")
    list_cmd.add_argument("--query", "-q", default="", help="Search name or symbol")
    list_cmd.add_argument(
        "--filter",
        "-f",
        default=FilterMode.ALL.value,
        help=f"Filter mode: {', '.join(m.value for m in FilterMode)}",
    )
    list_cmd.add_argument(
        "--sort",
        "-s",
        default=SortField.NAME.value,
        help=f"Sort field: {', '.join(f.value for f in SortField)}",
    )
    list_cmd.add_argument("--desc", action="store_true", help="Sort descending")
    list_cmd.add_argument(
        "--ticks",
        type=int,
        default=0,
        help="Simulate this many price ticks, rendering after each",
    )
    list_cmd.add_argument(
        "--interval",
        type=float,
        help="Seconds between ticks (defaults to MARKETVIEW_TICK_INTERVAL)",
    )

    show_cmd = commands.add_parser("show", help="Show an asset and similar assets")
    show_cmd.add_argument("asset_id", type=int, help="Asset id")

    return parser


def configure_logging(level: str, log_file: str | None = None) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)
    if log_file:
        logger.add(
            log_file,
            rotation="1 day",
            retention="30 days",
            compression="gz",
            level=level,
        )


async def _watch(
    controller: ViewController,
    simulator: PriceSimulator,
    interval: float,
    ticks: int,
    console: Console,
) -> None:
    def render(_snapshot) -> None:
        display_assets(
            controller.rows(),
            console,
            title=f"Tick {controller.store.tick_count}",
            params=controller.params,
        )

    scheduler = TickScheduler(
        controller.store, simulator, interval_seconds=interval, on_tick=render
    )
    await scheduler.run_ticks(ticks)


def run(args: argparse.Namespace, config: Config, console: Console) -> int:
    store = AssetStore(load_assets(args.dataset or config.dataset_path))
    controller = ViewController(store, similar_limit=config.similar_limit)

    if args.command == "show":
        detail = controller.detail(args.asset_id)
        display_detail(detail.asset, detail.similar, console)
        return 0

    controller.set_query(args.query)
    controller.set_filter(args.filter)
    controller.set_sort(
        args.sort, SortDirection.DESC if args.desc else SortDirection.ASC
    )
    display_assets(controller.rows(), console, params=controller.params)

    if args.ticks > 0:
        simulator = PriceSimulator.seeded(
            config.simulation.seed, config.simulation.max_move_percent
        )
        interval = args.interval or config.tick_interval_seconds
        asyncio.run(_watch(controller, simulator, interval, args.ticks, console))

    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.from_env()
    except ConfigurationError as e:
        configure_logging("INFO")
        logger.error(f"Configuration error: {e}")
        return 1

    configure_logging("DEBUG" if args.verbose else config.log_level, args.log_file)
    config.log_summary()
    console = Console()

    try:
        return run(args, config, console)
    except (DatasetError, AssetNotFoundError, ValueError) as e:
        logger.error(f"{e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("Stopped manually.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
