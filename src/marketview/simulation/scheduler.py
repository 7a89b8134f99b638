"""Tick scheduler - owns the recurring price simulation task"""

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from loguru import logger

from marketview.domain.models import Asset
from marketview.shared.constants import TICK_INTERVAL_SECONDS
from marketview.store import AssetStore

from .engine import PriceSimulator

TickCallback = Callable[[Sequence[Asset]], Awaitable[Any] | Any]


class TickScheduler:
    """Runs the simulator against a store on a fixed cadence

    The scheduler owns a single asyncio task. Use it as an async context
    manager so the task is cancelled when the owning view goes away:

        async with TickScheduler(store, simulator) as scheduler:
            ...
    """

    def __init__(
        self,
        store: AssetStore,
        simulator: PriceSimulator | None = None,
        interval_seconds: float = TICK_INTERVAL_SECONDS,
        on_tick: TickCallback | None = None,
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError(
                f"interval_seconds must be positive, got {interval_seconds}"
            )
        self.store = store
        self.simulator = simulator or PriceSimulator()
        self.interval_seconds = interval_seconds
        self.on_tick = on_tick
        self._task: asyncio.Task | None = None
        self._max_ticks: int | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self, max_ticks: int | None = None) -> None:
        """Start ticking in a background task

        Args:
            max_ticks: Stop on its own after this many ticks
        """
        if self.running:
            logger.warning("Tick scheduler already running")
            return

        self._max_ticks = max_ticks
        self._task = asyncio.create_task(self._run())
        logger.info(f"Tick scheduler started (every {self.interval_seconds}s)")

    async def stop(self) -> None:
        """Cancel the background task and wait for it to finish"""
        if self._task is None:
            return

        task, self._task = self._task, None
        if not task.done():
            task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

        logger.info(f"Tick scheduler stopped after {self.store.tick_count} ticks")

    async def wait(self) -> None:
        """Wait until a bounded run (start(max_ticks=n)) completes"""
        if self._task is not None:
            await self._task

    async def run_ticks(self, count: int) -> None:
        """Run exactly count ticks, then release the task"""
        await self.start(max_ticks=count)
        try:
            await self.wait()
        finally:
            await self.stop()

    async def tick_once(self) -> Sequence[Asset]:
        """Apply one tick and notify the callback"""
        snapshot = self.store.apply_tick(self.simulator.tick)

        if self.on_tick is not None:
            try:
                result = self.on_tick(snapshot)
                if asyncio.iscoroutine(result):
                    await result
            except Exception as e:
                logger.error(f"Tick callback failed: {e}", exc_info=True)

        return snapshot

    async def _run(self) -> None:
        logger.debug("Tick loop started")
        ticks = 0
        while self._max_ticks is None or ticks < self._max_ticks:
            await asyncio.sleep(self.interval_seconds)
            await self.tick_once()
            ticks += 1
        logger.debug(f"Tick loop finished after {ticks} ticks")

    async def __aenter__(self) -> "TickScheduler":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop()
