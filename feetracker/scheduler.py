"""Refresh scheduler: drives fee and price fetching.

One cycle fetches the selected asset's fee schedule and every asset's price
concurrently, then hands both results to the StateStore. Cycles are issued
immediately on asset selection and then on a fixed interval.

Every selection starts a new generation. A cycle remembers the generation it
was issued for, and its results are dropped if the generation has moved on by
the time it completes, so a slow cycle for a previous asset can never
overwrite the state of the current one. In-flight HTTP calls are not aborted;
only their results are discarded.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import TYPE_CHECKING

import structlog

from feetracker.constants import REFRESH_INTERVAL_SECONDS
from feetracker.models.types import Asset, parse_asset

if TYPE_CHECKING:
    from feetracker.fees.fetcher import FeeFetcher
    from feetracker.prices.fetcher import PriceFetcher
    from feetracker.state import AggregateState, StateStore

logger = structlog.get_logger()

Sleep = Callable[[float], Awaitable[None]]


class SchedulerState(str, Enum):
    """Whether a refresh cycle for the current generation is outstanding."""

    IDLE = "idle"
    FETCHING = "fetching"


class RefreshHandle:
    """Cancellation handle of one recurring refresh timer.

    Cancelling stops future ticks. It is idempotent and does not touch
    cycles that are already in flight.
    """

    def __init__(self, task: asyncio.Task[None], asset: Asset, generation: int) -> None:
        self._task = task
        self.asset = asset
        self.generation = generation
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        """Stop the timer. Safe to call more than once."""
        if self._cancelled:
            return
        self._cancelled = True
        self._task.cancel()


class RefreshScheduler:
    """Issue refresh cycles on selection and on a fixed interval.

    Must be used from inside a running event loop.

    Usage:
        scheduler = RefreshScheduler(fee_fetcher, price_fetcher, store)
        handle = scheduler.start(Asset.ETHEREUM)
        ...
        scheduler.select_asset(Asset.BITCOIN)  # cancels the ETH timer
        ...
        scheduler.stop()
        await scheduler.join()

    Args:
        fee_fetcher: Fetches the selected asset's fee schedule
        price_fetcher: Fetches every asset's price
        store: Receives completed cycles
        interval: Seconds between ticks (default: 30)
        sleep: Awaitable sleep used by the timer, injectable for tests
    """

    def __init__(
        self,
        fee_fetcher: FeeFetcher,
        price_fetcher: PriceFetcher,
        store: StateStore,
        interval: float = REFRESH_INTERVAL_SECONDS,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self._fee_fetcher = fee_fetcher
        self._price_fetcher = price_fetcher
        self._store = store
        self.interval = interval
        self._sleep = sleep

        self._generation = 0
        self._asset: Asset | None = None
        self._handle: RefreshHandle | None = None
        self._in_flight: asyncio.Task[AggregateState | None] | None = None
        self._tasks: set[asyncio.Task[AggregateState | None]] = set()
        self.cycles_issued = 0

    @property
    def state(self) -> SchedulerState:
        if self._in_flight is not None and not self._in_flight.done():
            return SchedulerState.FETCHING
        return SchedulerState.IDLE

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def asset(self) -> Asset | None:
        """Most recently requested asset, or None before the first start."""
        return self._asset

    @property
    def running(self) -> bool:
        return self._handle is not None and not self._handle.cancelled

    def start(self, asset: Asset | str) -> RefreshHandle:
        """Start refreshing `asset`: one cycle now, then one per interval.

        Cancels the timer of any previous asset and supersedes its
        outstanding cycle.

        Raises:
            UnsupportedAssetError: If the asset is not a supported network
        """
        resolved = parse_asset(asset)
        if self._handle is not None:
            self._handle.cancel()

        self._generation += 1
        self._asset = resolved
        self._in_flight = None
        generation = self._generation

        logger.info("refresh_started", asset=resolved.value, generation=generation)
        self._tick(resolved, generation)
        timer = asyncio.create_task(
            self._run_timer(resolved, generation),
            name=f"refresh-timer-{resolved.value}-{generation}",
        )
        self._handle = RefreshHandle(timer, resolved, generation)
        return self._handle

    def select_asset(self, asset: Asset | str) -> RefreshHandle:
        """Switch the selected asset; same as `start`."""
        return self.start(asset)

    def stop(self) -> None:
        """Cancel the timer and discard results of outstanding cycles."""
        if self._handle is not None:
            self._handle.cancel()
        self._generation += 1
        self._in_flight = None
        logger.info("refresh_stopped", generation=self._generation)

    async def join(self) -> None:
        """Wait until every issued cycle, current or superseded, has completed.

        Failed cycles are logged when they finish and do not raise here.
        """
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def refresh_now(self) -> AggregateState | None:
        """Run one cycle for the current asset and wait for it.

        Returns:
            The new state, or None if the cycle was superseded or the
            scheduler is stopped

        Raises:
            RuntimeError: If the scheduler was never started
        """
        if self._asset is None:
            raise RuntimeError("Scheduler has not been started")
        if not self.running:
            logger.debug("refresh_now_ignored", reason="stopped")
            return None
        if self._in_flight is None or self._in_flight.done():
            self._in_flight = self._spawn(self._asset, self._generation)
        return await self._in_flight

    async def _run_timer(self, asset: Asset, generation: int) -> None:
        while True:
            await self._sleep(self.interval)
            self._tick(asset, generation)

    def _tick(self, asset: Asset, generation: int) -> None:
        if self.state is SchedulerState.FETCHING:
            logger.debug("refresh_tick_skipped", asset=asset.value, generation=generation)
            return
        self._in_flight = self._spawn(asset, generation)

    def _spawn(self, asset: Asset, generation: int) -> asyncio.Task[AggregateState | None]:
        self.cycles_issued += 1
        task = asyncio.create_task(
            self._cycle(asset, generation),
            name=f"refresh-cycle-{asset.value}-{generation}",
        )
        self._tasks.add(task)
        task.add_done_callback(self._on_cycle_done)
        return task

    def _on_cycle_done(self, task: asyncio.Task[AggregateState | None]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error(
                "refresh_cycle_failed",
                task=task.get_name(),
                error=repr(exc),
                exc_info=exc,
            )

    async def _cycle(self, asset: Asset, generation: int) -> AggregateState | None:
        fees, prices = await asyncio.gather(
            self._fee_fetcher.fetch_result(asset),
            self._price_fetcher.fetch(),
        )
        if generation != self._generation:
            logger.info(
                "refresh_cycle_discarded",
                asset=asset.value,
                generation=generation,
                current_generation=self._generation,
            )
            return None
        return self._store.apply_cycle(asset, fees, prices)
