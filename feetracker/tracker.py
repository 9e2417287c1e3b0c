"""FeeTracker: the interface the presentation layer talks to.

Wires the fetchers, the state store, the scheduler and the cost calculator
around one shared HTTP client.
"""

from __future__ import annotations

import asyncio
from types import TracebackType

import httpx
import structlog

from feetracker.config import DEFAULT_TRACKER_CONFIG, TrackerConfig
from feetracker.fees.calculator import CostCalculator, CostTable
from feetracker.fees.fetcher import FeeFetcher
from feetracker.fees.networks.registry import NetworkRegistry, build_default_registry
from feetracker.models.schedule import FeeSchedule, TransactionProfile
from feetracker.models.types import Asset, FeeTier, parse_asset
from feetracker.prices.fetcher import PriceFetcher
from feetracker.prices.snapshot import PriceSnapshot
from feetracker.scheduler import RefreshHandle, RefreshScheduler, SchedulerState, Sleep
from feetracker.state import AggregateState, StateStore

logger = structlog.get_logger()


class FeeTracker:
    """Multi-chain fee tracker.

    Usage:
        async with FeeTracker() as tracker:
            tracker.select_asset("bitcoin")
            ...
            table = tracker.cost_table()

    Args:
        config: Endpoints, timeouts and refresh interval
        client: HTTP client to use. If omitted, one is created and closed by
            the tracker.
        registry: Network variants. Defaults to every supported network.
        sleep: Timer sleep, injectable for tests
    """

    def __init__(
        self,
        config: TrackerConfig | None = None,
        client: httpx.AsyncClient | None = None,
        registry: NetworkRegistry | None = None,
        sleep: Sleep | None = None,
    ) -> None:
        self.config = config or DEFAULT_TRACKER_CONFIG
        self.registry = registry or build_default_registry()

        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=self.config.request_timeout)

        self.fee_fetcher = FeeFetcher(self._client, self.config, self.registry)
        self.price_fetcher = PriceFetcher(self._client, self.config)
        self.calculator = CostCalculator(self.registry)
        self._store = StateStore(AggregateState.initial(self.config.initial_asset))

        self.scheduler = RefreshScheduler(
            self.fee_fetcher,
            self.price_fetcher,
            self._store,
            interval=self.config.refresh_interval,
            sleep=sleep or asyncio.sleep,
        )

    @property
    def state(self) -> AggregateState:
        """Current AggregateState."""
        return self._store.state

    @property
    def selected_asset(self) -> Asset:
        """Most recently requested asset; may lead `state.selected_asset`."""
        return self.scheduler.asset or self._store.state.selected_asset

    @property
    def loading(self) -> bool:
        """True while a cycle for the selected asset is outstanding."""
        return self.scheduler.state is SchedulerState.FETCHING

    def start(self) -> RefreshHandle:
        """Start refreshing the initially configured asset."""
        return self.scheduler.start(self.selected_asset)

    def select_asset(self, asset: Asset | str) -> RefreshHandle:
        """Change the selected asset and refetch immediately.

        Raises:
            UnsupportedAssetError: If the asset is not a supported network
        """
        resolved = parse_asset(asset)
        logger.info("asset_selected", asset=resolved.value)
        return self.scheduler.select_asset(resolved)

    async def stop(self) -> None:
        """Stop refreshing, wait for outstanding cycles and release the client."""
        self.scheduler.stop()
        try:
            await self.scheduler.join()
        finally:
            if self._owns_client:
                await self._client.aclose()

    def transaction_profiles(self) -> tuple[TransactionProfile, ...]:
        """Transaction profiles of the asset shown in the current state."""
        return self.registry.get(self.state.selected_asset).transaction_profiles()

    def compute_cost(
        self,
        asset: Asset | str,
        schedule: FeeSchedule | None,
        tier: FeeTier | str,
        profile: TransactionProfile,
        prices: PriceSnapshot | None,
    ) -> float:
        """USD cost of one profile at one tier; see CostCalculator."""
        return self.calculator.compute_cost(asset, schedule, tier, profile, prices)

    def cost_table(self) -> CostTable:
        """Cost table of the current state."""
        return self.calculator.build_cost_table(self.state)

    async def __aenter__(self) -> FeeTracker:
        self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.stop()
