"""Aggregate state: the merged snapshot the presentation layer reads.

AggregateState is immutable. StateStore is its single writer: each completed
refresh cycle goes through `apply_cycle`, which builds a new snapshot and
swaps the reference.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from feetracker.fees.model import DEFAULT_FEE_UNIT_MODEL, FeeUnitModel
from feetracker.fees.result import FetchResult
from feetracker.models.schedule import FeeSchedule
from feetracker.models.types import Asset, parse_asset
from feetracker.prices.snapshot import BOOTSTRAP_PRICES, PriceSnapshot

logger = structlog.get_logger()


@dataclass(frozen=True)
class AggregateState:
    """Currently displayed snapshot.

    Attributes:
        selected_asset: Asset whose fee schedule is shown
        schedule: Fee schedule of the selected asset
        prices: Quotes of every supported asset
        is_live: True only if the most recent price fetch succeeded
    """

    selected_asset: Asset
    schedule: FeeSchedule
    prices: PriceSnapshot
    is_live: bool = False

    @property
    def mode(self) -> str:
        """Indicator text for the live/demo badge."""
        return "live" if self.is_live else "demo"

    @classmethod
    def initial(
        cls,
        asset: Asset | str = Asset.ETHEREUM,
        model: FeeUnitModel | None = None,
    ) -> AggregateState:
        """State shown before any network call completes."""
        resolved = parse_asset(asset)
        return cls(
            selected_asset=resolved,
            schedule=(model or DEFAULT_FEE_UNIT_MODEL).default_schedule(resolved),
            prices=BOOTSTRAP_PRICES,
            is_live=False,
        )


class StateStore:
    """Holds the current AggregateState and applies completed cycles.

    Retain-previous policy: a failed price fetch keeps the previous prices
    and clears `is_live`; the fee result always carries a schedule (the
    fallback on failure) and replaces the previous one.
    """

    def __init__(self, initial: AggregateState) -> None:
        self._state = initial

    @property
    def state(self) -> AggregateState:
        return self._state

    def apply_cycle(
        self,
        asset: Asset,
        fees: FetchResult[FeeSchedule],
        prices: FetchResult[PriceSnapshot],
    ) -> AggregateState:
        """Merge one cycle's results into a new state and publish it."""
        previous = self._state
        schedule = fees.value if fees.value is not None else previous.schedule
        if asset != previous.selected_asset and fees.value is None:
            # Never show one asset's schedule under another asset
            schedule = DEFAULT_FEE_UNIT_MODEL.default_schedule(asset)

        if prices.is_ok and prices.value is not None:
            merged_prices = previous.prices.merged(prices.value)
            is_live = True
        else:
            merged_prices = previous.prices
            is_live = False

        self._state = AggregateState(
            selected_asset=asset,
            schedule=schedule,
            prices=merged_prices,
            is_live=is_live,
        )
        logger.info(
            "state_updated",
            asset=asset.value,
            fees_live=fees.is_ok,
            prices_live=is_live,
        )
        return self._state
