"""Cost calculation: convert fee tiers into USD.

Every network has its own fee unit. The per-network formula lives on the
network variant; this module handles the missing-input policy (cost degrades
to 0 instead of failing) and builds the full cost table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import structlog

from feetracker.fees.networks.base import coerce_fee_value
from feetracker.fees.networks.registry import NetworkRegistry, build_default_registry
from feetracker.models.types import Asset, FeeTier, parse_tier

if TYPE_CHECKING:
    from feetracker.models.schedule import FeeSchedule, TransactionProfile
    from feetracker.prices.snapshot import PriceSnapshot
    from feetracker.state import AggregateState

logger = structlog.get_logger()


@dataclass(frozen=True)
class CostRow:
    """One transaction profile priced at every fee tier.

    Attributes:
        label: Transaction profile label
        fee_units_required: Size of the transaction in fee units
        costs: USD cost per tier, cheapest first
    """

    label: str
    fee_units_required: int
    costs: dict[FeeTier, float] = field(default_factory=dict)


@dataclass(frozen=True)
class CostTable:
    """USD costs of all transaction profiles of one asset."""

    asset: Asset
    unit: str
    rows: tuple[CostRow, ...]


class CostCalculator:
    """Stateless USD cost calculator.

    Usage:
        calculator = CostCalculator()
        usd = calculator.compute_cost(
            Asset.ETHEREUM, schedule, FeeTier.STANDARD, profile, prices
        )
    """

    def __init__(self, registry: NetworkRegistry | None = None) -> None:
        self._registry = registry or build_default_registry()

    def compute_cost(
        self,
        asset: Asset | str,
        schedule: FeeSchedule | None,
        tier: FeeTier | str,
        profile: TransactionProfile,
        prices: PriceSnapshot | None,
    ) -> float:
        """Compute the USD cost of one transaction profile at one tier.

        Returns:
            USD amount, or 0.0 if the price or the tier value is missing

        Raises:
            UnsupportedAssetError: If the asset is not a supported network
        """
        network = self._registry.get(asset)

        usd_price = prices.usd(network.asset) if prices is not None else None
        if usd_price is None:
            return 0.0

        fee_value = _tier_value(schedule, tier)
        if fee_value is None:
            return 0.0
        if schedule is not None and schedule.unit != network.unit:
            logger.debug(
                "cost_unit_mismatch",
                asset=network.asset.value,
                schedule_unit=schedule.unit,
                expected_unit=network.unit,
            )
            return 0.0

        return network.compute_cost(fee_value, profile.fee_units_required, usd_price)

    def build_cost_table(self, state: AggregateState) -> CostTable:
        """Price every transaction profile of the selected asset at every tier."""
        network = self._registry.get(state.selected_asset)
        rows = tuple(
            CostRow(
                label=profile.label,
                fee_units_required=profile.fee_units_required,
                costs={
                    tier: self.compute_cost(
                        network.asset, state.schedule, tier, profile, state.prices
                    )
                    for tier in FeeTier
                },
            )
            for profile in network.transaction_profiles()
        )
        return CostTable(asset=network.asset, unit=network.unit, rows=rows)


def _tier_value(schedule: FeeSchedule | None, tier: FeeTier | str) -> float | None:
    if schedule is None:
        return None
    try:
        resolved = parse_tier(tier)
    except ValueError:
        return None
    return coerce_fee_value(getattr(schedule, resolved.value, None))


# Default calculator instance
DEFAULT_COST_CALCULATOR = CostCalculator()


def compute_cost(
    asset: Asset | str,
    schedule: FeeSchedule | None,
    tier: FeeTier | str,
    profile: TransactionProfile,
    prices: PriceSnapshot | None,
) -> float:
    """Compute a USD cost with the default calculator."""
    return DEFAULT_COST_CALCULATOR.compute_cost(asset, schedule, tier, profile, prices)
