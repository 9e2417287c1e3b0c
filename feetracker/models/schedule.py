"""Fee schedule and transaction profile data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from feetracker.models.types import FeeTier


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


@dataclass(frozen=True)
class FeeSchedule:
    """Four-tier fee schedule of one network.

    Tier values are in the network's native fee unit (gwei, sat/vB or SOL),
    are non-negative and non-decreasing from slow to instant.

    Attributes:
        slow: Cheapest tier
        standard: Default tier
        fast: Quick confirmation tier
        instant: Highest-priority tier
        unit: Canonical unit string of the owning network
        timestamp: When this schedule was computed (also set on fallback)
    """

    slow: float
    standard: float
    fast: float
    instant: float
    unit: str
    timestamp: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        for tier in FeeTier:
            value = getattr(self, tier.value)
            if value < 0:
                raise ValueError(f"Fee tier {tier.value} cannot be negative: {value}")
        if not self.unit:
            raise ValueError("Fee schedule unit cannot be empty")

    def tier(self, tier: FeeTier) -> float:
        """Return the value of a single tier."""
        return float(getattr(self, FeeTier(tier).value))

    @property
    def tiers(self) -> dict[FeeTier, float]:
        """All tier values keyed by tier, cheapest first."""
        return {tier: self.tier(tier) for tier in FeeTier}

    @property
    def is_ordered(self) -> bool:
        """True if slow <= standard <= fast <= instant."""
        values = list(self.tiers.values())
        return all(a <= b for a, b in zip(values, values[1:], strict=False))

    def same_fees(self, other: FeeSchedule) -> bool:
        """Compare tier values and unit, ignoring the timestamp."""
        return self.tiers == other.tiers and self.unit == other.unit


@dataclass(frozen=True)
class TransactionProfile:
    """A representative transaction type for the cost table.

    Attributes:
        label: Human-readable name (e.g. "Simple Transfer")
        fee_units_required: Size in fee units: gas limit for Ethereum,
            virtual bytes for Bitcoin, signature count for Solana
    """

    label: str
    fee_units_required: int
