"""Display formatting for fee values and fee tiers."""

from dataclasses import dataclass
from types import MappingProxyType

from feetracker.constants import LAMPORTS_DISPLAY_FACTOR
from feetracker.models.types import Asset, FeeTier, parse_asset, parse_tier


@dataclass(frozen=True)
class TierInfo:
    """Presentation metadata of a fee tier.

    Attributes:
        description: Short label of what the tier is for
        confirmation_time: Rough time to confirmation (e.g. "~2 min")
    """

    description: str
    confirmation_time: str


TIER_INFO: MappingProxyType[FeeTier, TierInfo] = MappingProxyType(
    {
        FeeTier.SLOW: TierInfo("Save money", "~5 min"),
        FeeTier.STANDARD: TierInfo("Balanced", "~2 min"),
        FeeTier.FAST: TierInfo("Quick confirm", "~30s"),
        FeeTier.INSTANT: TierInfo("Emergency", "~15s"),
    }
)


def tier_info(tier: FeeTier | str) -> TierInfo:
    """Return the description and confirmation estimate of a tier.

    Raises:
        ValueError: If the name is not a fee tier
    """
    return TIER_INFO[parse_tier(tier)]


def format_fee_value(asset: Asset | str, value: float, unit: str) -> str:
    """Render a fee tier for display.

    Solana fees are shown as a lamport count (SOL value x 1,000,000); the
    underlying SOL value is not changed. Other networks show the value with
    its unit.
    """
    if parse_asset(asset) is Asset.SOLANA:
        return f"{value * LAMPORTS_DISPLAY_FACTOR:.0f} lamports"
    return f"{value:g} {unit}"
