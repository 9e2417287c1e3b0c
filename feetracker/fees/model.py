"""Per-asset fee constants: default tiers, display unit and transaction profiles.

These tables seed the initial state and are the fallback whenever a fee oracle
cannot be reached or answers with garbage.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from feetracker.models.schedule import FeeSchedule, TransactionProfile
from feetracker.models.types import Asset, parse_asset


@dataclass(frozen=True)
class DefaultTiers:
    """Compiled-in tier values and unit of one network."""

    slow: float
    standard: float
    fast: float
    instant: float
    unit: str


DEFAULT_TIERS: MappingProxyType[Asset, DefaultTiers] = MappingProxyType(
    {
        Asset.ETHEREUM: DefaultTiers(slow=15, standard=25, fast=35, instant=50, unit="gwei"),
        Asset.BITCOIN: DefaultTiers(slow=5, standard=10, fast=20, instant=30, unit="sat/vB"),
        Asset.SOLANA: DefaultTiers(
            slow=0.000005,
            standard=0.000005,
            fast=0.00001,
            instant=0.000015,
            unit="SOL",
        ),
    }
)

# fee_units_required: gas limit (ETH), virtual size in vbytes (BTC),
# signatures (SOL, ignored by the flat-fee formula)
TRANSACTION_PROFILES: MappingProxyType[Asset, tuple[TransactionProfile, ...]] = MappingProxyType(
    {
        Asset.ETHEREUM: (
            TransactionProfile("Simple Transfer", 21_000),
            TransactionProfile("ERC-20 Transfer", 65_000),
            TransactionProfile("Uniswap Swap", 150_000),
            TransactionProfile("NFT Mint", 200_000),
            TransactionProfile("DeFi Transaction", 350_000),
        ),
        Asset.BITCOIN: (
            TransactionProfile("Simple Transfer", 140),
            TransactionProfile("Multi-Input TX", 250),
            TransactionProfile("SegWit Transfer", 110),
            TransactionProfile("Taproot Transfer", 100),
            TransactionProfile("Complex Script", 400),
        ),
        Asset.SOLANA: (
            TransactionProfile("Simple Transfer", 1),
            TransactionProfile("Token Transfer", 1),
            TransactionProfile("DEX Swap", 1),
            TransactionProfile("NFT Mint", 1),
            TransactionProfile("Program Interaction", 1),
        ),
    }
)


class FeeUnitModel:
    """Pure lookup over the per-asset constant tables.

    Usage:
        model = FeeUnitModel()
        schedule = model.default_schedule(Asset.BITCOIN)
        profiles = model.transaction_profiles("bitcoin")

    Every lookup raises UnsupportedAssetError for an unknown identifier.
    """

    def default_schedule(self, asset: Asset | str) -> FeeSchedule:
        """Return the default schedule with a freshly set timestamp."""
        tiers = DEFAULT_TIERS[parse_asset(asset)]
        return FeeSchedule(
            slow=tiers.slow,
            standard=tiers.standard,
            fast=tiers.fast,
            instant=tiers.instant,
            unit=tiers.unit,
        )

    def default_tiers(self, asset: Asset | str) -> DefaultTiers:
        """Return the raw default tier table of an asset."""
        return DEFAULT_TIERS[parse_asset(asset)]

    def unit(self, asset: Asset | str) -> str:
        """Return the canonical fee unit string of an asset."""
        return DEFAULT_TIERS[parse_asset(asset)].unit

    def transaction_profiles(self, asset: Asset | str) -> tuple[TransactionProfile, ...]:
        """Return the ordered transaction profiles of an asset."""
        return TRANSACTION_PROFILES[parse_asset(asset)]


# Default model instance
DEFAULT_FEE_UNIT_MODEL = FeeUnitModel()
