"""Shared enumerations for the fee tracker models.

Asset identifiers double as the keys of the multi-asset price source.
"""

from enum import Enum

from feetracker.errors import UnsupportedAssetError


class Asset(str, Enum):
    """Supported networks, in canonical order."""

    ETHEREUM = "ethereum"
    BITCOIN = "bitcoin"
    SOLANA = "solana"


class FeeTier(str, Enum):
    """Urgency levels of a fee schedule, cheapest first."""

    SLOW = "slow"
    STANDARD = "standard"
    FAST = "fast"
    INSTANT = "instant"


def parse_asset(asset: Asset | str) -> Asset:
    """Coerce an asset identifier into an Asset.

    Args:
        asset: An Asset member or its string identifier (case-insensitive)

    Returns:
        The matching Asset

    Raises:
        UnsupportedAssetError: If the identifier is not a supported network
    """
    if isinstance(asset, Asset):
        return asset
    if isinstance(asset, str):
        try:
            return Asset(asset.strip().lower())
        except ValueError:
            pass
    raise UnsupportedAssetError(asset)


def parse_tier(tier: FeeTier | str) -> FeeTier:
    """Coerce a tier name into a FeeTier.

    Raises:
        ValueError: If the name is not a fee tier
    """
    if isinstance(tier, FeeTier):
        return tier
    return FeeTier(tier.strip().lower())
