"""Data models for the fee tracker."""

from feetracker.models.schedule import FeeSchedule, TransactionProfile, utc_now
from feetracker.models.types import Asset, FeeTier, parse_asset, parse_tier
from feetracker.models.upstream import (
    CoinGeckoQuote,
    EtherscanGasOracleResponse,
    EtherscanGasOracleResult,
    MempoolRecommendedFees,
)

__all__ = [
    "Asset",
    "CoinGeckoQuote",
    "EtherscanGasOracleResponse",
    "EtherscanGasOracleResult",
    "FeeSchedule",
    "FeeTier",
    "MempoolRecommendedFees",
    "TransactionProfile",
    "parse_asset",
    "parse_tier",
    "utc_now",
]
