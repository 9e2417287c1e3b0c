"""Fee module for the tracker.

This module provides:
- Per-asset default tiers and transaction profiles (FeeUnitModel)
- Per-network fee fetching with fallback (FeeFetcher, networks)
- USD cost calculation and the cost table (CostCalculator)

Usage:
    from feetracker.fees import FeeFetcher, compute_cost

    fetcher = FeeFetcher(client)
    schedule = await fetcher.fetch(Asset.ETHEREUM)

    usd = compute_cost(Asset.ETHEREUM, schedule, FeeTier.STANDARD, profile, prices)
"""

from feetracker.fees.model import (
    DEFAULT_FEE_UNIT_MODEL,
    DEFAULT_TIERS,
    TRANSACTION_PROFILES,
    DefaultTiers,
    FeeUnitModel,
)
from feetracker.fees.result import FetchError, FetchResult

# Import order matters: networks depend on model and result above.
from feetracker.fees.networks import (  # noqa: I001
    BitcoinNetwork,
    EthereumNetwork,
    Network,
    NetworkRegistry,
    SolanaNetwork,
    build_default_registry,
)
from feetracker.fees.calculator import (
    DEFAULT_COST_CALCULATOR,
    CostCalculator,
    CostRow,
    CostTable,
    compute_cost,
)
from feetracker.fees.fetcher import FeeFetcher

__all__ = [
    # Model
    "FeeUnitModel",
    "DefaultTiers",
    "DEFAULT_FEE_UNIT_MODEL",
    "DEFAULT_TIERS",
    "TRANSACTION_PROFILES",
    # Result
    "FetchError",
    "FetchResult",
    # Networks
    "Network",
    "NetworkRegistry",
    "EthereumNetwork",
    "BitcoinNetwork",
    "SolanaNetwork",
    "build_default_registry",
    # Fetcher
    "FeeFetcher",
    # Calculator
    "CostCalculator",
    "CostRow",
    "CostTable",
    "DEFAULT_COST_CALCULATOR",
    "compute_cost",
]
