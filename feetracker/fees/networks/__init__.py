"""Per-network fee capabilities.

Usage:
    from feetracker.fees.networks import build_default_registry

    registry = build_default_registry()
    network = registry.get(Asset.BITCOIN)
    result = await network.fetch_schedule(client, config)
    usd = network.compute_cost(result.value.standard, 140, 45_000)
"""

from feetracker.fees.networks.base import BaseNetwork, Network, coerce_fee_value, non_decreasing
from feetracker.fees.networks.bitcoin import BitcoinNetwork
from feetracker.fees.networks.ethereum import EthereumNetwork
from feetracker.fees.networks.registry import NetworkRegistry, build_default_registry
from feetracker.fees.networks.solana import SolanaNetwork

__all__ = [
    "BaseNetwork",
    "BitcoinNetwork",
    "EthereumNetwork",
    "Network",
    "NetworkRegistry",
    "SolanaNetwork",
    "build_default_registry",
    "coerce_fee_value",
    "non_decreasing",
]
