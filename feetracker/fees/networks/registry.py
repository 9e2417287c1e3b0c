"""Registry mapping each supported asset to its network variant."""

from __future__ import annotations

from collections.abc import Iterator

from feetracker.errors import UnsupportedAssetError
from feetracker.fees.model import FeeUnitModel
from feetracker.fees.networks.base import Network
from feetracker.fees.networks.bitcoin import BitcoinNetwork
from feetracker.fees.networks.ethereum import EthereumNetwork
from feetracker.fees.networks.solana import SolanaNetwork
from feetracker.models.types import Asset, parse_asset


class NetworkRegistry:
    """Registry of network variants keyed by asset.

    Usage:
        registry = NetworkRegistry()
        registry.register(EthereumNetwork())

        network = registry.get("ethereum")
        result = await network.fetch_schedule(client, config)
    """

    def __init__(self) -> None:
        self._networks: dict[Asset, Network] = {}

    def register(self, network: Network) -> None:
        """Register a network variant, replacing any previous one for its asset."""
        self._networks[network.asset] = network

    def get(self, asset: Asset | str) -> Network:
        """Get the variant for an asset.

        Raises:
            UnsupportedAssetError: If the asset is unknown or not registered
        """
        resolved = parse_asset(asset)
        network = self._networks.get(resolved)
        if network is None:
            raise UnsupportedAssetError(asset)
        return network

    @property
    def assets(self) -> list[Asset]:
        """Registered assets in canonical order."""
        return [asset for asset in Asset if asset in self._networks]

    def __contains__(self, asset: object) -> bool:
        if not isinstance(asset, (Asset, str)):
            return False
        try:
            return parse_asset(asset) in self._networks
        except UnsupportedAssetError:
            return False

    def __iter__(self) -> Iterator[Network]:
        return (self._networks[asset] for asset in self.assets)

    def __len__(self) -> int:
        return len(self._networks)


def build_default_registry(model: FeeUnitModel | None = None) -> NetworkRegistry:
    """Create a registry with every supported network registered."""
    registry = NetworkRegistry()
    registry.register(EthereumNetwork(model))
    registry.register(BitcoinNetwork(model))
    registry.register(SolanaNetwork(model))
    return registry
