"""Price snapshot data structures."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from feetracker.errors import UnsupportedAssetError
from feetracker.models.types import Asset, parse_asset


@dataclass(frozen=True)
class PriceQuote:
    """USD price and 24h change of one asset.

    Attributes:
        usd: Price in USD
        change_24h_pct: Price change over the last 24 hours, in percent
    """

    usd: float
    change_24h_pct: float = 0.0


@dataclass(frozen=True)
class PriceSnapshot:
    """Immutable mapping of asset to price quote.

    Snapshots are never updated in place; `merged` returns a new one.
    """

    quotes: Mapping[Asset, PriceQuote] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only copy keyed by Asset
        frozen = MappingProxyType({parse_asset(k): v for k, v in self.quotes.items()})
        object.__setattr__(self, "quotes", frozen)

    def get(self, asset: Asset | str) -> PriceQuote | None:
        """Quote of an asset, or None if not known."""
        return self.quotes.get(parse_asset(asset))

    def usd(self, asset: Asset | str) -> float | None:
        """USD price of an asset, or None if not known."""
        quote = self.get(asset)
        return quote.usd if quote is not None else None

    def change_24h(self, asset: Asset | str) -> float | None:
        """24h change of an asset in percent, or None if not known."""
        quote = self.get(asset)
        return quote.change_24h_pct if quote is not None else None

    def merged(self, update: PriceSnapshot) -> PriceSnapshot:
        """Return a new snapshot with `update`'s quotes layered over this one.

        Assets missing from `update` keep their quote from this snapshot.
        """
        return PriceSnapshot({**self.quotes, **update.quotes})

    def __contains__(self, asset: object) -> bool:
        if not isinstance(asset, (Asset, str)):
            return False
        try:
            return parse_asset(asset) in self.quotes
        except UnsupportedAssetError:
            return False

    def __iter__(self) -> Iterator[Asset]:
        return iter(self.quotes)

    def __len__(self) -> int:
        return len(self.quotes)


# Compiled-in prices shown before the first successful price fetch
BOOTSTRAP_PRICES = PriceSnapshot(
    {
        Asset.ETHEREUM: PriceQuote(usd=2500.0, change_24h_pct=2.5),
        Asset.BITCOIN: PriceQuote(usd=45000.0, change_24h_pct=-1.2),
        Asset.SOLANA: PriceQuote(usd=100.0, change_24h_pct=5.8),
    }
)
