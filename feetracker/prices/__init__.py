"""Price fetching and snapshots."""

from feetracker.prices.fetcher import PriceFetcher, ordered_assets
from feetracker.prices.snapshot import BOOTSTRAP_PRICES, PriceQuote, PriceSnapshot

__all__ = [
    "BOOTSTRAP_PRICES",
    "PriceFetcher",
    "PriceQuote",
    "PriceSnapshot",
    "ordered_assets",
]
