"""Runtime configuration for the fee tracker."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from feetracker.constants import (
    COINGECKO_SIMPLE_PRICE_URL,
    ETHERSCAN_GAS_ORACLE_URL,
    MEMPOOL_RECOMMENDED_FEES_URL,
    REFRESH_INTERVAL_SECONDS,
    REQUEST_TIMEOUT_SECONDS,
)
from feetracker.models.types import Asset, parse_asset

ENV_PREFIX = "FEE_TRACKER_"


@dataclass(frozen=True)
class TrackerConfig:
    """Centralized configuration for fetching and refreshing.

    Attributes:
        etherscan_url: Etherscan API base used for the gas oracle
        mempool_url: mempool.space recommended fees endpoint
        coingecko_url: CoinGecko simple/price endpoint
        etherscan_api_key: Optional API key, sent as `apikey` when set
        request_timeout: Per-call timeout in seconds (default: 5)
        refresh_interval: Seconds between refresh ticks (default: 30)
        initial_asset: Asset selected before any user action
    """

    etherscan_url: str = ETHERSCAN_GAS_ORACLE_URL
    mempool_url: str = MEMPOOL_RECOMMENDED_FEES_URL
    coingecko_url: str = COINGECKO_SIMPLE_PRICE_URL
    etherscan_api_key: str | None = None
    request_timeout: float = REQUEST_TIMEOUT_SECONDS
    refresh_interval: float = REFRESH_INTERVAL_SECONDS
    initial_asset: Asset = Asset.ETHEREUM

    def __post_init__(self) -> None:
        if self.request_timeout <= 0:
            raise ValueError(f"request_timeout must be positive: {self.request_timeout}")
        if self.refresh_interval <= 0:
            raise ValueError(f"refresh_interval must be positive: {self.refresh_interval}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> TrackerConfig:
        """Build a config from FEE_TRACKER_* environment variables.

        Unset variables keep their defaults.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Raises:
            ValueError: If a numeric variable is not a number
            UnsupportedAssetError: If FEE_TRACKER_INITIAL_ASSET is unknown
        """
        env = os.environ if environ is None else environ

        def get(name: str) -> str | None:
            value = env.get(ENV_PREFIX + name)
            return value if value else None

        defaults = cls()
        timeout = get("REQUEST_TIMEOUT")
        interval = get("REFRESH_INTERVAL")
        initial = get("INITIAL_ASSET")
        return cls(
            etherscan_url=get("ETHERSCAN_URL") or defaults.etherscan_url,
            mempool_url=get("MEMPOOL_URL") or defaults.mempool_url,
            coingecko_url=get("COINGECKO_URL") or defaults.coingecko_url,
            etherscan_api_key=get("ETHERSCAN_API_KEY"),
            request_timeout=float(timeout) if timeout else defaults.request_timeout,
            refresh_interval=float(interval) if interval else defaults.refresh_interval,
            initial_asset=parse_asset(initial) if initial else defaults.initial_asset,
        )


# Default configuration instance
DEFAULT_TRACKER_CONFIG = TrackerConfig()
