"""Unit conversion factors, upstream endpoints and refresh timing.

Centralizes the numbers shared by the network variants, the cost calculator
and the scheduler.
"""

from typing import Final

# 1 ETH = 1e9 gwei
GWEI_PER_ETH: Final = 10**9

# 1 BTC = 1e8 satoshi
SATS_PER_BTC: Final = 10**8

# Display-only scaling of SOL-denominated fees into a lamport count.
# Solana fees are not converted with this; the raw SOL value is kept.
LAMPORTS_DISPLAY_FACTOR: Final = 1_000_000

# instant = floor(fast * INSTANT_MULTIPLIER) for oracle-backed networks
INSTANT_MULTIPLIER: Final = 1.5

# Refresh cadence and per-call timeout (seconds)
REFRESH_INTERVAL_SECONDS: Final = 30.0
REQUEST_TIMEOUT_SECONDS: Final = 5.0

# Upstream endpoints
ETHERSCAN_GAS_ORACLE_URL: Final = "https://api.etherscan.io/api"
MEMPOOL_RECOMMENDED_FEES_URL: Final = "https://mempool.space/api/v1/fees/recommended"
COINGECKO_SIMPLE_PRICE_URL: Final = "https://api.coingecko.com/api/v3/simple/price"

__all__ = [
    "COINGECKO_SIMPLE_PRICE_URL",
    "ETHERSCAN_GAS_ORACLE_URL",
    "GWEI_PER_ETH",
    "INSTANT_MULTIPLIER",
    "LAMPORTS_DISPLAY_FACTOR",
    "MEMPOOL_RECOMMENDED_FEES_URL",
    "REFRESH_INTERVAL_SECONDS",
    "REQUEST_TIMEOUT_SECONDS",
    "SATS_PER_BTC",
]
