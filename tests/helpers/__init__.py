"""Test helpers module for shared test utilities.

This module consolidates common test utilities to reduce duplication:
- constants: Upstream hosts and worked example values
- factories: Mock HTTP transports, payload builders and fake fetchers
"""

from tests.helpers.constants import (
    COINGECKO_HOST,
    ETH_EXAMPLE_USD,
    ETH_TRANSFER_GAS,
    ETH_TRANSFER_STANDARD_COST,
    ETHERSCAN_HOST,
    MEMPOOL_HOST,
)
from tests.helpers.factories import (
    FakeFeeFetcher,
    FakePriceFetcher,
    all_upstreams_ok,
    coingecko_payload,
    etherscan_payload,
    make_client,
    make_prices,
    make_schedule,
    make_transport,
    mempool_payload,
    park_forever,
    recording_sleep,
    run,
)

__all__ = [
    # Constants
    "COINGECKO_HOST",
    "ETHERSCAN_HOST",
    "ETH_EXAMPLE_USD",
    "ETH_TRANSFER_GAS",
    "ETH_TRANSFER_STANDARD_COST",
    "MEMPOOL_HOST",
    # Factories
    "FakeFeeFetcher",
    "FakePriceFetcher",
    "all_upstreams_ok",
    "coingecko_payload",
    "etherscan_payload",
    "make_client",
    "make_prices",
    "make_schedule",
    "make_transport",
    "mempool_payload",
    "park_forever",
    "recording_sleep",
    "run",
]
