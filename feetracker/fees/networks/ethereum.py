"""Ethereum: Etherscan gas oracle, gas prices in gwei."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from feetracker.constants import GWEI_PER_ETH
from feetracker.errors import MalformedResponseError
from feetracker.fees.networks.base import BaseNetwork
from feetracker.models.schedule import FeeSchedule
from feetracker.models.types import Asset
from feetracker.models.upstream import EtherscanGasOracleResponse, EtherscanGasOracleResult

if TYPE_CHECKING:
    from feetracker.config import TrackerConfig


class EthereumNetwork(BaseNetwork):
    """Gas-price network.

    Maps SafeGasPrice -> slow, ProposeGasPrice -> standard,
    FastGasPrice -> fast, and derives instant from fast.

    Cost formula:
        usd = gwei * gas_limit / 1e9 * eth_usd
    """

    asset = Asset.ETHEREUM

    async def _fetch(self, client: httpx.AsyncClient, config: TrackerConfig) -> FeeSchedule:
        params = {"module": "gastracker", "action": "gasoracle"}
        if config.etherscan_api_key:
            params["apikey"] = config.etherscan_api_key

        payload = await self._get_json(
            client, config.etherscan_url, config.request_timeout, params=params
        )
        try:
            oracle = EtherscanGasOracleResponse.model_validate(payload)
        except ValidationError as e:
            raise MalformedResponseError(f"Unexpected gas oracle payload: {e}") from e

        if not oracle.is_ok:
            raise MalformedResponseError(
                f"Gas oracle returned status={oracle.status!r} message={oracle.message!r}"
            )
        assert isinstance(oracle.result, EtherscanGasOracleResult)
        result = oracle.result
        return self._schedule_from_oracle(
            slow=result.safe_gas_price,
            standard=result.propose_gas_price,
            fast=result.fast_gas_price,
        )

    def compute_cost(self, fee_value: float, fee_units: int, usd_price: float) -> float:
        return (fee_value * fee_units) / GWEI_PER_ETH * usd_price
