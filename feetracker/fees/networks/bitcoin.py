"""Bitcoin: mempool.space recommended fees, fee rates in sat/vB."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from feetracker.constants import SATS_PER_BTC
from feetracker.errors import MalformedResponseError
from feetracker.fees.networks.base import BaseNetwork
from feetracker.models.schedule import FeeSchedule
from feetracker.models.types import Asset
from feetracker.models.upstream import MempoolRecommendedFees

if TYPE_CHECKING:
    from feetracker.config import TrackerConfig


class BitcoinNetwork(BaseNetwork):
    """Fee-rate network.

    Maps hourFee -> slow, halfHourFee -> standard, fastestFee -> fast,
    and derives instant from fastestFee.

    Cost formula:
        usd = sat_per_vbyte * vbytes / 1e8 * btc_usd
    """

    asset = Asset.BITCOIN

    async def _fetch(self, client: httpx.AsyncClient, config: TrackerConfig) -> FeeSchedule:
        payload = await self._get_json(client, config.mempool_url, config.request_timeout)
        if not isinstance(payload, dict):
            raise MalformedResponseError(
                f"Expected a fee object, got {type(payload).__name__}"
            )
        try:
            fees = MempoolRecommendedFees.model_validate(payload)
        except ValidationError as e:
            raise MalformedResponseError(f"Unexpected fee payload: {e}") from e

        return self._schedule_from_oracle(
            slow=fees.hour_fee,
            standard=fees.half_hour_fee,
            fast=fees.fastest_fee,
        )

    def compute_cost(self, fee_value: float, fee_units: int, usd_price: float) -> float:
        return (fee_value * fee_units) / SATS_PER_BTC * usd_price
