"""Solana: flat per-signature fee, no oracle call."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from feetracker.fees.networks.base import BaseNetwork
from feetracker.models.schedule import FeeSchedule
from feetracker.models.types import Asset

if TYPE_CHECKING:
    from feetracker.config import TrackerConfig


class SolanaNetwork(BaseNetwork):
    """Flat-fee network.

    The schedule is the static default in SOL. Transaction size does not
    matter, so fee_units is ignored:
        usd = sol * sol_usd
    """

    asset = Asset.SOLANA

    async def _fetch(self, client: httpx.AsyncClient, config: TrackerConfig) -> FeeSchedule:
        return self.default_schedule()

    def compute_cost(self, fee_value: float, fee_units: int, usd_price: float) -> float:
        return fee_value * usd_price
