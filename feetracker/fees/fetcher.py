"""Fee schedule fetching across networks."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import structlog

from feetracker.config import DEFAULT_TRACKER_CONFIG, TrackerConfig
from feetracker.fees.networks.registry import NetworkRegistry, build_default_registry
from feetracker.fees.result import FetchResult

if TYPE_CHECKING:
    from feetracker.models.schedule import FeeSchedule
    from feetracker.models.types import Asset

logger = structlog.get_logger()


class FeeFetcher:
    """Fetch the fee schedule of the selected network.

    Dispatches to the registered network variant. Network and response-shape
    failures come back as the default schedule with a fresh timestamp; only
    an unsupported asset identifier raises.

    Attributes:
        config: Endpoints and timeouts
        registry: Network variants keyed by asset
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        config: TrackerConfig | None = None,
        registry: NetworkRegistry | None = None,
    ) -> None:
        self._client = client
        self.config = config or DEFAULT_TRACKER_CONFIG
        self.registry = registry or build_default_registry()

    async def fetch_result(self, asset: Asset | str) -> FetchResult[FeeSchedule]:
        """Fetch a schedule and report whether it came from the upstream.

        Raises:
            UnsupportedAssetError: If the asset is not a supported network
        """
        network = self.registry.get(asset)
        result = await network.fetch_schedule(self._client, self.config)
        if result.is_ok:
            logger.debug("fee_schedule_fetched", asset=network.asset.value)
        return result

    async def fetch(self, asset: Asset | str) -> FeeSchedule:
        """Fetch a schedule, falling back to the asset's default on failure."""
        result = await self.fetch_result(asset)
        assert result.value is not None
        return result.value
