"""Multi-asset USD price fetching from CoinGecko."""

from __future__ import annotations

from collections.abc import Iterable

import httpx
import structlog
from pydantic import ValidationError

from feetracker.config import DEFAULT_TRACKER_CONFIG, TrackerConfig
from feetracker.errors import MalformedResponseError, NetworkError
from feetracker.fees.result import FetchError, FetchResult
from feetracker.models.types import Asset, parse_asset
from feetracker.models.upstream import CoinGeckoQuote
from feetracker.prices.snapshot import PriceQuote, PriceSnapshot

logger = structlog.get_logger()


def ordered_assets(assets: Iterable[Asset | str] | None) -> list[Asset]:
    """Deduplicate assets and sort them into canonical order."""
    if assets is None:
        return list(Asset)
    requested = {parse_asset(asset) for asset in assets}
    return [asset for asset in Asset if asset in requested]


class PriceFetcher:
    """Fetch USD prices and 24h changes for several assets in one call.

    The fetch succeeds only if the first expected asset (in canonical order)
    is present and well-formed. Other assets that are missing or malformed
    are left out of the returned snapshot, so merging it over the previous
    snapshot keeps their last known quote.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        config: TrackerConfig | None = None,
    ) -> None:
        self._client = client
        self.config = config or DEFAULT_TRACKER_CONFIG

    async def fetch(
        self, assets: Iterable[Asset | str] | None = None
    ) -> FetchResult[PriceSnapshot]:
        """Fetch prices for `assets` (all supported assets by default).

        Returns:
            FetchResult with the partial snapshot on success, or an error
            with no value

        Raises:
            UnsupportedAssetError: If an asset identifier is unknown
        """
        expected = ordered_assets(assets)
        if not expected:
            return FetchResult.ok(PriceSnapshot())

        try:
            snapshot = await self._fetch(expected)
        except NetworkError as e:
            return self._failed(FetchError.NETWORK, str(e))
        except MalformedResponseError as e:
            return self._failed(FetchError.MALFORMED_RESPONSE, str(e))
        except Exception as e:
            logger.exception("price_fetch_unexpected_error")
            return self._failed(FetchError.MALFORMED_RESPONSE, repr(e))

        logger.debug(
            "prices_fetched",
            assets=[asset.value for asset in snapshot],
            missing=[asset.value for asset in expected if asset not in snapshot],
        )
        return FetchResult.ok(snapshot)

    async def _fetch(self, expected: list[Asset]) -> PriceSnapshot:
        params = {
            "ids": ",".join(asset.value for asset in expected),
            "vs_currencies": "usd",
            "include_24hr_change": "true",
        }
        try:
            response = await self._client.get(
                self.config.coingecko_url,
                params=params,
                timeout=self.config.request_timeout,
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise NetworkError(f"Price request failed: {e!r}") from e
        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedResponseError("Price response is not JSON") from e
        if not isinstance(payload, dict):
            raise MalformedResponseError(
                f"Expected a price object, got {type(payload).__name__}"
            )

        quotes: dict[Asset, PriceQuote] = {}
        for asset in expected:
            quote = _parse_quote(payload.get(asset.value))
            if quote is not None:
                quotes[asset] = quote

        first = expected[0]
        if first not in quotes:
            raise MalformedResponseError(f"Price response has no valid entry for {first.value}")
        return PriceSnapshot(quotes)

    def _failed(self, error: FetchError, detail: str) -> FetchResult[PriceSnapshot]:
        logger.warning("price_fetch_failed", error=error.value, detail=detail)
        return FetchResult.failed(error, detail)


def _parse_quote(entry: object) -> PriceQuote | None:
    if not isinstance(entry, dict):
        return None
    try:
        quote = CoinGeckoQuote.model_validate(entry)
    except (ValidationError, OverflowError):
        return None
    return PriceQuote(usd=quote.usd, change_24h_pct=quote.usd_24h_change or 0.0)
