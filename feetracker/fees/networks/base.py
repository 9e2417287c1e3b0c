"""Base class and protocol for per-network fee capabilities.

Each supported network bundles the three things that differ between chains:
how its fee schedule is fetched, how a fee tier converts into USD, and which
transaction profiles make up its cost table. Adding a network means adding
one variant and registering it, not touching shared logic.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Protocol

import httpx
import structlog

from feetracker.constants import INSTANT_MULTIPLIER
from feetracker.errors import MalformedResponseError, NetworkError
from feetracker.fees.model import DEFAULT_FEE_UNIT_MODEL, FeeUnitModel
from feetracker.fees.result import FetchError, FetchResult
from feetracker.models.schedule import FeeSchedule, TransactionProfile

if TYPE_CHECKING:
    from feetracker.config import TrackerConfig
    from feetracker.models.types import Asset

logger = structlog.get_logger()


class Network(Protocol):
    """Protocol for a supported network's fee capability set."""

    asset: Asset

    @property
    def unit(self) -> str:
        """Canonical fee unit string (e.g. "gwei")."""
        ...

    def default_schedule(self) -> FeeSchedule:
        """Compiled-in schedule with a fresh timestamp."""
        ...

    def transaction_profiles(self) -> tuple[TransactionProfile, ...]:
        """Ordered representative transactions for the cost table."""
        ...

    async def fetch_schedule(
        self,
        client: httpx.AsyncClient,
        config: TrackerConfig,
    ) -> FetchResult[FeeSchedule]:
        """Fetch the live schedule, falling back to the default on failure.

        Never raises for network or response-shape failures.
        """
        ...

    def compute_cost(self, fee_value: float, fee_units: int, usd_price: float) -> float:
        """Convert one fee tier value into a USD amount."""
        ...


def coerce_fee_value(raw: Any) -> float | None:
    """Parse a single fee tier value from an upstream payload.

    Accepts ints, floats and numeric strings ("12", "0.75").

    Returns:
        The value as float, or None if missing, non-numeric, negative or
        not finite
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
    try:
        value = float(raw)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(value) or value < 0:
        return None
    return value


def non_decreasing(values: list[float]) -> list[float]:
    """Raise each value to at least the previous one."""
    result: list[float] = []
    for value in values:
        result.append(max(value, result[-1]) if result else value)
    return result


class BaseNetwork:
    """Base class with shared network utilities.

    Subclasses set `asset` and implement `_fetch` and `compute_cost`.
    `fetch_schedule` wraps `_fetch` so that NetworkError and
    MalformedResponseError never escape the fetcher boundary.
    """

    asset: Asset

    def __init__(self, model: FeeUnitModel | None = None) -> None:
        self._model = model or DEFAULT_FEE_UNIT_MODEL

    @property
    def unit(self) -> str:
        return self._model.unit(self.asset)

    def default_schedule(self) -> FeeSchedule:
        return self._model.default_schedule(self.asset)

    def transaction_profiles(self) -> tuple[TransactionProfile, ...]:
        return self._model.transaction_profiles(self.asset)

    async def fetch_schedule(
        self,
        client: httpx.AsyncClient,
        config: TrackerConfig,
    ) -> FetchResult[FeeSchedule]:
        try:
            schedule = await self._fetch(client, config)
        except NetworkError as e:
            return self._fallback(FetchError.NETWORK, str(e))
        except MalformedResponseError as e:
            return self._fallback(FetchError.MALFORMED_RESPONSE, str(e))
        except Exception as e:
            logger.exception("fee_fetch_unexpected_error", asset=self.asset.value)
            return self._fallback(FetchError.MALFORMED_RESPONSE, repr(e))
        return FetchResult.ok(schedule)

    async def _fetch(self, client: httpx.AsyncClient, config: TrackerConfig) -> FeeSchedule:
        raise NotImplementedError

    def compute_cost(self, fee_value: float, fee_units: int, usd_price: float) -> float:
        raise NotImplementedError

    def _fallback(self, error: FetchError, detail: str) -> FetchResult[FeeSchedule]:
        logger.warning(
            "fee_fetch_fallback",
            asset=self.asset.value,
            error=error.value,
            detail=detail,
        )
        return FetchResult.failed(error, detail, fallback=self.default_schedule())

    def _schedule_from_oracle(self, slow: Any, standard: Any, fast: Any) -> FeeSchedule:
        """Build a schedule from three raw oracle tiers.

        Each missing or non-numeric tier falls back to its own default.
        instant = floor(fast * 1.5) when fast parsed, else the default instant.
        Tiers are then clamped to be non-decreasing.
        """
        defaults = self._model.default_tiers(self.asset)
        parsed = {
            "slow": coerce_fee_value(slow),
            "standard": coerce_fee_value(standard),
            "fast": coerce_fee_value(fast),
        }
        fallen_back = [name for name, value in parsed.items() if value is None]
        if fallen_back:
            logger.info(
                "fee_tier_fallback",
                asset=self.asset.value,
                tiers=fallen_back,
            )

        slow_value = parsed["slow"] if parsed["slow"] is not None else defaults.slow
        standard_value = (
            parsed["standard"] if parsed["standard"] is not None else defaults.standard
        )
        fast_value = parsed["fast"] if parsed["fast"] is not None else defaults.fast
        if parsed["fast"] is not None:
            instant_value = float(math.floor(fast_value * INSTANT_MULTIPLIER))
        else:
            instant_value = defaults.instant

        slow_value, standard_value, fast_value, instant_value = non_decreasing(
            [slow_value, standard_value, fast_value, instant_value]
        )
        return FeeSchedule(
            slow=slow_value,
            standard=standard_value,
            fast=fast_value,
            instant=instant_value,
            unit=defaults.unit,
        )

    async def _get_json(
        self,
        client: httpx.AsyncClient,
        url: str,
        timeout: float,
        params: dict[str, str] | None = None,
    ) -> Any:
        """GET a JSON document.

        Raises:
            NetworkError: On transport failure, timeout or HTTP error status
            MalformedResponseError: If the body is not valid JSON
        """
        try:
            response = await client.get(url, params=params, timeout=timeout)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise NetworkError(f"{self.asset.value} fee request failed: {e!r}") from e
        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError(f"{self.asset.value} fee response is not JSON") from e
