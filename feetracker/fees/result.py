"""Fetch result types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class FetchError(Enum):
    """Types of upstream fetch failures."""

    NETWORK = "network"
    MALFORMED_RESPONSE = "malformed_response"


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Result of an upstream fetch.

    Fetchers never raise for runtime failures; they return a tagged result
    and leave the fallback policy to the caller.

    Attributes:
        value: The fetched value. Fee fetches carry the fallback schedule here
            even on error; price fetches carry None on error.
        error: If the fetch failed, the type of failure.
        error_detail: Optional human-readable detail about the error.

    Examples:
        # Successful fetch
        result = FetchResult.ok(schedule)
        assert result.is_ok

        # Failed fetch with a fallback value
        result = FetchResult.failed(FetchError.NETWORK, "timeout", fallback=default)
        assert result.is_error
        assert result.value is default
    """

    value: T | None
    error: FetchError | None = None
    error_detail: str | None = None

    @property
    def is_ok(self) -> bool:
        """True if the upstream call succeeded with a well-formed response."""
        return self.error is None

    @property
    def is_error(self) -> bool:
        """True if the fetch failed."""
        return self.error is not None

    @classmethod
    def ok(cls, value: T) -> FetchResult[T]:
        """Create a successful result."""
        return cls(value=value)

    @classmethod
    def failed(
        cls,
        error: FetchError,
        detail: str | None = None,
        fallback: T | None = None,
    ) -> FetchResult[T]:
        """Create an error result, optionally carrying a fallback value."""
        return cls(value=fallback, error=error, error_detail=detail)
