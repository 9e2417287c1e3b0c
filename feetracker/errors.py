"""Fee tracker error classes.

NetworkError and MalformedResponseError are runtime conditions: they are raised
inside the network variants and converted into tagged fetch results at the
fetcher boundary. UnsupportedAssetError is a caller bug and propagates.
"""


class FeeTrackerError(Exception):
    """Base error for fee tracker operations."""

    pass


class NetworkError(FeeTrackerError):
    """Transport failure, timeout or non-success HTTP status from an upstream."""

    pass


class MalformedResponseError(FeeTrackerError):
    """Upstream responded, but the body does not have the expected shape."""

    pass


class UnsupportedAssetError(FeeTrackerError, ValueError):
    """Asset identifier is not one of the supported networks."""

    def __init__(self, asset: object) -> None:
        super().__init__(f"Unsupported asset: {asset!r}")
        self.asset = asset
