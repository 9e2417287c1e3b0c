"""Pydantic models for the upstream fee oracle and price source payloads.

Tier fields are typed loosely: a garbage value in one field must not
invalidate the whole response, so numeric coercion of individual tiers happens
in the network variants instead.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EtherscanGasOracleResult(BaseModel):
    """The `result` object of an Etherscan gas oracle response (gwei)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    safe_gas_price: Any = Field(default=None, alias="SafeGasPrice")
    propose_gas_price: Any = Field(default=None, alias="ProposeGasPrice")
    fast_gas_price: Any = Field(default=None, alias="FastGasPrice")


class EtherscanGasOracleResponse(BaseModel):
    """Etherscan gas oracle envelope.

    On rate limiting or a bad API key Etherscan answers with status "0" and a
    plain string in `result`, which is why `result` is a union.
    """

    model_config = ConfigDict(extra="ignore")

    status: str | int
    message: str | None = None
    result: EtherscanGasOracleResult | str

    @property
    def is_ok(self) -> bool:
        """True if the envelope reports success and carries a result object."""
        return str(self.status) == "1" and isinstance(self.result, EtherscanGasOracleResult)


class MempoolRecommendedFees(BaseModel):
    """mempool.space recommended fee rates (sat/vB)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    fastest_fee: Any = Field(default=None, alias="fastestFee")
    half_hour_fee: Any = Field(default=None, alias="halfHourFee")
    hour_fee: Any = Field(default=None, alias="hourFee")
    economy_fee: Any = Field(default=None, alias="economyFee")
    minimum_fee: Any = Field(default=None, alias="minimumFee")


class CoinGeckoQuote(BaseModel):
    """One asset entry of a CoinGecko simple/price response."""

    model_config = ConfigDict(extra="ignore")

    usd: float = Field(ge=0, allow_inf_nan=False)
    usd_24h_change: float | None = Field(default=None, allow_inf_nan=False)
