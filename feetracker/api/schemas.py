"""Response models for the fee tracker API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from feetracker.display import TIER_INFO, format_fee_value
from feetracker.fees.calculator import CostTable
from feetracker.models.schedule import FeeSchedule, TransactionProfile
from feetracker.models.types import Asset, FeeTier
from feetracker.state import AggregateState


class TierInfoResponse(BaseModel):
    description: str
    confirmation_time: str


class ScheduleResponse(BaseModel):
    """Fee schedule with raw tier values and display strings."""

    slow: float
    standard: float
    fast: float
    instant: float
    unit: str
    timestamp: datetime
    display: dict[FeeTier, str]
    tier_info: dict[FeeTier, TierInfoResponse]

    @classmethod
    def from_schedule(cls, asset: Asset, schedule: FeeSchedule) -> ScheduleResponse:
        return cls(
            slow=schedule.slow,
            standard=schedule.standard,
            fast=schedule.fast,
            instant=schedule.instant,
            unit=schedule.unit,
            timestamp=schedule.timestamp,
            display={
                tier: format_fee_value(asset, value, schedule.unit)
                for tier, value in schedule.tiers.items()
            },
            tier_info={
                tier: TierInfoResponse(
                    description=info.description,
                    confirmation_time=info.confirmation_time,
                )
                for tier, info in TIER_INFO.items()
            },
        )


class PriceResponse(BaseModel):
    usd: float
    change_24h_pct: float


class StateResponse(BaseModel):
    """Current aggregate state plus the live/demo indicator."""

    selected_asset: Asset
    schedule: ScheduleResponse
    prices: dict[Asset, PriceResponse]
    is_live: bool
    mode: str
    loading: bool

    @classmethod
    def from_state(cls, state: AggregateState, loading: bool) -> StateResponse:
        return cls(
            selected_asset=state.selected_asset,
            schedule=ScheduleResponse.from_schedule(state.selected_asset, state.schedule),
            prices={
                asset: PriceResponse(usd=quote.usd, change_24h_pct=quote.change_24h_pct)
                for asset, quote in state.prices.quotes.items()
            },
            is_live=state.is_live,
            mode=state.mode,
            loading=loading,
        )


class ProfileResponse(BaseModel):
    label: str
    fee_units_required: int

    @classmethod
    def from_profile(cls, profile: TransactionProfile) -> ProfileResponse:
        return cls(label=profile.label, fee_units_required=profile.fee_units_required)


class CostRowResponse(BaseModel):
    label: str
    fee_units_required: int
    costs: dict[FeeTier, float]


class CostTableResponse(BaseModel):
    """USD cost of every transaction profile at every tier."""

    asset: Asset
    unit: str
    rows: list[CostRowResponse]

    @classmethod
    def from_table(cls, table: CostTable) -> CostTableResponse:
        return cls(
            asset=table.asset,
            unit=table.unit,
            rows=[
                CostRowResponse(
                    label=row.label,
                    fee_units_required=row.fee_units_required,
                    costs=dict(row.costs),
                )
                for row in table.rows
            ],
        )


class SelectionResponse(BaseModel):
    selected_asset: Asset
    generation: int
