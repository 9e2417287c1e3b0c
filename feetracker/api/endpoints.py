"""API endpoints for the fee tracker."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, Request

from feetracker.api.schemas import (
    CostTableResponse,
    ProfileResponse,
    SelectionResponse,
    StateResponse,
)
from feetracker.errors import UnsupportedAssetError
from feetracker.tracker import FeeTracker

logger = structlog.get_logger()

router = APIRouter()


def get_tracker(request: Request) -> FeeTracker:
    """Dependency provider for the tracker instance.

    Override this in tests to inject a tracker:
        app.dependency_overrides[get_tracker] = lambda: tracker

    Returns:
        The tracker started by the application lifespan.
    """
    tracker: FeeTracker | None = getattr(request.app.state, "tracker", None)
    if tracker is None:
        raise HTTPException(status_code=503, detail="Tracker not running")
    return tracker


@router.get("/state")
async def get_state(tracker: FeeTracker = Depends(get_tracker)) -> StateResponse:
    """Current fee schedule, prices and live/demo indicator."""
    return StateResponse.from_state(tracker.state, loading=tracker.loading)


@router.get("/profiles")
async def get_profiles(tracker: FeeTracker = Depends(get_tracker)) -> list[ProfileResponse]:
    """Transaction profiles of the displayed asset."""
    return [ProfileResponse.from_profile(p) for p in tracker.transaction_profiles()]


@router.get("/costs")
async def get_costs(tracker: FeeTracker = Depends(get_tracker)) -> CostTableResponse:
    """USD cost table of the displayed asset."""
    return CostTableResponse.from_table(tracker.cost_table())


@router.post("/asset/{asset}")
async def select_asset(
    asset: str,
    tracker: FeeTracker = Depends(get_tracker),
) -> SelectionResponse:
    """Select the active asset and trigger an immediate refresh.

    Error Handling:
        - Unknown asset identifier: 400
    """
    try:
        handle = tracker.select_asset(asset)
    except UnsupportedAssetError as e:
        logger.warning("unsupported_asset_requested", asset=asset)
        raise HTTPException(status_code=400, detail=str(e)) from e
    return SelectionResponse(selected_asset=handle.asset, generation=handle.generation)
