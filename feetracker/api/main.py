"""FastAPI application for the fee tracker.

The tracker is created and started in the lifespan and stopped on shutdown.
"""

import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from feetracker import __version__
from feetracker.api.endpoints import router
from feetracker.config import TrackerConfig
from feetracker.log_config import configure_logging
from feetracker.tracker import FeeTracker

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("FEE_TRACKER_HOST", "0.0.0.0")
PORT = int(os.environ.get("FEE_TRACKER_PORT", "8000"))
DEBUG = os.environ.get("FEE_TRACKER_DEBUG", "false").lower() in ("true", "1", "yes")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run the tracker for the lifetime of the application."""
    tracker = FeeTracker(TrackerConfig.from_env())
    tracker.start()
    app.state.tracker = tracker
    try:
        yield
    finally:
        app.state.tracker = None
        await tracker.stop()


app = FastAPI(
    title="Multi-chain Fee Tracker",
    description="Live transaction cost estimates for Ethereum, Bitcoin and Solana",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


def run() -> None:
    """Run the fee tracker API server.

    Configuration via environment variables:
    - FEE_TRACKER_HOST: Host to bind to (default: 0.0.0.0)
    - FEE_TRACKER_PORT: Port to bind to (default: 8000)
    - FEE_TRACKER_DEBUG: Enable reload mode (default: false)
    - FEE_TRACKER_LOG_LEVEL: Log level (default: INFO)
    """
    configure_logging()
    uvicorn.run(
        "feetracker.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
