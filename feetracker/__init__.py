"""Multi-chain fee tracker: live transaction cost estimates across networks."""

from feetracker.tracker import FeeTracker

__version__ = "0.1.0"
__all__ = ["FeeTracker", "__version__"]
