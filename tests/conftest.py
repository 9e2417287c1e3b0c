"""Pytest configuration and fixtures."""

import pytest
import structlog

from feetracker.fees.model import FeeUnitModel
from feetracker.fees.networks.registry import NetworkRegistry, build_default_registry
from feetracker.state import AggregateState


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Keep log configuration from leaking between tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def fee_model() -> FeeUnitModel:
    """The compiled-in fee unit model."""
    return FeeUnitModel()


@pytest.fixture
def registry() -> NetworkRegistry:
    """A registry with every supported network."""
    return build_default_registry()


@pytest.fixture
def initial_state() -> AggregateState:
    """The bootstrap state: Ethereum defaults and demo prices."""
    return AggregateState.initial()
