"""
Centralized pytest fixtures for path-synthesis test suite.

This module provides shared fixtures used across all test categories:
- unit/
- properties/
- validation/
- smoke/

Fixture Categories:
1. Tolerances - Tiered numerical tolerances
2. Market Parameters - Standard option inputs and textbook references
3. Simulation Parameters - Factory for fully-populated run inputs
4. Random Generators - Reproducible numpy generators
"""

from dataclasses import dataclass
from datetime import date

import numpy as np
import pytest

from path_synthesis.config.defaults import build_parameters
from path_synthesis.data.schemas import AssetClass, ModelType, SimulationParameters

# =============================================================================
# TOLERANCE TIERS
# =============================================================================

@dataclass(frozen=True)
class ToleranceTiers:
    """
    Tiered tolerance framework for different test types.

    Mirrors path_synthesis.config.tolerances for fixture injection.
    """

    # Exact identities: flat paths, coupling at rho in {-1, 0, 1}
    anti_pattern: float = 1e-10

    # Closed-form identities: parity, Greek relationships
    validation: float = 1e-6

    # Reference prices quoted to 4 decimals
    reference: float = 1e-4


TOLERANCES = ToleranceTiers()


@pytest.fixture(scope="session")
def tolerances() -> ToleranceTiers:
    """Provide tiered tolerance settings for all tests."""
    return TOLERANCES


# =============================================================================
# MARKET PARAMETERS
# =============================================================================

@dataclass(frozen=True)
class MarketParams:
    """Standard market parameters for option pricing tests."""

    spot: float = 100.0
    strike: float = 100.0
    rate: float = 0.05
    volatility: float = 0.20
    time_to_expiry: float = 1.0


@pytest.fixture
def market_params() -> MarketParams:
    """Standard ATM market parameters."""
    return MarketParams()


@dataclass(frozen=True)
class ReferenceOption:
    """A published Black-Scholes reference value."""

    name: str
    spot: float
    strike: float
    rate: float
    volatility: float
    time_to_expiry: float
    expected_call: float | None = None
    expected_put: float | None = None
    expected_delta: float | None = None


# Standard ATM benchmark quoted in most texts
ATM_REFERENCE = ReferenceOption(
    name="ATM 1y, r=5%, vol=20%",
    spot=100.0,
    strike=100.0,
    rate=0.05,
    volatility=0.20,
    time_to_expiry=1.0,
    expected_call=10.4506,
    expected_put=5.5735,
    expected_delta=0.6368,
)

# Hull (2021) Chapter 15, Example 15.6
HULL_EXAMPLE_15_6 = ReferenceOption(
    name="Hull Example 15.6",
    spot=42.0,
    strike=40.0,
    rate=0.10,
    volatility=0.20,
    time_to_expiry=0.5,
    expected_call=4.76,
    expected_put=0.81,
)

# Hull (2021) Chapter 19 Example 19.1 (20 weeks)
HULL_EXAMPLE_19_1 = ReferenceOption(
    name="Hull Example 19.1 (Delta)",
    spot=49.0,
    strike=50.0,
    rate=0.05,
    volatility=0.20,
    time_to_expiry=0.3846,
    expected_delta=0.522,
)


@pytest.fixture
def atm_reference() -> ReferenceOption:
    """Standard ATM reference option."""
    return ATM_REFERENCE


@pytest.fixture
def hull_examples() -> list[ReferenceOption]:
    """Hull textbook examples for batch validation."""
    return [HULL_EXAMPLE_15_6, HULL_EXAMPLE_19_1]


# =============================================================================
# SIMULATION PARAMETERS
# =============================================================================

START_DATE = date(2024, 1, 2)


@pytest.fixture
def make_params():
    """
    Factory for fully-populated SimulationParameters.

    Defaults to a seeded-friendly equity GBM run starting 2024-01-02.
    """

    def _make(
        model_type: ModelType = ModelType.EQUITY_GBM,
        asset_class: AssetClass = AssetClass.EQUITY,
        initial_value: float = 100.0,
        **overrides,
    ) -> SimulationParameters:
        overrides.setdefault("start_date", START_DATE)
        return build_parameters(model_type, asset_class, initial_value, **overrides)

    return _make


@pytest.fixture
def flat_gbm_params(make_params) -> SimulationParameters:
    """GBM with zero drift and zero volatility: a flat path at 100."""
    return make_params(drift=0.0, volatility=0.0, n_steps=10, dt=1 / 252)


# =============================================================================
# NUMPY RANDOM GENERATORS
# =============================================================================

@pytest.fixture
def reproducible_rng():
    """Provide a reproducible numpy random generator."""
    return np.random.default_rng(seed=42)
