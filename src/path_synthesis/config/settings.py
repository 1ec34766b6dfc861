"""
Frozen configuration settings for path synthesis.

All configuration is immutable (frozen dataclasses) to ensure reproducibility.
Per-field defaults for simulation inputs live in config/defaults.py; this
module only holds engine-level conventions that callers cannot override
through SimulationParameters.
"""

import os
from dataclasses import dataclass

# =============================================================================
# Run Configuration
# =============================================================================

def _resolve_default_seed() -> int | None:
    """
    Resolve the default random seed with environment variable override.

    Priority:
    1. PATH_SYNTHESIS_SEED environment variable (if set)
    2. Default: None (fresh OS entropy per run)

    Returns
    -------
    int or None
        Seed for numpy.random.default_rng
    """
    env_seed = os.environ.get("PATH_SYNTHESIS_SEED")
    if env_seed:
        return int(env_seed)
    return None


@dataclass(frozen=True)
class RunConfig:
    """
    Immutable run configuration.

    Attributes
    ----------
    default_seed : int, optional
        Seed used when the caller passes neither a seed nor a generator.
        Override with PATH_SYNTHESIS_SEED environment variable.
    """

    default_seed: int | None = None

    def __post_init__(self) -> None:
        """Initialize default_seed using resolver function."""
        # Frozen dataclass workaround: use object.__setattr__
        if self.default_seed is None:
            object.__setattr__(self, "default_seed", _resolve_default_seed())


# =============================================================================
# Numerical Configuration
# =============================================================================

@dataclass(frozen=True)
class NumericalConfig:
    """
    Immutable numerical floors and calendar conventions. [T1]

    Attributes
    ----------
    level_floor : float
        Floor applied to the square-root model level before use
    expiry_floor : float
        Floor applied to time-to-expiry before pricing
    calendar_days_per_year : int
        Days per year used to decay time-to-expiry (one path step = one day)
    trading_days_per_year : int
        Length of the seasonal cycle and earnings-growth year
    """

    level_floor: float = 1e-4
    expiry_floor: float = 1e-4
    calendar_days_per_year: int = 365
    trading_days_per_year: int = 252  # [T1]


# =============================================================================
# Benchmark Configuration
# =============================================================================

@dataclass(frozen=True)
class BenchmarkConfig:
    """
    Immutable market-factor proxy configuration.

    The benchmark is a generic "market" GBM driven by the market shock.
    It is deliberately not part of SimulationParameters.

    Attributes
    ----------
    drift : float
        Annualized drift of the market proxy
    volatility : float
        Annualized volatility of the market proxy
    """

    drift: float = 0.06
    volatility: float = 0.15


# =============================================================================
# Instrument Conventions
# =============================================================================

@dataclass(frozen=True)
class InstrumentConfig:
    """
    Immutable instrument display conventions.

    Attributes
    ----------
    swap_tenor_years : float
        Underlying swap tenor assumed by the swaption annuity approximation
    strike_rate_scale : float
        Divisor turning a swap/swaption strike quote into a rate (30 -> 0.03)
    default_strike_rate : float
        Strike rate used when the scaled strike is zero
    basis_points : float
        Multiplier for swap values quoted in basis points
    earnings_growth : float
        Annual growth of forward earnings on equity paths
    unemployment_floor : float
        Lower bound of displayed unemployment rates (percent)
    """

    swap_tenor_years: float = 5.0
    strike_rate_scale: float = 1000.0
    default_strike_rate: float = 0.03
    basis_points: float = 10_000.0
    earnings_growth: float = 0.03
    unemployment_floor: float = 2.0


# =============================================================================
# Master Configuration
# =============================================================================

@dataclass(frozen=True)
class Settings:
    """
    Master frozen configuration combining all sub-configs.

    Usage
    -----
    >>> from path_synthesis.config.settings import SETTINGS
    >>> SETTINGS.benchmark.volatility
    0.15
    """

    run: RunConfig = RunConfig()
    numerical: NumericalConfig = NumericalConfig()
    benchmark: BenchmarkConfig = BenchmarkConfig()
    instrument: InstrumentConfig = InstrumentConfig()


# Singleton instance - import this
SETTINGS = Settings()
