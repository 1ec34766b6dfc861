"""
Data model for path synthesis.

Immutable dataclasses for simulation inputs, per-step path points and the
result of one synthesis run. Enumerations close the set of process models
and asset classes so dispatch tables can be checked for completeness.
"""

from dataclasses import dataclass, fields
from datetime import date
from enum import Enum

import numpy as np

# =============================================================================
# Enumerations
# =============================================================================

class ModelType(Enum):
    """Stochastic process driving the underlying state."""

    EQUITY_GBM = "EQUITY_GBM"
    EQUITY_MERTON_JUMP = "EQUITY_MERTON_JUMP"
    INTEREST_RATE_VASICEK = "INTEREST_RATE_VASICEK"
    INTEREST_RATE_CIR = "INTEREST_RATE_CIR"
    MACRO_INFLATION = "MACRO_INFLATION"
    OU_PROCESS = "OU_PROCESS"


class AssetClass(Enum):
    """Asset class selecting drift adjustments and display transforms."""

    EQUITY = "EQUITY"
    FIXED_INCOME = "FIXED_INCOME"
    FX = "FX"
    COMMODITY = "COMMODITY"
    FORWARD = "FORWARD"
    FUTURE = "FUTURE"
    OPTION = "OPTION"
    SWAP = "SWAP"
    SWAPTION = "SWAPTION"
    # Economic factors
    CENTRAL_BANK_RATE = "CENTRAL_BANK_RATE"
    INFLATION_RATE = "INFLATION_RATE"
    UNEMPLOYMENT_RATE = "UNEMPLOYMENT_RATE"
    TOTAL_PRODUCTIVITY = "TOTAL_PRODUCTIVITY"
    GDP_GROWTH = "GDP_GROWTH"

    @property
    def is_derivative(self) -> bool:
        """Whether the class is priced analytically with Greeks."""
        return self in (AssetClass.OPTION, AssetClass.SWAPTION)

    @property
    def is_seasonal(self) -> bool:
        """Whether the displayed value carries the annual seasonal cycle."""
        return self in (AssetClass.COMMODITY, AssetClass.INFLATION_RATE, AssetClass.GDP_GROWTH)


# =============================================================================
# Inputs
# =============================================================================

@dataclass(frozen=True)
class CorrelationFactors:
    """
    Named correlation coefficients to the market factor.

    The aggregate correlation of a run is the clamped sum of all factors.

    Attributes
    ----------
    equity : float
        Correlation contribution of the equity factor
    rates : float
        Correlation contribution of the rates factor
    volatility : float
        Correlation contribution of the volatility factor
    commodity : float
        Correlation contribution of the commodity factor
    """

    equity: float = 0.0
    rates: float = 0.0
    volatility: float = 0.0
    commodity: float = 0.0

    def __post_init__(self) -> None:
        """Validate each coefficient is in [-1, 1]."""
        for name, value in self.as_dict().items():
            if not -1.0 <= value <= 1.0:
                raise ValueError(f"CRITICAL: correlation '{name}' must be in [-1, 1], got {value}")

    def as_dict(self) -> dict[str, float]:
        """Factor name to coefficient."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class SimulationParameters:
    """
    Fully-populated, immutable input of one synthesis run.

    Defaults for unset fields belong to path_synthesis.config.defaults;
    every field here is required except the correlation vector.

    Attributes
    ----------
    model_type : ModelType
        Stochastic process for the underlying state
    asset_class : AssetClass
        Domain-specific drift adjustment and display transform
    initial_value : float
        Starting level of the underlying (and of the benchmark proxy)
    n_steps : int
        Number of steps; the path has n_steps + 1 points
    dt : float
        Step size in years
    start_date : date
        Calendar date of point 0; point i is start_date + i days
    drift : float
        Annualized drift (mu)
    volatility : float
        Annualized diffusion volatility used for path generation (sigma)
    mean_reversion_speed : float
        Reversion speed (kappa)
    long_term_mean : float
        Reversion target (theta)
    jump_intensity : float
        Jump arrival rate per year (lambda)
    jump_mean : float
        Mean of the log jump size
    jump_volatility : float
        Volatility of the log jump size
    dividend_yield, foreign_rate, domestic_rate : float
        Equity and FX drift adjustments
    storage_cost, convenience_yield, seasonal_amplitude : float
        Commodity drift adjustments and seasonal display amplitude
    credit_spread, cds_spread : float
        Fixed-income spreads over the risk-free rate
    pe_ratio, expected_earnings : float
        Equity fundamentals
    strike : float
        Option strike; swap/swaption strikes are quoted x1000 (30 = 3%)
    is_call : bool
        Call (or payer swaption) when True
    implied_volatility : float
        Pricing volatility for derivatives; falls back to volatility when 0
    expiry_time : float
        Time to expiry at point 0, in years
    risk_free_rate : float
        Risk-free (discount) rate
    correlations : CorrelationFactors
        Named correlations to the market factor
    """

    model_type: ModelType
    asset_class: AssetClass
    initial_value: float
    n_steps: int
    dt: float
    start_date: date

    # Process
    drift: float
    volatility: float
    mean_reversion_speed: float
    long_term_mean: float
    jump_intensity: float
    jump_mean: float
    jump_volatility: float

    # Asset-class adjustments
    dividend_yield: float
    foreign_rate: float
    domestic_rate: float
    storage_cost: float
    convenience_yield: float
    seasonal_amplitude: float
    credit_spread: float
    cds_spread: float
    pe_ratio: float
    expected_earnings: float

    # Derivative terms
    strike: float
    is_call: bool
    implied_volatility: float
    expiry_time: float
    risk_free_rate: float

    correlations: CorrelationFactors = CorrelationFactors()

    def __post_init__(self) -> None:
        """Validate run invariants."""
        if self.n_steps < 1:
            raise ValueError(f"CRITICAL: n_steps must be >= 1, got {self.n_steps}")
        if self.dt <= 0:
            raise ValueError(f"CRITICAL: dt must be > 0, got {self.dt}")
        if self.volatility < 0:
            raise ValueError(f"CRITICAL: volatility must be >= 0, got {self.volatility}")
        if self.jump_intensity < 0:
            raise ValueError(f"CRITICAL: jump_intensity must be >= 0, got {self.jump_intensity}")
        if self.jump_volatility < 0:
            raise ValueError(f"CRITICAL: jump_volatility must be >= 0, got {self.jump_volatility}")
        if self.implied_volatility < 0:
            raise ValueError(
                f"CRITICAL: implied_volatility must be >= 0, got {self.implied_volatility}"
            )
        # Pricers do not re-validate; reject degenerate derivative terms here
        if self.asset_class.is_derivative:
            if self.pricing_volatility <= 0:
                raise ValueError(
                    f"CRITICAL: pricing volatility must be > 0 for {self.asset_class.value}, "
                    f"got {self.pricing_volatility}"
                )
            if self.strike <= 0:
                raise ValueError(
                    f"CRITICAL: strike must be > 0 for {self.asset_class.value}, got {self.strike}"
                )

    @property
    def pricing_volatility(self) -> float:
        """Volatility used by the analytic pricers."""
        return self.implied_volatility or self.volatility


# =============================================================================
# Outputs
# =============================================================================

@dataclass(frozen=True)
class Greeks:
    """
    Unscaled analytic sensitivities.

    Attributes
    ----------
    delta : float
        dV/dS
    gamma : float
        d²V/dS²
    vega : float
        dV/dσ per unit volatility
    theta : float
        dV/dt per year
    rho : float
        dV/dr per unit rate
    """

    delta: float
    gamma: float
    vega: float
    theta: float
    rho: float


@dataclass(frozen=True)
class PathPoint:
    """
    One step of a synthesized path.

    Attributes
    ----------
    index : int
        Step index, 0..n_steps
    date : date
        start_date + index days
    value : float
        Displayed value (asset-class transform of the underlying)
    underlying : float
        Raw underlying state
    benchmark : float
        Correlated market proxy level
    secondary : float, optional
        Strike, spread or spot, for display
    pe_ratio : float, optional
        Price/earnings ratio (equities only)
    expected_earnings : float, optional
        Forward earnings (equities only)
    greeks : Greeks, optional
        Sensitivities (options and swaptions only)
    """

    index: int
    date: date
    value: float
    underlying: float
    benchmark: float
    secondary: float | None = None
    pe_ratio: float | None = None
    expected_earnings: float | None = None
    greeks: Greeks | None = None


@dataclass(frozen=True)
class PathSummary:
    """
    Descriptive statistics over the displayed values of a path.

    Attributes
    ----------
    min : float
        Minimum displayed value
    max : float
        Maximum displayed value
    mean : float
        Arithmetic mean
    volatility : float
        Population standard deviation
    """

    min: float
    max: float
    mean: float
    volatility: float


@dataclass(frozen=True)
class SimulationResult:
    """
    Immutable result of one synthesis run.

    Attributes
    ----------
    parameters : SimulationParameters
        Echoed input
    points : tuple[PathPoint, ...]
        Path in time order, length n_steps + 1
    summary : PathSummary
        Statistics over displayed values
    seed : int, optional
        Seed used, when the run was seeded
    """

    parameters: SimulationParameters
    points: tuple[PathPoint, ...]
    summary: PathSummary
    seed: int | None = None

    @property
    def n_steps(self) -> int:
        """Number of time steps."""
        return len(self.points) - 1

    @property
    def values(self) -> np.ndarray:
        """Displayed values, shape (n_steps + 1,)."""
        return np.array([p.value for p in self.points])

    @property
    def underlying(self) -> np.ndarray:
        """Raw underlying states, shape (n_steps + 1,)."""
        return np.array([p.underlying for p in self.points])

    @property
    def benchmark(self) -> np.ndarray:
        """Market proxy levels, shape (n_steps + 1,)."""
        return np.array([p.benchmark for p in self.points])
