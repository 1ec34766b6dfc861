"""
Single-step evolution of the underlying state.

Implements one update rule per ModelType, all consuming the current level,
one correlated shock and the step size:

[T1] GBM:       S' = S·exp((μ - σ²/2)dt + σ√dt·Z)
[T1] Merton:    GBM step × J, J = exp(m + s·Zj) with probability λdt, else 1
[T1] Vasicek:   x' = x + κ(θ - x)dt + σ√dt·Z
[T1] CIR:       x' = max(0, x⁺ + κ(θ - x⁺)dt + σ√x⁺·√dt·Z),  x⁺ = max(x, ε)
[T1] OU/macro:  x' = x + μdt + κ(θ - x)dt + σ√dt·Z

Jump arrivals use a Bernoulli(λdt) approximation of the Poisson count,
which is only accurate when λdt is small.

See: Glasserman (2003) "Monte Carlo Methods in Financial Engineering" Ch. 3
See: Merton (1976) "Option pricing when underlying stock returns are discontinuous"
"""

from dataclasses import dataclass
from typing import Callable

import numpy as np

from path_synthesis.config.settings import SETTINGS, NumericalConfig
from path_synthesis.data.schemas import AssetClass, ModelType, SimulationParameters
from path_synthesis.simulation.variates import box_muller_normal


@dataclass(frozen=True)
class ProcessCoefficients:
    """
    Per-run constants of the selected process.

    Attributes
    ----------
    drift : float
        Effective drift μ_eff (after asset-class adjustment)
    volatility : float
        Diffusion volatility σ
    mean_reversion_speed : float
        κ
    long_term_mean : float
        θ
    jump_intensity : float
        λ, arrivals per year
    jump_mean : float
        Mean of the log jump size
    jump_volatility : float
        Volatility of the log jump size
    level_floor : float
        ε used by the square-root model
    """

    drift: float
    volatility: float
    mean_reversion_speed: float = 0.0
    long_term_mean: float = 0.0
    jump_intensity: float = 0.0
    jump_mean: float = 0.0
    jump_volatility: float = 0.0
    level_floor: float = 1e-4

    @classmethod
    def from_parameters(
        cls,
        params: SimulationParameters,
        numerical: NumericalConfig = SETTINGS.numerical,
    ) -> "ProcessCoefficients":
        """Build coefficients for a run, applying the effective drift."""
        return cls(
            drift=effective_drift(params),
            volatility=params.volatility,
            mean_reversion_speed=params.mean_reversion_speed,
            long_term_mean=params.long_term_mean,
            jump_intensity=params.jump_intensity,
            jump_mean=params.jump_mean,
            jump_volatility=params.jump_volatility,
            level_floor=numerical.level_floor,
        )


def effective_drift(params: SimulationParameters) -> float:
    """
    Asset-class adjusted drift.

    [T1] Equity:            μ - q
    [T1] FX:                μ + (r_d - r_f)   (covered interest parity)
    [T1] Commodity:         μ + (storage - convenience)
    [T1] Forward/Future:    r - q             (replaces μ)
    [T1] Unemployment rate: 0

    Parameters
    ----------
    params : SimulationParameters
        Run inputs

    Returns
    -------
    float
        μ_eff
    """
    asset_class = params.asset_class
    if asset_class == AssetClass.EQUITY:
        return params.drift - params.dividend_yield
    if asset_class == AssetClass.FX:
        return params.drift + (params.domestic_rate - params.foreign_rate)
    if asset_class == AssetClass.COMMODITY:
        return params.drift + (params.storage_cost - params.convenience_yield)
    if asset_class in (AssetClass.FORWARD, AssetClass.FUTURE):
        return params.risk_free_rate - params.dividend_yield
    if asset_class == AssetClass.UNEMPLOYMENT_RATE:
        return 0.0
    return params.drift


# =============================================================================
# Step Functions
# =============================================================================

def gbm_step(level: float, shock: float, dt: float, drift: float, volatility: float) -> float:
    """
    Exact log-normal step.

    Shared by the GBM/Merton models and the benchmark proxy.
    """
    return float(
        level * np.exp((drift - 0.5 * volatility**2) * dt + volatility * np.sqrt(dt) * shock)
    )


def _step_gbm(
    level: float,
    shock: float,
    dt: float,
    coeffs: ProcessCoefficients,
    rng: np.random.Generator,
) -> float:
    return gbm_step(level, shock, dt, coeffs.drift, coeffs.volatility)


def _step_merton_jump(
    level: float,
    shock: float,
    dt: float,
    coeffs: ProcessCoefficients,
    rng: np.random.Generator,
) -> float:
    jump_factor = 1.0
    if rng.random() < coeffs.jump_intensity * dt:
        jump_shock = box_muller_normal(rng)
        jump_factor = float(np.exp(coeffs.jump_mean + coeffs.jump_volatility * jump_shock))
    return gbm_step(level, shock, dt, coeffs.drift, coeffs.volatility) * jump_factor


def _step_vasicek(
    level: float,
    shock: float,
    dt: float,
    coeffs: ProcessCoefficients,
    rng: np.random.Generator,
) -> float:
    # No floor: Vasicek rates may go negative
    reversion = coeffs.mean_reversion_speed * (coeffs.long_term_mean - level) * dt
    diffusion = coeffs.volatility * np.sqrt(dt) * shock
    return float(level + reversion + diffusion)


def _step_cir(
    level: float,
    shock: float,
    dt: float,
    coeffs: ProcessCoefficients,
    rng: np.random.Generator,
) -> float:
    floored = max(level, coeffs.level_floor)
    reversion = coeffs.mean_reversion_speed * (coeffs.long_term_mean - floored) * dt
    diffusion = coeffs.volatility * np.sqrt(floored) * np.sqrt(dt) * shock
    # Euler overshoot below zero is truncated; the next step floors at ε again
    return max(0.0, float(floored + reversion + diffusion))


def _step_equilibrium(
    level: float,
    shock: float,
    dt: float,
    coeffs: ProcessCoefficients,
    rng: np.random.Generator,
) -> float:
    # Explicit drift on top of reversion distinguishes this from Vasicek
    reversion = coeffs.mean_reversion_speed * (coeffs.long_term_mean - level) * dt
    diffusion = coeffs.volatility * np.sqrt(dt) * shock
    return float(level + coeffs.drift * dt + reversion + diffusion)


StepFunction = Callable[
    [float, float, float, ProcessCoefficients, np.random.Generator], float
]

PROCESS_STEPS: dict[ModelType, StepFunction] = {
    ModelType.EQUITY_GBM: _step_gbm,
    ModelType.EQUITY_MERTON_JUMP: _step_merton_jump,
    ModelType.INTEREST_RATE_VASICEK: _step_vasicek,
    ModelType.INTEREST_RATE_CIR: _step_cir,
    ModelType.MACRO_INFLATION: _step_equilibrium,
    ModelType.OU_PROCESS: _step_equilibrium,
}


def evolve(
    model_type: ModelType,
    level: float,
    shock: float,
    dt: float,
    coeffs: ProcessCoefficients,
    rng: np.random.Generator,
) -> float:
    """
    Advance the underlying state by one step.

    Parameters
    ----------
    model_type : ModelType
        Process selector
    level : float
        Current underlying state
    shock : float
        Correlated standard normal shock
    dt : float
        Step size in years
    coeffs : ProcessCoefficients
        Per-run process constants
    rng : np.random.Generator
        Source for jump arrivals and jump sizes

    Returns
    -------
    float
        Next underlying state
    """
    return PROCESS_STEPS[model_type](level, shock, dt, coeffs, rng)
