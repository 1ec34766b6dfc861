"""
Greeks-based stress testing of a priced path.

[T2] Approximates the repricing of the final point of an option or swaption
path under a single shock with a Taylor expansion in its own Greeks:

    asset:  ΔP ≈ Δ·dS + ½·Γ·dS²,  dS = S·m/100
    vol:    ΔP ≈ vega·m/100        (m in volatility points)
    time:   ΔP ≈ θ·m/365           (m in calendar days)
    rates:  ΔP ≈ ρ·m/100           (m in rate points)

The stressed price is floored at 0. Paths without Greeks are unaffected.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from path_synthesis.data.schemas import Greeks, SimulationResult

logger = logging.getLogger(__name__)


# =============================================================================
# Dataclasses
# =============================================================================

class ShockType(Enum):
    """Risk factor being shocked."""

    ASSET = "asset"
    VOL = "vol"
    TIME = "time"
    RATES = "rates"


@dataclass(frozen=True)
class StressScenario:
    """
    Preset shock magnitudes, one per risk factor.

    Attributes
    ----------
    name : str
        Identifier
    label : str
        Display name
    asset : float
        Underlying move in percent
    vol : float
        Volatility move in percentage points
    time : float
        Calendar days elapsed
    rates : float
        Rate move in percentage points
    """

    name: str
    label: str
    asset: float = 0.0
    vol: float = 0.0
    time: float = 0.0
    rates: float = 0.0

    def __post_init__(self) -> None:
        if self.time < 0:
            raise ValueError(f"CRITICAL: time shock must be >= 0 days, got {self.time}")

    def magnitude(self, shock_type: ShockType) -> float:
        """Magnitude of this scenario for one risk factor."""
        return getattr(self, shock_type.value)


@dataclass(frozen=True)
class ShockImpact:
    """
    Approximate repricing under one shock.

    Attributes
    ----------
    pnl : float
        Taylor-approximated price change
    new_price : float
        max(0, price + pnl)
    percent : float
        pnl as a percentage of the unshocked price (0 when the price is 0)
    """

    pnl: float
    new_price: float
    percent: float


STRESS_PRESETS: tuple[StressScenario, ...] = (
    StressScenario("normal", "Flat"),
    StressScenario("black_monday", "Market Crash", asset=-20.0, vol=50.0, time=1.0, rates=-5.0),
    StressScenario("bull_run", "Bull Run", asset=15.0, vol=-10.0, time=5.0, rates=2.0),
    StressScenario("time_decay", "Last Week", time=7.0),
)


# =============================================================================
# Shock Calculation
# =============================================================================

def greeks_shock_pnl(
    greeks: Greeks,
    underlying: float,
    shock_type: ShockType,
    magnitude: float,
) -> float:
    """
    Taylor-approximated price change for one shock.

    Parameters
    ----------
    greeks : Greeks
        Unscaled sensitivities (vega per unit vol, theta per year, rho per unit rate)
    underlying : float
        Underlying level the asset shock is a percentage of
    shock_type : ShockType
        Risk factor
    magnitude : float
        Shock size in the factor's unit (see module docstring)

    Returns
    -------
    float
        Approximate price change
    """
    if shock_type == ShockType.ASSET:
        d_s = underlying * magnitude / 100.0
        return greeks.delta * d_s + 0.5 * greeks.gamma * d_s**2
    if shock_type == ShockType.VOL:
        return greeks.vega * magnitude / 100.0
    if shock_type == ShockType.TIME:
        return greeks.theta * magnitude / 365.0
    return greeks.rho * magnitude / 100.0


def shock_impact(
    result: SimulationResult,
    shock_type: ShockType,
    magnitude: float,
) -> ShockImpact:
    """
    Stress the final point of a synthesized path.

    Parameters
    ----------
    result : SimulationResult
        Synthesized path
    shock_type : ShockType
        Risk factor
    magnitude : float
        Shock size

    Returns
    -------
    ShockImpact
        Zero impact when the final point carries no Greeks
    """
    last = result.points[-1]
    if not result.parameters.asset_class.is_derivative or last.greeks is None:
        return ShockImpact(pnl=0.0, new_price=last.value, percent=0.0)

    underlying = last.underlying or result.parameters.initial_value
    pnl = float(greeks_shock_pnl(last.greeks, underlying, shock_type, magnitude))
    percent = pnl / last.value * 100.0 if last.value != 0 else 0.0

    logger.debug(
        f"Stress {shock_type.value} {magnitude:+.2f}: price {last.value:.6f} "
        f"-> {max(0.0, last.value + pnl):.6f} (pnl {pnl:+.6f})"
    )

    return ShockImpact(pnl=pnl, new_price=max(0.0, last.value + pnl), percent=percent)


def run_stress_scenario(
    result: SimulationResult,
    scenario: StressScenario,
) -> dict[ShockType, ShockImpact]:
    """
    Apply each factor of a preset scenario separately.

    Returns
    -------
    dict[ShockType, ShockImpact]
        One impact per risk factor, shocks not combined
    """
    return {
        shock_type: shock_impact(result, shock_type, scenario.magnitude(shock_type))
        for shock_type in ShockType
    }
