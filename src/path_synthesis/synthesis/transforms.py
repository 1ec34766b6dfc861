"""
Asset-class display transforms.

Each transform maps the raw underlying state at one step to the value shown
for that step, plus optional secondary, fundamental and Greek fields. The
transforms never feed back into the underlying state.
"""

from dataclasses import dataclass
from typing import Callable

import numpy as np

from path_synthesis.config.settings import InstrumentConfig, NumericalConfig
from path_synthesis.data.schemas import AssetClass, Greeks, SimulationParameters
from path_synthesis.options.base import OptionType, SwaptionType
from path_synthesis.options.pricing.black_scholes import black_scholes_greeks
from path_synthesis.options.pricing.black_swaption import black_swaption_greeks


@dataclass(frozen=True)
class StepContext:
    """
    Inputs of a display transform at one step.

    Attributes
    ----------
    index : int
        Step index
    level : float
        Raw underlying state
    seasonal : float
        Seasonal shift for this step (0 for non-seasonal classes)
    time_to_expiry : float
        Floored remaining time to expiry, in years
    params : SimulationParameters
        Run inputs
    instrument : InstrumentConfig
        Instrument conventions
    numerical : NumericalConfig
        Numerical floors
    """

    index: int
    level: float
    seasonal: float
    time_to_expiry: float
    params: SimulationParameters
    instrument: InstrumentConfig
    numerical: NumericalConfig


@dataclass(frozen=True)
class DisplayFields:
    """Displayed value and optional companion fields of one step."""

    value: float
    secondary: float | None = None
    pe_ratio: float | None = None
    expected_earnings: float | None = None
    greeks: Greeks | None = None


def seasonal_shift(
    index: int,
    params: SimulationParameters,
    trading_days_per_year: int,
) -> float:
    """
    Deterministic annual cycle added to displayed values.

    [T1] shift = sin(2π·i / 252) · amplitude, seasonal classes only
    """
    if not params.asset_class.is_seasonal or params.seasonal_amplitude <= 0:
        return 0.0
    return float(np.sin(2 * np.pi * index / trading_days_per_year) * params.seasonal_amplitude)


def time_to_expiry_at(index: int, params: SimulationParameters, numerical: NumericalConfig) -> float:
    """Remaining expiry after index calendar days, floored."""
    remaining = params.expiry_time - index / numerical.calendar_days_per_year
    return max(numerical.expiry_floor, remaining)


def strike_rate(strike: float, instrument: InstrumentConfig) -> float:
    """Convert a swap/swaption strike quote to a rate (30 -> 0.03)."""
    return strike / instrument.strike_rate_scale or instrument.default_strike_rate


def base_earnings(params: SimulationParameters) -> float:
    """Earnings at step 0; derived from the P/E ratio when not given."""
    if params.expected_earnings:
        return params.expected_earnings
    if params.pe_ratio > 0:
        return params.initial_value / params.pe_ratio
    return 0.0


# =============================================================================
# Transforms
# =============================================================================

def _display_level(ctx: StepContext) -> DisplayFields:
    return DisplayFields(value=ctx.level + ctx.seasonal)


def _display_fixed_income(ctx: StepContext) -> DisplayFields:
    p = ctx.params
    return DisplayFields(
        value=p.risk_free_rate + p.credit_spread + p.cds_spread + ctx.level,
        secondary=p.cds_spread,
    )


def _display_option(ctx: StepContext) -> DisplayFields:
    p = ctx.params
    result = black_scholes_greeks(
        ctx.level,
        p.strike,
        p.risk_free_rate,
        p.pricing_volatility,
        ctx.time_to_expiry,
        OptionType.from_flag(p.is_call),
        expiry_floor=ctx.numerical.expiry_floor,
    )
    return DisplayFields(value=result.price, secondary=p.strike, greeks=result.greeks)


def _display_forward(ctx: StepContext) -> DisplayFields:
    p = ctx.params
    carry = (p.risk_free_rate - p.dividend_yield) * ctx.time_to_expiry
    return DisplayFields(value=float(ctx.level * np.exp(carry)), secondary=ctx.level)


def _display_swap(ctx: StepContext) -> DisplayFields:
    p = ctx.params
    fixed_rate = strike_rate(p.strike, ctx.instrument)
    return DisplayFields(
        value=(ctx.level - fixed_rate) * ctx.instrument.basis_points,
        secondary=p.strike,
    )


def _display_swaption(ctx: StepContext) -> DisplayFields:
    p = ctx.params
    result = black_swaption_greeks(
        ctx.level,
        strike_rate(p.strike, ctx.instrument),
        ctx.time_to_expiry,
        p.risk_free_rate,
        p.pricing_volatility,
        SwaptionType.from_flag(p.is_call),
        expiry_floor=ctx.numerical.expiry_floor,
        tenor_years=ctx.instrument.swap_tenor_years,
    )
    return DisplayFields(value=result.price, secondary=p.strike, greeks=result.greeks)


def _display_unemployment(ctx: StepContext) -> DisplayFields:
    return DisplayFields(value=max(ctx.instrument.unemployment_floor, ctx.level + ctx.seasonal))


def _display_equity(ctx: StepContext) -> DisplayFields:
    value = ctx.level + ctx.seasonal
    years = ctx.index / ctx.numerical.trading_days_per_year
    earnings = float(base_earnings(ctx.params) * np.exp(ctx.instrument.earnings_growth * years))
    return DisplayFields(
        value=value,
        pe_ratio=value / earnings if earnings else None,
        expected_earnings=earnings,
    )


DisplayTransform = Callable[[StepContext], DisplayFields]

DISPLAY_TRANSFORMS: dict[AssetClass, DisplayTransform] = {
    AssetClass.EQUITY: _display_equity,
    AssetClass.FIXED_INCOME: _display_fixed_income,
    AssetClass.FX: _display_level,
    AssetClass.COMMODITY: _display_level,
    AssetClass.FORWARD: _display_forward,
    AssetClass.FUTURE: _display_forward,
    AssetClass.OPTION: _display_option,
    AssetClass.SWAP: _display_swap,
    AssetClass.SWAPTION: _display_swaption,
    AssetClass.CENTRAL_BANK_RATE: _display_level,
    AssetClass.INFLATION_RATE: _display_level,
    AssetClass.UNEMPLOYMENT_RATE: _display_unemployment,
    AssetClass.TOTAL_PRODUCTIVITY: _display_level,
    AssetClass.GDP_GROWTH: _display_level,
}


def display_fields(ctx: StepContext) -> DisplayFields:
    """Apply the transform registered for the run's asset class."""
    return DISPLAY_TRANSFORMS[ctx.params.asset_class](ctx)
