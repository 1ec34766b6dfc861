"""
Black-Scholes option pricing with Greeks.

Implements analytical pricing for European options on a non-dividend
underlying. Time-to-expiry is floored at a small epsilon; at the floor the
option is treated as expired and priced at intrinsic value.

Inputs are not re-validated here: strike and volatility must be positive,
which SimulationParameters enforces for option runs. A non-positive spot
(reachable under the mean-reverting models) is priced at its limit: the
call is worthless and the put is worth K·e^(-rT) - S.

References
----------
[T1] Black, F., & Scholes, M. (1973). The pricing of options and corporate liabilities.
[T1] Hull, J. C. (2018). Options, Futures, and Other Derivatives (10th ed.).
"""

from dataclasses import dataclass

import numpy as np
from scipy import stats

from path_synthesis.config.settings import SETTINGS
from path_synthesis.config.tolerances import PUT_CALL_PARITY_TOLERANCE
from path_synthesis.data.schemas import Greeks
from path_synthesis.options.base import OptionType

EXPIRY_FLOOR = SETTINGS.numerical.expiry_floor


@dataclass(frozen=True)
class BSResult:
    """
    Immutable Black-Scholes pricing result.

    Attributes
    ----------
    price : float
        Option price
    delta : float
        Delta (dV/dS)
    gamma : float
        Gamma (d²V/dS²)
    vega : float
        Vega (dV/dσ) - per unit vol
    theta : float
        Theta (dV/dt) - per year
    rho : float
        Rho (dV/dr) - per unit rate
    d1 : float
        d1 parameter
    d2 : float
        d2 parameter
    """

    price: float
    delta: float
    gamma: float
    vega: float
    theta: float
    rho: float
    d1: float
    d2: float

    @property
    def greeks(self) -> Greeks:
        """Sensitivities without price and d1/d2."""
        return Greeks(
            delta=self.delta,
            gamma=self.gamma,
            vega=self.vega,
            theta=self.theta,
            rho=self.rho,
        )


def _calculate_d1_d2(
    spot: float,
    strike: float,
    rate: float,
    volatility: float,
    time_to_expiry: float,
) -> tuple[float, float]:
    """
    Calculate d1 and d2 parameters.

    [T1] d1 = (ln(S/K) + (r + σ²/2)T) / (σ√T)
    [T1] d2 = d1 - σ√T
    """
    vol_sqrt_t = volatility * np.sqrt(time_to_expiry)

    d1 = (np.log(spot / strike) + (rate + 0.5 * volatility**2) * time_to_expiry) / vol_sqrt_t
    d2 = d1 - vol_sqrt_t

    return d1, d2


def _expired_result(spot: float, strike: float, option_type: OptionType) -> BSResult:
    """Intrinsic value with step-function delta and zero higher Greeks."""
    if option_type == OptionType.CALL:
        price = max(spot - strike, 0.0)
        delta = 1.0 if spot > strike else 0.0
    else:
        price = max(strike - spot, 0.0)
        delta = -1.0 if spot < strike else 0.0

    return BSResult(
        price=float(price),
        delta=delta,
        gamma=0.0,
        vega=0.0,
        theta=0.0,
        rho=0.0,
        d1=float("inf") if spot > strike else float("-inf"),
        d2=float("inf") if spot > strike else float("-inf"),
    )


def _non_positive_spot_result(
    spot: float,
    strike: float,
    rate: float,
    time_to_expiry: float,
    option_type: OptionType,
) -> BSResult:
    """Limit as S -> 0+: d1, d2 -> -inf, so N(d1) = N(d2) = 0."""
    if option_type == OptionType.CALL:
        return BSResult(
            price=0.0,
            delta=0.0,
            gamma=0.0,
            vega=0.0,
            theta=0.0,
            rho=0.0,
            d1=float("-inf"),
            d2=float("-inf"),
        )

    exp_rate = np.exp(-rate * time_to_expiry)
    return BSResult(
        price=float(strike * exp_rate - spot),
        delta=-1.0,
        gamma=0.0,
        vega=0.0,
        theta=float(rate * strike * exp_rate),
        rho=float(-strike * time_to_expiry * exp_rate),
        d1=float("-inf"),
        d2=float("-inf"),
    )


def black_scholes_greeks(
    spot: float,
    strike: float,
    rate: float,
    volatility: float,
    time_to_expiry: float,
    option_type: OptionType,
    expiry_floor: float = EXPIRY_FLOOR,
) -> BSResult:
    """
    Calculate Black-Scholes price and all Greeks.

    [T1] Delta (call) = N(d1),  Delta (put) = N(d1) - 1
    [T1] Gamma = n(d1) / (S σ √T)
    [T1] Vega = S n(d1) √T
    [T1] Theta (call) = -S n(d1) σ / (2√T) - r K e^(-rT) N(d2)
    [T1] Theta (put)  = -S n(d1) σ / (2√T) + r K e^(-rT) N(-d2)
    [T1] Rho (call) = K T e^(-rT) N(d2),  Rho (put) = -K T e^(-rT) N(-d2)

    Parameters
    ----------
    spot : float
        Current spot price
    strike : float
        Strike price
    rate : float
        Risk-free rate (decimal)
    volatility : float
        Volatility (decimal)
    time_to_expiry : float
        Time to expiry (years), floored at expiry_floor
    option_type : OptionType
        Call or put
    expiry_floor : float
        Smallest time-to-expiry; at the floor the option is expired

    Returns
    -------
    BSResult
        Price and all Greeks

    Examples
    --------
    >>> result = black_scholes_greeks(100, 100, 0.05, 0.20, 1.0, OptionType.CALL)
    >>> round(result.price, 4)
    10.4506
    """
    time_to_expiry = max(time_to_expiry, expiry_floor)
    if time_to_expiry <= expiry_floor:
        return _expired_result(spot, strike, option_type)
    if spot <= 0:
        return _non_positive_spot_result(spot, strike, rate, time_to_expiry, option_type)

    d1, d2 = _calculate_d1_d2(spot, strike, rate, volatility, time_to_expiry)

    sqrt_t = np.sqrt(time_to_expiry)
    exp_rate = np.exp(-rate * time_to_expiry)

    # Standard normal PDF and CDF values
    n_d1 = stats.norm.pdf(d1)
    N_d1 = stats.norm.cdf(d1)
    N_d2 = stats.norm.cdf(d2)
    N_neg_d1 = stats.norm.cdf(-d1)
    N_neg_d2 = stats.norm.cdf(-d2)

    # Gamma and vega are the same for call and put
    gamma = n_d1 / (spot * volatility * sqrt_t)
    vega = spot * n_d1 * sqrt_t
    decay = -spot * n_d1 * volatility / (2 * sqrt_t)

    if option_type == OptionType.CALL:
        price = spot * N_d1 - strike * exp_rate * N_d2
        delta = N_d1
        theta = decay - rate * strike * exp_rate * N_d2
        rho = strike * time_to_expiry * exp_rate * N_d2
    else:
        price = strike * exp_rate * N_neg_d2 - spot * N_neg_d1
        delta = N_d1 - 1.0
        theta = decay + rate * strike * exp_rate * N_neg_d2
        rho = -strike * time_to_expiry * exp_rate * N_neg_d2

    return BSResult(
        price=float(price),
        delta=float(delta),
        gamma=float(gamma),
        vega=float(vega),
        theta=float(theta),
        rho=float(rho),
        d1=float(d1),
        d2=float(d2),
    )


def black_scholes_call(
    spot: float,
    strike: float,
    rate: float,
    volatility: float,
    time_to_expiry: float,
) -> float:
    """
    Price European call option using Black-Scholes.

    [T1] C = S*N(d1) - K*e^(-rT)*N(d2)
    """
    return black_scholes_greeks(
        spot, strike, rate, volatility, time_to_expiry, OptionType.CALL
    ).price


def black_scholes_put(
    spot: float,
    strike: float,
    rate: float,
    volatility: float,
    time_to_expiry: float,
) -> float:
    """
    Price European put option using Black-Scholes.

    [T1] P = K*e^(-rT)*N(-d2) - S*N(-d1)
    """
    return black_scholes_greeks(
        spot, strike, rate, volatility, time_to_expiry, OptionType.PUT
    ).price


def black_scholes_price(
    spot: float,
    strike: float,
    rate: float,
    volatility: float,
    time_to_expiry: float,
    option_type: OptionType,
) -> float:
    """Price European option using Black-Scholes."""
    if option_type == OptionType.CALL:
        return black_scholes_call(spot, strike, rate, volatility, time_to_expiry)
    else:
        return black_scholes_put(spot, strike, rate, volatility, time_to_expiry)


def put_call_parity_check(
    call_price: float,
    put_price: float,
    spot: float,
    strike: float,
    rate: float,
    time_to_expiry: float,
    tolerance: float = PUT_CALL_PARITY_TOLERANCE,
) -> tuple[bool, float]:
    """
    Verify put-call parity holds.

    [T1] Put-Call Parity: C - P = S - K*e^(-rT)

    Parameters
    ----------
    call_price : float
        Call option price
    put_price : float
        Put option price
    spot : float
        Spot price
    strike : float
        Strike price
    rate : float
        Risk-free rate
    time_to_expiry : float
        Time to expiry
    tolerance : float, default 1e-8
        Acceptable error

    Returns
    -------
    tuple[bool, float]
        (parity_holds, error)
    """
    actual_diff = call_price - put_price
    expected_diff = spot - strike * np.exp(-rate * time_to_expiry)

    error = float(abs(actual_diff - expected_diff))
    parity_holds = error < tolerance

    return parity_holds, error
