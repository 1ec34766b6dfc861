"""
Black's model for European swaptions.

Prices a payer or receiver swaption on a forward swap rate F with strike
rate K. Two documented approximations are kept deliberately:

- The annuity is the flat-rate factor (1 - e^(-r·n)) / r for a fixed
  n = 5-year underlying swap, not a full annuity curve.
- Rho is the duration proxy -T·price, not a recomputed rate sensitivity.

Delta and gamma are with respect to the forward rate and are not scaled by
the annuity.

A non-positive forward rate (Vasicek and OU paths may cross zero) is priced
at the lognormal limit F -> 0+: the payer is worthless and the receiver is
worth A·e^(-rT)·(K - F).

References
----------
[T1] Black, F. (1976). The pricing of commodity contracts.
[T1] Hull, J. C. (2018). Options, Futures, and Other Derivatives (10th ed.) Ch. 29.
"""

from dataclasses import dataclass

import numpy as np
from scipy import stats

from path_synthesis.config.settings import SETTINGS
from path_synthesis.data.schemas import Greeks
from path_synthesis.options.base import SwaptionType

EXPIRY_FLOOR = SETTINGS.numerical.expiry_floor
SWAP_TENOR_YEARS = SETTINGS.instrument.swap_tenor_years


@dataclass(frozen=True)
class SwaptionResult:
    """
    Immutable Black swaption pricing result.

    Attributes
    ----------
    price : float
        Swaption price per unit notional
    delta : float
        dV/dF, discounted, not annuity-scaled
    gamma : float
        d²V/dF², discounted, not annuity-scaled
    vega : float
        dV/dσ per unit vol
    theta : float
        Time decay per year (diffusion term only)
    rho : float
        Duration proxy -T·price
    d1 : float
        d1 parameter
    d2 : float
        d2 parameter
    annuity : float
        Annuity factor used for scaling
    """

    price: float
    delta: float
    gamma: float
    vega: float
    theta: float
    rho: float
    d1: float
    d2: float
    annuity: float

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


def annuity_factor(rate: float, tenor_years: float = SWAP_TENOR_YEARS) -> float:
    """
    Flat-rate annuity factor of the underlying swap.

    [T1] A = (1 - e^(-r·n)) / r, with A → n as r → 0

    Parameters
    ----------
    rate : float
        Flat discount rate
    tenor_years : float, default 5.0
        Swap tenor n

    Returns
    -------
    float
        Annuity factor
    """
    if abs(rate) < 1e-12:
        return float(tenor_years)
    return float((1.0 - np.exp(-rate * tenor_years)) / rate)


def black_swaption_greeks(
    forward_rate: float,
    strike_rate: float,
    time_to_expiry: float,
    rate: float,
    volatility: float,
    swaption_type: SwaptionType,
    expiry_floor: float = EXPIRY_FLOOR,
    tenor_years: float = SWAP_TENOR_YEARS,
) -> SwaptionResult:
    """
    Price a European swaption with Black's model.

    [T1] d1 = (ln(F/K) + σ²T/2) / (σ√T),  d2 = d1 - σ√T
    [T1] Payer    = A e^(-rT) [F N(d1) - K N(d2)]
    [T1] Receiver = A e^(-rT) [K N(-d2) - F N(-d1)]

    Parameters
    ----------
    forward_rate : float
        Forward swap rate F (decimal)
    strike_rate : float
        Strike swap rate K (decimal)
    time_to_expiry : float
        Option expiry in years, floored at expiry_floor
    rate : float
        Discount rate
    volatility : float
        Lognormal forward-rate volatility
    swaption_type : SwaptionType
        Payer or receiver
    expiry_floor : float
        Smallest time-to-expiry; at the floor the swaption is expired
    tenor_years : float, default 5.0
        Underlying swap tenor for the annuity approximation

    Returns
    -------
    SwaptionResult
        Price and Greeks
    """
    annuity = annuity_factor(rate, tenor_years)

    time_to_expiry = max(time_to_expiry, expiry_floor)
    if time_to_expiry <= expiry_floor:
        if swaption_type == SwaptionType.PAYER:
            price = max(forward_rate - strike_rate, 0.0)
            delta = 1.0 if forward_rate > strike_rate else 0.0
        else:
            price = max(strike_rate - forward_rate, 0.0)
            delta = -1.0 if forward_rate < strike_rate else 0.0
        return SwaptionResult(
            price=float(price),
            delta=delta,
            gamma=0.0,
            vega=0.0,
            theta=0.0,
            rho=0.0,
            d1=float("inf") if forward_rate > strike_rate else float("-inf"),
            d2=float("inf") if forward_rate > strike_rate else float("-inf"),
            annuity=annuity,
        )

    if forward_rate <= 0:
        discount = np.exp(-rate * time_to_expiry)
        if swaption_type == SwaptionType.PAYER:
            price, delta = 0.0, 0.0
        else:
            price = annuity * discount * (strike_rate - forward_rate)
            delta = -discount
        return SwaptionResult(
            price=float(price),
            delta=float(delta),
            gamma=0.0,
            vega=0.0,
            theta=0.0,
            rho=float(-time_to_expiry * price),
            d1=float("-inf"),
            d2=float("-inf"),
            annuity=annuity,
        )

    sqrt_t = np.sqrt(time_to_expiry)
    vol_sqrt_t = volatility * sqrt_t
    d1 = (np.log(forward_rate / strike_rate) + 0.5 * volatility**2 * time_to_expiry) / vol_sqrt_t
    d2 = d1 - vol_sqrt_t

    discount = np.exp(-rate * time_to_expiry)
    scale = annuity * discount
    n_d1 = stats.norm.pdf(d1)

    if swaption_type == SwaptionType.PAYER:
        price = scale * (
            forward_rate * stats.norm.cdf(d1) - strike_rate * stats.norm.cdf(d2)
        )
        delta = discount * stats.norm.cdf(d1)
    else:
        price = scale * (
            strike_rate * stats.norm.cdf(-d2) - forward_rate * stats.norm.cdf(-d1)
        )
        delta = -discount * stats.norm.cdf(-d1)

    gamma = discount * n_d1 / (forward_rate * vol_sqrt_t)
    vega = scale * forward_rate * n_d1 * sqrt_t
    theta = -scale * forward_rate * n_d1 * volatility / (2 * sqrt_t)
    # Duration proxy, not a full rate sensitivity
    rho = -time_to_expiry * price

    return SwaptionResult(
        price=float(price),
        delta=float(delta),
        gamma=float(gamma),
        vega=float(vega),
        theta=float(theta),
        rho=float(rho),
        d1=float(d1),
        d2=float(d2),
        annuity=annuity,
    )
