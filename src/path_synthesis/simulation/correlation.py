"""
One-factor Gaussian coupling of market and idiosyncratic shocks.

[T1] Za = ρ·Zm + sqrt(1 - ρ²)·Zi

For independent standard normals Zm, Zi, Za is standard normal with
Corr(Za, Zm) = ρ.
"""

import numpy as np

from path_synthesis.data.schemas import CorrelationFactors
from path_synthesis.simulation.variates import box_muller_normal


def aggregate_correlation(factors: CorrelationFactors) -> float:
    """
    Collapse named factor correlations into one coefficient.

    The coefficients are summed and the sum clamped to [-1, 1].

    Parameters
    ----------
    factors : CorrelationFactors
        Named correlations to the market factor

    Returns
    -------
    float
        Aggregate correlation ρ in [-1, 1]
    """
    total = sum(factors.as_dict().values())
    return float(min(1.0, max(-1.0, total)))


def couple_shocks(rho: float, market_shock: float, idiosyncratic_shock: float) -> float:
    """
    Combine a market and an idiosyncratic shock into one correlated shock.

    Parameters
    ----------
    rho : float
        Aggregate correlation, already clamped to [-1, 1]
    market_shock : float
        Zm ~ N(0, 1)
    idiosyncratic_shock : float
        Zi ~ N(0, 1), independent of Zm

    Returns
    -------
    float
        Za ~ N(0, 1) with correlation ρ to Zm
    """
    return float(rho * market_shock + np.sqrt(1.0 - rho * rho) * idiosyncratic_shock)


def validate_correlation_coupling(
    rho: float,
    n_samples: int = 100_000,
    seed: int = 42,
) -> dict:
    """
    Validate coupled shocks against their theoretical moments.

    [T1] E[Za] = 0, Var[Za] = 1, Corr(Za, Zm) = ρ

    Parameters
    ----------
    rho : float
        Aggregate correlation in [-1, 1]
    n_samples : int, default 100000
        Number of coupled draws
    seed : int, default 42
        Random seed

    Returns
    -------
    dict
        Theoretical vs sample values
    """
    if not -1.0 <= rho <= 1.0:
        raise ValueError(f"CRITICAL: rho must be in [-1, 1], got {rho}")
    if n_samples < 2:
        raise ValueError(f"CRITICAL: n_samples must be >= 2, got {n_samples}")

    rng = np.random.default_rng(seed)
    market = np.empty(n_samples)
    coupled = np.empty(n_samples)
    for i in range(n_samples):
        market[i] = box_muller_normal(rng)
        coupled[i] = couple_shocks(rho, market[i], box_muller_normal(rng))

    # Correlation is undefined when the coupled series has no variance
    if np.std(coupled) == 0 or np.std(market) == 0:
        sample_corr = float("nan")
    else:
        sample_corr = float(np.corrcoef(market, coupled)[0, 1])

    return {
        "n_samples": n_samples,
        "theoretical_correlation": rho,
        "sample_correlation": sample_corr,
        "correlation_error": abs(sample_corr - rho),
        "sample_mean": float(coupled.mean()),
        "sample_variance": float(coupled.var()),
        "variance_error": abs(float(coupled.var()) - 1.0),
    }
