"""
Centralized tolerance framework for path synthesis.

All tolerances are derived from precision requirements, not ad hoc tuning.

Tolerance Tiers:
    Tier 1 (Analytical): Machine-precision achievable, deterministic results
    Tier 2 (Reference): Published textbook values quoted to fixed decimals
    Tier 3 (Stochastic): CLT-derived, sample statistics of simulated shocks

References:
    [T1] Higham (2002) "Accuracy and Stability of Numerical Algorithms"
    [T1] Hull (2021) Ch. 15 - Options pricing precision requirements
    [T1] Glasserman (2003) Ch. 3-4 - Monte Carlo error bounds
"""

import numpy as np
from typing import Final

# =============================================================================
# Tier 1: Analytical Tolerances (Deterministic)
# =============================================================================
# For closed-form results where machine precision is achievable.

#: No-arbitrage bounds and exact identities (flat paths, exact coupling)
#: Tolerance: ~1e-10 allows for float64 accumulation errors
ANTI_PATTERN_TOLERANCE: Final[float] = 1e-10

#: Put-call parity: C - P = S - K*exp(-rT)
#: scipy's normal CDF is accurate to ~1e-15, so parity holds far below 1e-8
PUT_CALL_PARITY_TOLERANCE: Final[float] = 1e-8

#: Greeks identities (delta relationship, gamma/vega equality)
#: Tolerance: sqrt(machine_epsilon) ≈ 1.5e-8
GREEKS_NUMERICAL_TOLERANCE: Final[float] = 1e-8

#: Finite-difference check of analytic Greeks (central difference, h ~ 1e-4)
FINITE_DIFFERENCE_TOLERANCE: Final[float] = 1e-4


# =============================================================================
# Tier 2: Reference Tolerances
# =============================================================================

#: Reference prices quoted to 4 decimal places (e.g. 10.4506)
REFERENCE_PRICE_TOLERANCE: Final[float] = 1e-4

#: Hull textbook examples quoted to 2 decimal places; allow 0.02 absolute
HULL_EXAMPLE_TOLERANCE: Final[float] = 0.02


# =============================================================================
# Tier 3: Stochastic Tolerances (CLT-Derived)
# =============================================================================


def sample_tolerance(n_samples: int, sigma: float = 1.0, confidence: float = 4.0) -> float:
    """
    Calculate CLT-derived tolerance for a sample mean.

    [T1] Standard error of a sample mean is σ/√N.
    4σ keeps the false-failure rate of seeded checks negligible.

    Parameters
    ----------
    n_samples : int
        Number of draws
    sigma : float
        Standard deviation of a single draw (default 1.0 for standard normals)
    confidence : float
        Number of standard deviations (default 4)

    Returns
    -------
    float
        Tolerance for sample statistic vs theoretical value

    Examples
    --------
    >>> round(sample_tolerance(100_000), 4)
    0.0126
    """
    if n_samples <= 0:
        raise ValueError(f"CRITICAL: n_samples must be > 0, got {n_samples}")
    return confidence * sigma / np.sqrt(n_samples)


#: Sample moments of 100,000 standard normal draws: 4 / sqrt(100000) ≈ 0.0126
SAMPLE_100K_TOLERANCE: Final[float] = 0.015

#: Empirical correlation of 100,000 coupled shocks
CORRELATION_100K_TOLERANCE: Final[float] = 0.015


# =============================================================================
# Tolerance Registry (For Dynamic Access)
# =============================================================================

TOLERANCE_REGISTRY: dict[str, float] = {
    # Tier 1: Analytical
    "anti_pattern": ANTI_PATTERN_TOLERANCE,
    "put_call_parity": PUT_CALL_PARITY_TOLERANCE,
    "greeks_numerical": GREEKS_NUMERICAL_TOLERANCE,
    "finite_difference": FINITE_DIFFERENCE_TOLERANCE,
    # Tier 2: Reference
    "reference_price": REFERENCE_PRICE_TOLERANCE,
    "hull_example": HULL_EXAMPLE_TOLERANCE,
    # Tier 3: Stochastic
    "sample_100k": SAMPLE_100K_TOLERANCE,
    "correlation_100k": CORRELATION_100K_TOLERANCE,
}


def get_tolerance(name: str) -> float:
    """
    Get tolerance by name from registry.

    Parameters
    ----------
    name : str
        Tolerance name (see TOLERANCE_REGISTRY keys)

    Returns
    -------
    float
        Tolerance value

    Raises
    ------
    KeyError
        If tolerance name not found
    """
    if name not in TOLERANCE_REGISTRY:
        available = ", ".join(sorted(TOLERANCE_REGISTRY.keys()))
        raise KeyError(f"Unknown tolerance '{name}'. Available: {available}")
    return TOLERANCE_REGISTRY[name]
