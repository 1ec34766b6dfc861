"""
Closed-form pricing implementations.

Provides:
- Black-Scholes analytical pricing with Greeks
- Black's model for payer/receiver swaptions (5-year annuity approximation)
"""

from path_synthesis.options.pricing.black_scholes import (
    BSResult,
    black_scholes_call,
    black_scholes_greeks,
    black_scholes_price,
    black_scholes_put,
    put_call_parity_check,
)
from path_synthesis.options.pricing.black_swaption import (
    SwaptionResult,
    annuity_factor,
    black_swaption_greeks,
)

__all__ = [
    # Black-Scholes
    "BSResult",
    "black_scholes_call",
    "black_scholes_greeks",
    "black_scholes_price",
    "black_scholes_put",
    "put_call_parity_check",
    # Black swaption
    "SwaptionResult",
    "annuity_factor",
    "black_swaption_greeks",
]
