"""
Analytic derivative pricing.

Provides:
- OptionType / SwaptionType enumerations
- Black-Scholes price and Greeks
- Black's model for swaptions
"""

from path_synthesis.options.base import OptionType, SwaptionType

__all__ = ["OptionType", "SwaptionType"]
