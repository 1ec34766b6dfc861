"""
path-synthesis: Synthetic financial and macroeconomic path generation.

Generates one discretized path per call under a chosen stochastic process
and asset class, optionally correlated to a synthetic market benchmark,
with closed-form price and Greeks at every step for options and swaptions.

Quick Start
-----------
>>> from path_synthesis import AssetClass, ModelType, build_parameters, synthesize_path
>>> params = build_parameters(ModelType.EQUITY_GBM, AssetClass.EQUITY, 100.0, n_steps=252)
>>> result = synthesize_path(params, seed=42)
>>> result.summary.mean

Version: 0.1.0
"""

__version__ = "0.1.0"

# =============================================================================
# Data Model
# =============================================================================
from path_synthesis.data.schemas import (
    AssetClass,
    CorrelationFactors,
    Greeks,
    ModelType,
    PathPoint,
    PathSummary,
    SimulationParameters,
    SimulationResult,
)

# =============================================================================
# Engine
# =============================================================================
from path_synthesis.synthesis.engine import SynthesisEngine, synthesize_path
from path_synthesis.synthesis.export import EXPORT_COLUMNS, to_csv_text, to_frame

# =============================================================================
# Options Pricing
# =============================================================================
from path_synthesis.options.base import OptionType, SwaptionType
from path_synthesis.options.pricing import (
    BSResult,
    SwaptionResult,
    black_scholes_greeks,
    black_swaption_greeks,
)

# =============================================================================
# Configuration
# =============================================================================
from path_synthesis.config.defaults import build_parameters, parameters_from_mapping
from path_synthesis.config.settings import SETTINGS

__all__ = [
    # Version
    "__version__",
    # Data model
    "AssetClass",
    "CorrelationFactors",
    "Greeks",
    "ModelType",
    "PathPoint",
    "PathSummary",
    "SimulationParameters",
    "SimulationResult",
    # Engine
    "SynthesisEngine",
    "synthesize_path",
    "EXPORT_COLUMNS",
    "to_csv_text",
    "to_frame",
    # Options
    "OptionType",
    "SwaptionType",
    "BSResult",
    "SwaptionResult",
    "black_scholes_greeks",
    "black_swaption_greeks",
    # Config
    "build_parameters",
    "parameters_from_mapping",
    "SETTINGS",
]
