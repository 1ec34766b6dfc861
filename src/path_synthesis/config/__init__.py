"""
Configuration for path synthesis.

Provides:
- SETTINGS: frozen engine conventions (floors, benchmark factor, quoting)
- Tolerance tiers for numerical checks
- build_parameters / parameters_from_mapping: the defaulting and
  boundary-clamping step that produces SimulationParameters
"""

from path_synthesis.config.defaults import (
    DEFAULTS,
    FIELD_ALIASES,
    ParameterDefaults,
    build_parameters,
    parameters_from_mapping,
)
from path_synthesis.config.settings import (
    SETTINGS,
    BenchmarkConfig,
    InstrumentConfig,
    NumericalConfig,
    RunConfig,
    Settings,
)

__all__ = [
    "DEFAULTS",
    "FIELD_ALIASES",
    "ParameterDefaults",
    "build_parameters",
    "parameters_from_mapping",
    "SETTINGS",
    "BenchmarkConfig",
    "InstrumentConfig",
    "NumericalConfig",
    "RunConfig",
    "Settings",
]
