"""
Stochastic building blocks for a single path.

Provides:
- Box-Muller standard normal variates over an explicit generator
- One-factor correlation coupling
- Per-model state evolution (GBM, Merton jump, Vasicek, CIR, OU/macro)
"""

from path_synthesis.simulation.correlation import (
    aggregate_correlation,
    couple_shocks,
    validate_correlation_coupling,
)
from path_synthesis.simulation.processes import (
    PROCESS_STEPS,
    ProcessCoefficients,
    effective_drift,
    evolve,
    gbm_step,
)
from path_synthesis.simulation.variates import (
    box_muller_normal,
    make_generator,
    spawn_generators,
)

__all__ = [
    # Variates
    "box_muller_normal",
    "make_generator",
    "spawn_generators",
    # Correlation
    "aggregate_correlation",
    "couple_shocks",
    "validate_correlation_coupling",
    # Processes
    "PROCESS_STEPS",
    "ProcessCoefficients",
    "effective_drift",
    "evolve",
    "gbm_step",
]
