"""
Data model for path synthesis.

Provides:
- ModelType / AssetClass enumerations
- SimulationParameters and CorrelationFactors inputs
- PathPoint, Greeks, PathSummary, SimulationResult outputs
"""

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

__all__ = [
    "AssetClass",
    "CorrelationFactors",
    "Greeks",
    "ModelType",
    "PathPoint",
    "PathSummary",
    "SimulationParameters",
    "SimulationResult",
]
