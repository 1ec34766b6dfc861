"""
Path assembly and path-level outputs.

Provides:
- SynthesisEngine / synthesize_path: one full run
- Asset-class display transforms
- Summary statistics
- Stable tabular view for serializers
- Greeks-based stress scenarios on the final point
"""

from path_synthesis.synthesis.engine import SynthesisEngine, synthesize_path
from path_synthesis.synthesis.export import (
    CSV_HEADER,
    EXPORT_COLUMNS,
    to_csv_text,
    to_frame,
    to_records,
)
from path_synthesis.synthesis.stress import (
    STRESS_PRESETS,
    ShockImpact,
    ShockType,
    StressScenario,
    run_stress_scenario,
    shock_impact,
)
from path_synthesis.synthesis.summary import calculate_summary
from path_synthesis.synthesis.transforms import (
    DISPLAY_TRANSFORMS,
    DisplayFields,
    StepContext,
    display_fields,
    seasonal_shift,
)

__all__ = [
    # Engine
    "SynthesisEngine",
    "synthesize_path",
    # Transforms
    "DISPLAY_TRANSFORMS",
    "DisplayFields",
    "StepContext",
    "display_fields",
    "seasonal_shift",
    # Stress
    "STRESS_PRESETS",
    "ShockImpact",
    "ShockType",
    "StressScenario",
    "run_stress_scenario",
    "shock_impact",
    # Summary
    "calculate_summary",
    # Export
    "CSV_HEADER",
    "EXPORT_COLUMNS",
    "to_csv_text",
    "to_frame",
    "to_records",
]
