"""Deterministic self-checks for the rotor machine engine.

Provides involution testing (roundtrip verification), wiring table
analysis and stepping traces, aggregated into an evaluation report.

Research / education only. Do NOT use in production.
"""

from .roundtrip import RoundtripResult, RoundtripFailure, run_roundtrip_tests, run_all_presets
from .wiring_analysis import (
    WiringAnalysisResult,
    analyze_rotor_type,
    analyze_reflector_type,
    analyze_all_components,
)
from .stepping import SteppingTrace, trace_stepping
from .report import EvaluationReport

__all__ = [
    "RoundtripResult",
    "RoundtripFailure",
    "run_roundtrip_tests",
    "run_all_presets",
    "WiringAnalysisResult",
    "analyze_rotor_type",
    "analyze_reflector_type",
    "analyze_all_components",
    "SteppingTrace",
    "trace_stepping",
    "EvaluationReport",
]
