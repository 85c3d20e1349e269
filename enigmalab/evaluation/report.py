"""Structured evaluation report builder.

Aggregates results from roundtrip tests, wiring analysis and stepping
traces into a single serializable report for export.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List

from .roundtrip import RoundtripResult
from .stepping import SteppingTrace
from .wiring_analysis import WiringAnalysisResult


@dataclass
class EvaluationReport:
    """Complete evaluation report aggregating all analysis results."""
    timestamp: str = ""
    roundtrip_results: List[RoundtripResult] = field(default_factory=list)
    wiring_results: List[WiringAnalysisResult] = field(default_factory=list)
    stepping_traces: List[SteppingTrace] = field(default_factory=list)

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = datetime.now(timezone.utc).isoformat()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize full report for JSON export."""
        return {
            "timestamp": self.timestamp,
            "roundtrip": [r.to_dict() for r in self.roundtrip_results],
            "wiring": [w.to_dict() for w in self.wiring_results],
            "stepping": [s.to_dict() for s in self.stepping_traces],
            "summary": {
                "configs_tested": len(self.roundtrip_results),
                "roundtrip_all_pass": all(r.is_perfect for r in self.roundtrip_results),
                "wiring_all_valid": all(w.is_valid for w in self.wiring_results),
                "failing_configs": self.failing_configs(),
                "broken_components": self.broken_components(),
            },
        }

    def to_summary(self) -> str:
        """Human-readable summary for terminal display."""
        lines = [f"Evaluation Report - {self.timestamp}", "=" * 50]

        if self.roundtrip_results:
            rt_pass = sum(1 for r in self.roundtrip_results if r.is_perfect)
            rt_total = len(self.roundtrip_results)
            lines.append(f"\nRoundtrip Tests: {rt_pass}/{rt_total} configurations pass")
            for r in self.roundtrip_results:
                lines.append(f"  {r.summary()}")

        if self.wiring_results:
            ok = sum(1 for w in self.wiring_results if w.is_valid)
            lines.append(f"\nWiring Analysis: {ok}/{len(self.wiring_results)} components valid")
            for w in self.wiring_results:
                lines.append(f"  {w.summary()}")

        if self.stepping_traces:
            lines.append(f"\nStepping Traces: {len(self.stepping_traces)}")
            for s in self.stepping_traces:
                lines.append(f"  {s.summary()}")

        return "\n".join(lines)

    def failing_configs(self) -> List[str]:
        """Return names of configurations with roundtrip failures."""
        return [r.config_name or r.config_string for r in self.roundtrip_results if not r.is_perfect]

    def broken_components(self) -> List[str]:
        return [f"{w.kind}:{w.component_id}" for w in self.wiring_results if not w.is_valid]
