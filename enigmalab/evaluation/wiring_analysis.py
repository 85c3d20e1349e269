"""Wiring table analysis for rotors and reflectors.

Checks the structural invariants every wheel relies on: rotor tables are
permutations whose ``alphabet_out`` is the exact inverse of
``alphabet_in``; reflector tables are involutions without fixed points.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List

from enigmalab.machine.alphabet import ALPHABET_SIZE, LETTERS
from enigmalab.machine.components_builtin import ReflectorType, RotorType
from enigmalab.machine.registry import ComponentRegistry


@dataclass
class WiringAnalysisResult:
    """Structural checks for one wheel's wiring."""
    component_id: str
    kind: str                   # "ROTOR" or "REFLECTOR"
    wiring: str
    is_bijective: bool
    is_inverse_consistent: bool  # alphabet_out[alphabet_in[s]] == s (rotors); table[table[s]] == s (reflectors)
    is_involution: bool
    fixed_points: List[str] = field(default_factory=list)
    notches: str = ""           # Rotors only

    @property
    def is_valid(self) -> bool:
        if self.kind == "REFLECTOR":
            return self.is_bijective and self.is_involution and not self.fixed_points
        return self.is_bijective and self.is_inverse_consistent

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["is_valid"] = self.is_valid
        return d

    def summary(self) -> str:
        status = "ok" if self.is_valid else "BROKEN"
        extra = f", notches={self.notches}" if self.notches else ""
        fixed = f", fixed={''.join(self.fixed_points)}" if self.fixed_points else ""
        return f"{self.kind.lower()} {self.component_id}: {self.wiring} ({status}{extra}{fixed})"


def analyze_rotor_type(rotor_type: RotorType) -> WiringAnalysisResult:
    fwd = rotor_type.alphabet_in
    inv = rotor_type.alphabet_out
    return WiringAnalysisResult(
        component_id=rotor_type.rotor_id,
        kind="ROTOR",
        wiring=fwd.wiring,
        is_bijective=sorted(fwd.table) == list(range(ALPHABET_SIZE)),
        is_inverse_consistent=all(inv.map(fwd.map(s)) == s for s in range(ALPHABET_SIZE)),
        is_involution=fwd.is_involution(),
        fixed_points=[LETTERS[s] for s in fwd.fixed_points()],
        notches=rotor_type.notch_letters,
    )


def analyze_reflector_type(reflector_type: ReflectorType) -> WiringAnalysisResult:
    table = reflector_type.alphabet
    involution = all(table.map(table.map(s)) == s for s in range(ALPHABET_SIZE))
    return WiringAnalysisResult(
        component_id=reflector_type.reflector_id,
        kind="REFLECTOR",
        wiring=table.wiring,
        is_bijective=sorted(table.table) == list(range(ALPHABET_SIZE)),
        is_inverse_consistent=involution,
        is_involution=involution,
        fixed_points=[LETTERS[s] for s in table.fixed_points()],
    )


def analyze_all_components(registry: ComponentRegistry | None = None) -> List[WiringAnalysisResult]:
    """Analyze every registered rotor and reflector, rotors first."""
    reg = registry or ComponentRegistry()
    results = [analyze_rotor_type(r) for r in reg.list_by_kind("ROTOR")]
    results += [analyze_reflector_type(r) for r in reg.list_by_kind("REFLECTOR")]
    return results
