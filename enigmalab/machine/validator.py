from __future__ import annotations

from typing import List, Set, Tuple

from .alphabet import is_letter
from .registry import ComponentRegistry
from .spec import MachineSpec


def validate_spec(spec: MachineSpec, registry: ComponentRegistry | None = None) -> Tuple[bool, List[str]]:
    reg = registry or ComponentRegistry()
    errs: List[str] = []

    if not reg.exists("REFLECTOR", spec.reflector):
        errs.append(f"Unknown reflector id: {spec.reflector}")

    if not spec.rotors:
        errs.append("At least one rotor is required")
    for slot, rotor in enumerate(spec.rotors):
        if not reg.exists("ROTOR", rotor.rotor_id):
            errs.append(f"Unknown rotor id in slot {slot}: {rotor.rotor_id}")

    used: Set[str] = set()
    for a, b in spec.plugboard:
        if not (is_letter(a) and is_letter(b)):
            errs.append(f"Plugboard pair {a}-{b} contains non alphabetic chars")
            continue
        if a == b:
            errs.append(f"Plugboard pair {a}-{b} connects a letter to itself")
            continue
        for ch in (a, b):
            if ch in used:
                errs.append(f"Plugboard letter {ch} is wired more than once")
        used.update((a, b))

    return (len(errs) == 0), errs
