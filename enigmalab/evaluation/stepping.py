"""Stepping trace: record the rotor windows key press by key press.

Used to show the odometer motion and to locate double steps, where a
wheel other than the fastest one advances on two consecutive key presses.
"""
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

from enigmalab.machine.builder import build_machine
from enigmalab.machine.registry import ComponentRegistry
from enigmalab.machine.spec import MachineSpec


@dataclass
class SteppingTrace:
    config_string: str
    start_window: str
    windows: List[str] = field(default_factory=list)        # after each key press, leftmost first
    stepped: List[List[int]] = field(default_factory=list)  # traversal indexes that moved per press
    double_steps: List[int] = field(default_factory=list)   # 1-based key press numbers

    @property
    def keypresses(self) -> int:
        return len(self.windows)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary(self) -> str:
        return (
            f"{self.config_string}: {self.start_window} -> "
            f"{self.windows[-1] if self.windows else self.start_window} "
            f"after {self.keypresses} presses, double steps at {self.double_steps or 'none'}"
        )


def trace_stepping(
    spec: MachineSpec,
    keypresses: int,
    *,
    key: str = "A",
    registry: Optional[ComponentRegistry] = None,
) -> SteppingTrace:
    machine = build_machine(spec, registry)
    trace = SteppingTrace(config_string=spec.to_config_string(), start_window=machine.window)

    previous = machine.positions
    last_moved: List[int] = []
    for press in range(1, keypresses + 1):
        machine.translate(key)
        current = machine.positions
        moved = [i for i, (a, b) in enumerate(zip(previous, current)) if a != b]

        if any(i > 0 and i in last_moved for i in moved):
            trace.double_steps.append(press)

        trace.windows.append(machine.window)
        trace.stepped.append(moved)
        previous, last_moved = current, moved

    return trace
