from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple, Union

from .errors import ConfigurationError, PlugBoardError
from .machine import EnigmaMachine
from .plugboard import PlugBoard
from .reflector import Reflector
from .registry import ComponentRegistry
from .rotor import Rotor
from .spec import MachineSpec
from .validator import validate_spec

logger = logging.getLogger(__name__)

RotorEntry = Union[Rotor, str, Tuple[str, int, int]]


class MachineBuilder:
    """Collects reflector, rotors and plugboard; ``build()`` needs all three.

    Rotors are appended in signal traversal order: the first rotor added is
    the rightmost, fastest wheel. Unknown rotor or reflector ids raise
    ``UnknownComponentError`` immediately.
    """

    def __init__(self, registry: Optional[ComponentRegistry] = None) -> None:
        self.registry = registry or ComponentRegistry()
        self._reflector: Optional[Reflector] = None
        self._rotors: Optional[List[Rotor]] = None
        self._plugboard: Optional[PlugBoard] = None

    def reflector(self, reflector: Union[str, Reflector]) -> "MachineBuilder":
        if isinstance(reflector, str):
            reflector = Reflector(reflector, registry=self.registry)
        self._reflector = reflector
        return self

    def rotor(self, rotor: Union[str, Rotor], position: int = 0, ring_setting: int = 0) -> "MachineBuilder":
        if isinstance(rotor, str):
            rotor = Rotor(rotor, position, ring_setting, registry=self.registry)
        if self._rotors is None:
            self._rotors = []
        self._rotors.append(rotor)
        return self

    def rotors(self, rotors: Iterable[RotorEntry]) -> "MachineBuilder":
        for entry in rotors:
            if isinstance(entry, tuple):
                self.rotor(*entry)
            else:
                self.rotor(entry)
        return self

    def plugboard(self, plugboard: Union[PlugBoard, Iterable[Tuple[str, str]]]) -> "MachineBuilder":
        if isinstance(plugboard, PlugBoard):
            self._plugboard = plugboard
            return self
        try:
            self._plugboard = PlugBoard.with_mappings(plugboard)
        except PlugBoardError:
            logger.warning("Invalid mappings provided for plugboard")
        return self

    def missing(self) -> List[str]:
        out = []
        if self._reflector is None:
            out.append("reflector")
        if not self._rotors:
            out.append("rotors")
        if self._plugboard is None:
            out.append("plugboard")
        return out

    def build(self) -> Optional[EnigmaMachine]:
        missing = self.missing()
        if missing:
            logger.warning("Cannot build machine, missing: %s", ", ".join(missing))
            return None
        return EnigmaMachine(self._reflector, self._rotors, self._plugboard)


def build_machine(spec: MachineSpec, registry: Optional[ComponentRegistry] = None) -> EnigmaMachine:
    """Validate ``spec`` as a whole, then assemble a fresh machine from it."""
    reg = registry or ComponentRegistry()

    ok, errs = validate_spec(spec, reg)
    if not ok:
        raise ConfigurationError("Invalid machine configuration: " + "; ".join(errs))

    builder = (
        MachineBuilder(reg)
        .reflector(spec.reflector)
        .rotors(r.as_tuple() for r in spec.traversal_order())
        .plugboard(PlugBoard.with_mappings(spec.plugboard))
    )
    machine = builder.build()
    if machine is None:
        raise ConfigurationError("Incomplete machine configuration: " + ", ".join(builder.missing()))
    logger.debug("Built %r", machine)
    return machine
