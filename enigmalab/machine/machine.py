"""The rotor machine: stepping protocol and the full signal path.

Rotors are held in signal traversal order. Index 0 is the rightmost wheel
as seen from the front; it sits next to the entry plate and steps on every
key press. The signal path for one letter is::

    plugboard -> rotor[0..n-1].map_in -> reflector
              -> rotor[n-1..0].map_out -> plugboard

Research / education only. Do NOT use in production.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Iterator, List, Sequence, Tuple

from .alphabet import is_letter, to_letter, to_symbol
from .plugboard import PlugBoard
from .reflector import Reflector
from .rotor import Rotor

if TYPE_CHECKING:
    from .builder import MachineBuilder

logger = logging.getLogger(__name__)


class EnigmaMachine:
    def __init__(self, reflector: Reflector, rotors: Sequence[Rotor], plugboard: PlugBoard) -> None:
        if not rotors:
            raise ValueError("EnigmaMachine needs at least one rotor")
        self.reflector = reflector
        self.rotors: List[Rotor] = list(rotors)
        self.plugboard = plugboard

    @classmethod
    def builder(cls) -> "MachineBuilder":
        from .builder import MachineBuilder

        return MachineBuilder()

    # ── state -------------------------------------------------------
    @property
    def positions(self) -> Tuple[int, ...]:
        """Rotor positions in traversal order (fastest first)."""
        return tuple(r.position for r in self.rotors)

    @property
    def window(self) -> str:
        """Window letters as read from the front, leftmost rotor first."""
        return "".join(r.window for r in reversed(self.rotors))

    # ── stepping ----------------------------------------------------
    def _step_rotors(self) -> None:
        """Advance the wheels for one key press (odometer with double step).

        Notches are sampled before a wheel moves. A wheel past the first
        steps when the previous wheel sat in its notch, or when it sits in
        its own notch (the middle-wheel double step). The first wheel that
        stays put ends the cascade.
        """
        carry = True
        for rotor in self.rotors:
            at_notch = rotor.will_step_next_rotor()
            if not (carry or at_notch):
                break
            rotor.rotate()
            carry = at_notch

    # ── encipher one symbol ----------------------------------------
    def translate(self, ch: str) -> str:
        if not is_letter(ch):
            return ch

        symbol = to_symbol(ch)
        self._step_rotors()
        logger.debug("key %s, positions %s", ch.upper(), self.positions)

        signal = self.plugboard.map(symbol)
        for rotor in self.rotors:
            signal = rotor.map_in(signal)

        signal = self.reflector.map(signal)

        for rotor in reversed(self.rotors):
            signal = rotor.map_out(signal)

        signal = self.plugboard.map(signal)
        return to_letter(signal)

    def translate_stream(self, chars: Iterable[str]) -> Iterator[str]:
        for ch in chars:
            yield self.translate(ch)

    def translate_text(self, text: Iterable[str]) -> str:
        return "".join(self.translate_stream(text))

    def __repr__(self) -> str:
        rotors = ",".join(r.rotor_id for r in reversed(self.rotors))
        return f"<EnigmaMachine {self.reflector.reflector_id};{rotors} window={self.window} plugs={len(self.plugboard)}>"
