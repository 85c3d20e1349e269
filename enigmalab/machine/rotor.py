"""Rotating wheel: wiring, rotational position, ring setting and notch(es).

The signal crosses every rotor twice per key press, once on the way to the
reflector (:meth:`Rotor.map_in`) and once on the way back
(:meth:`Rotor.map_out`). Both directions conjugate the wiring table by the
same offset, ``(position + ring_setting) mod 26``, so ``map_out`` is the
exact inverse of ``map_in`` for every rotor state.
"""

from __future__ import annotations

from typing import Optional, Union

from .alphabet import ALPHABET_SIZE, LETTERS, wrap
from .components_builtin import Notch, RotorType
from .registry import ComponentRegistry


class Rotor:
    def __init__(
        self,
        rotor: Union[str, RotorType],
        position: int = 0,
        ring_setting: int = 0,
        *,
        registry: Optional[ComponentRegistry] = None,
    ) -> None:
        if not isinstance(rotor, RotorType):
            rotor = (registry or ComponentRegistry()).rotor_type(rotor)
        self.rotor_type: RotorType = rotor
        self.position = wrap(position)
        self.ring_setting = wrap(ring_setting)

    @classmethod
    def from_type(cls, rotor_type: RotorType, position: int = 0, ring_setting: int = 0) -> "Rotor":
        return cls(rotor_type, position, ring_setting)

    # ── identity ----------------------------------------------------
    @property
    def rotor_id(self) -> str:
        return self.rotor_type.rotor_id

    @property
    def notch(self) -> Notch:
        return self.rotor_type.notch

    @property
    def window(self) -> str:
        """Letter currently showing in the machine's window."""
        return LETTERS[self.position]

    # ── stepping ----------------------------------------------------
    def rotate(self) -> None:
        self.position = (self.position + 1) % ALPHABET_SIZE

    def will_step_next_rotor(self) -> bool:
        """True when the pawl sits in a notch *before* this rotor steps."""
        return self.notch.engages(self.position)

    # ── signal paths -----------------------------------------------
    def _offset(self) -> int:
        return (self.position + self.ring_setting) % ALPHABET_SIZE

    def map_in(self, symbol: int) -> int:
        offset = self._offset()
        mapped = self.rotor_type.alphabet_in.map((symbol + offset) % ALPHABET_SIZE)
        return (mapped - offset) % ALPHABET_SIZE

    def map_out(self, symbol: int) -> int:
        offset = self._offset()
        mapped = self.rotor_type.alphabet_out.map((symbol + offset) % ALPHABET_SIZE)
        return (mapped - offset) % ALPHABET_SIZE

    def __repr__(self) -> str:
        return f"<Rotor {self.rotor_id} pos={self.position} ring={self.ring_setting}>"
