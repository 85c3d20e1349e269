"""Built-in wheel wiring for the enigmalab package.

This module provides:
- The tagged notch variants (single notch for I-V, double notch for VI-VIII)
- Immutable rotor types ("tyres") and reflector types
- The historical Wehrmacht / Luftwaffe / Kriegsmarine wiring tables

Research / education only. Do NOT use in production.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Tuple, Union

from .alphabet import LETTERS, SubstitutionTable, to_symbol


# ============================================================================
# NOTCHES
# ============================================================================

@dataclass(frozen=True)
class SingleNotch:
    """One turnover position per revolution."""
    position: int

    @property
    def positions(self) -> Tuple[int, ...]:
        return (self.position,)

    def engages(self, position: int) -> bool:
        return position == self.position


@dataclass(frozen=True)
class DoubleNotch:
    """Two turnover positions per revolution (naval rotors VI-VIII)."""
    first: int
    second: int

    @property
    def positions(self) -> Tuple[int, ...]:
        return (self.first, self.second)

    def engages(self, position: int) -> bool:
        return position == self.first or position == self.second


Notch = Union[SingleNotch, DoubleNotch]


def notch_from_letters(letters: str) -> Notch:
    """``"Q"`` -> SingleNotch(16); ``"ZM"`` -> DoubleNotch(25, 12)."""
    if len(letters) == 1:
        return SingleNotch(to_symbol(letters))
    if len(letters) == 2:
        return DoubleNotch(to_symbol(letters[0]), to_symbol(letters[1]))
    raise ValueError(f"A rotor carries one or two notches, got {letters!r}")


# ============================================================================
# WHEEL TYPES
# ============================================================================

@dataclass(frozen=True)
class RotorType:
    """Immutable, shared rotor wiring plus its stepping notch(es)."""
    rotor_id: str
    alphabet_in: SubstitutionTable
    notch: Notch
    description: str = ""
    alphabet_out: SubstitutionTable = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "alphabet_out", self.alphabet_in.inverse())

    @classmethod
    def from_wiring(cls, rotor_id: str, wiring: str, notches: str, description: str = "") -> "RotorType":
        return cls(
            rotor_id=rotor_id,
            alphabet_in=SubstitutionTable.from_wiring(wiring),
            notch=notch_from_letters(notches),
            description=description,
        )

    @property
    def kind(self) -> str:
        return "ROTOR"

    @property
    def notch_letters(self) -> str:
        return "".join(LETTERS[p] for p in self.notch.positions)


@dataclass(frozen=True)
class ReflectorType:
    """Immutable reflector wiring; the table is its own inverse."""
    reflector_id: str
    alphabet: SubstitutionTable
    description: str = ""

    def __post_init__(self) -> None:
        if not self.alphabet.is_involution():
            raise ValueError(f"Reflector {self.reflector_id} wiring must be an involution")

    @classmethod
    def from_wiring(cls, reflector_id: str, wiring: str, description: str = "") -> "ReflectorType":
        return cls(reflector_id, SubstitutionTable.from_wiring(wiring), description)

    @property
    def kind(self) -> str:
        return "REFLECTOR"


# ============================================================================
# HISTORICAL WIRING
# ============================================================================

ROTOR_I = RotorType.from_wiring("I", "EKMFLGDQVZNTOWYHXUSPAIBRCJ", "Q", "Enigma I (1930)")
ROTOR_II = RotorType.from_wiring("II", "AJDKSIRUXBLHWTMCQGZNPYFVOE", "E", "Enigma I (1930)")
ROTOR_III = RotorType.from_wiring("III", "BDFHJLCPRTXVZNYEIWGAKMUSQO", "V", "Enigma I (1930)")
ROTOR_IV = RotorType.from_wiring("IV", "ESOVPZJAYQUIRHXLNFTGKDCMWB", "J", "M3 Army (1938)")
ROTOR_V = RotorType.from_wiring("V", "VZBRGITYUPSDNHLXAWMJQOFECK", "Z", "M3 Army (1938)")
ROTOR_VI = RotorType.from_wiring("VI", "JPGVOUMFYQBENHZRDKASXLICTW", "ZM", "M3 & M4 Naval (1939)")
ROTOR_VII = RotorType.from_wiring("VII", "NZJHGRCXMYSWBOUFAIVLPEKQDT", "ZM", "M3 & M4 Naval (1939)")
ROTOR_VIII = RotorType.from_wiring("VIII", "FKQHTLXOCBJSPDZRAMEWNIUYGV", "ZM", "M3 & M4 Naval (1939)")

REFLECTOR_A = ReflectorType.from_wiring("A", "EJMZALYXVBWFCRQUONTSPIKHGD", "Reflector A")
REFLECTOR_B = ReflectorType.from_wiring("B", "YRUHQSLDPXNGOKMIEBFZCWVJAT", "Wide reflector B")
REFLECTOR_C = ReflectorType.from_wiring("C", "FVPJIAOYEDRZXWGCTKUQSBNMHL", "Wide reflector C")

ROTOR_TYPES: Mapping[str, RotorType] = MappingProxyType({
    r.rotor_id: r
    for r in (ROTOR_I, ROTOR_II, ROTOR_III, ROTOR_IV, ROTOR_V, ROTOR_VI, ROTOR_VII, ROTOR_VIII)
})

REFLECTOR_TYPES: Mapping[str, ReflectorType] = MappingProxyType({
    r.reflector_id: r for r in (REFLECTOR_A, REFLECTOR_B, REFLECTOR_C)
})


def builtins() -> Dict[str, Dict[str, Union[RotorType, ReflectorType]]]:
    """Return all built-in wheels keyed by kind, then id."""
    return {
        "ROTOR": dict(ROTOR_TYPES),
        "REFLECTOR": dict(REFLECTOR_TYPES),
    }
