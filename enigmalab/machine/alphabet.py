"""Alphabet primitives shared by rotors, reflectors and the plugboard.

A *symbol* is the integer form of one uppercase Latin letter
(``A`` = 0 ... ``Z`` = 25). Every wheel is a fixed permutation of the 26
symbols, held in a :class:`SubstitutionTable`.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import List, Tuple

ALPHABET_SIZE = 26
LETTERS = string.ascii_uppercase


# ============================================================================
# SYMBOL CONVERSION
# ============================================================================

def is_letter(ch: str) -> bool:
    """True iff ``ch`` is exactly one ASCII Latin letter (either case)."""
    return len(ch) == 1 and ch in string.ascii_letters


def to_symbol(ch: str) -> int:
    """Convert a letter to its symbol value."""
    if not is_letter(ch):
        raise ValueError(f"Not an alphabetic character: {ch!r}")
    return ord(ch.upper()) - ord("A")


def to_letter(symbol: int) -> str:
    """Convert a symbol value back to its uppercase letter."""
    if not 0 <= symbol < ALPHABET_SIZE:
        raise ValueError(f"Symbol {symbol} out of range 0-{ALPHABET_SIZE - 1}")
    return LETTERS[symbol]


def wrap(value: int) -> int:
    return value % ALPHABET_SIZE


# ============================================================================
# SUBSTITUTION TABLE
# ============================================================================

@dataclass(frozen=True)
class SubstitutionTable:
    """A fixed bijective permutation over the 26 symbols."""
    table: Tuple[int, ...]

    def __post_init__(self) -> None:
        if sorted(self.table) != list(range(ALPHABET_SIZE)):
            raise ValueError("table must be a permutation of the 26 symbols")

    @classmethod
    def from_wiring(cls, wiring: str) -> "SubstitutionTable":
        """Build from a wiring string such as ``"EKMFLGDQVZNTOWYHXUSPAIBRCJ"``."""
        if len(wiring) != ALPHABET_SIZE or not all(is_letter(c) for c in wiring):
            raise ValueError(f"Wiring must be {ALPHABET_SIZE} letters: {wiring!r}")
        return cls(tuple(to_symbol(c) for c in wiring))

    def map(self, symbol: int) -> int:
        return self.table[symbol]

    def inverse(self) -> "SubstitutionTable":
        inv = [0] * ALPHABET_SIZE
        for i, v in enumerate(self.table):
            inv[v] = i
        return SubstitutionTable(tuple(inv))

    def is_involution(self) -> bool:
        return all(self.table[v] == i for i, v in enumerate(self.table))

    def fixed_points(self) -> List[int]:
        return [i for i, v in enumerate(self.table) if i == v]

    @property
    def wiring(self) -> str:
        return "".join(LETTERS[v] for v in self.table)

    def __len__(self) -> int:
        return len(self.table)
