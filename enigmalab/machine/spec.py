"""Machine configuration model and the configuration-string grammar.

A configuration string lays the machine out as seen from the front::

    <reflector>;<rotor>-<pos>-<ring>,<rotor>-<pos>-<ring>,...;<a>-<b>,...

for example ``"B;I-A-A,II-A-A,III-A-A;A-B,C-D"``. Positions and ring
settings are letters (``A`` = 0) or decimal numbers. The plugboard section
is optional. Whitespace and parentheses are ignored.
"""
from __future__ import annotations

from typing import Dict, List, Tuple

from pydantic import BaseModel, Field, field_validator

from .alphabet import ALPHABET_SIZE, LETTERS, is_letter, to_symbol
from .errors import ConfigStringError


class RotorSetting(BaseModel):
    """One rotor slot: wheel id, starting position and ring setting."""

    rotor_id: str = Field(..., min_length=1)
    position: int = Field(default=0, description="Taken modulo 26")
    ring_setting: int = Field(default=0, description="Taken modulo 26")

    @field_validator("rotor_id")
    @classmethod
    def _upper_id(cls, v: str) -> str:
        return v.strip().upper()

    @field_validator("position", "ring_setting")
    @classmethod
    def _wrap(cls, v: int) -> int:
        return v % ALPHABET_SIZE

    def as_tuple(self) -> Tuple[str, int, int]:
        return self.rotor_id, self.position, self.ring_setting


class MachineSpec(BaseModel):
    """Complete, explicit machine configuration.

    ``rotors`` is written as seen from the front: leftmost (slowest) wheel
    first, rightmost (fastest) wheel last. :meth:`traversal_order` gives the
    order the signal and the stepping pawls visit them.
    """

    reflector: str = Field(..., min_length=1)
    rotors: List[RotorSetting] = Field(..., min_length=1)
    plugboard: List[Tuple[str, str]] = Field(default_factory=list)
    name: str = Field(default="")

    @field_validator("reflector")
    @classmethod
    def _upper_reflector(cls, v: str) -> str:
        return v.strip().upper()

    @field_validator("plugboard")
    @classmethod
    def _upper_plugs(cls, v: List[Tuple[str, str]]) -> List[Tuple[str, str]]:
        return [(a.strip().upper(), b.strip().upper()) for a, b in v]

    def traversal_order(self) -> List[RotorSetting]:
        return list(reversed(self.rotors))

    @classmethod
    def parse(cls, text: str, *, name: str = "") -> "MachineSpec":
        parts = text.split(";")
        if len(parts) not in (2, 3):
            raise ConfigStringError(
                f"Invalid number of config components encountered: {len(parts)} {text!r}"
            )

        reflector = _clean(parts[0])
        if not reflector:
            raise ConfigStringError(f"Missing reflector id in {text!r}")

        rotors = [_parse_rotor(item) for item in _clean(parts[1]).split(",")]

        plugs: List[Tuple[str, str]] = []
        if len(parts) == 3 and _clean(parts[2]):
            plugs = [_parse_plug(item) for item in _clean(parts[2]).split(",")]

        return cls(reflector=reflector, rotors=rotors, plugboard=plugs, name=name)

    def to_config_string(self) -> str:
        rotors = ",".join(
            f"{r.rotor_id}-{LETTERS[r.position]}-{LETTERS[r.ring_setting]}" for r in self.rotors
        )
        plugs = ",".join(f"{a}-{b}" for a, b in self.plugboard)
        return f"{self.reflector};{rotors};{plugs}"


def _clean(section: str) -> str:
    return "".join(c for c in section if not c.isspace() and c not in "()")


def _parse_offset(raw: str, what: str, item: str) -> int:
    if raw.isascii() and raw.isdigit():
        return int(raw) % ALPHABET_SIZE
    if is_letter(raw):
        return to_symbol(raw)
    raise ConfigStringError(f"Invalid rotor {what}: {raw!r} in {item!r}")


def _parse_rotor(item: str) -> RotorSetting:
    elems = item.split("-")
    if len(elems) != 3 or not elems[0]:
        raise ConfigStringError(f"Invalid rotor config: {item!r}")
    return RotorSetting(
        rotor_id=elems[0],
        position=_parse_offset(elems[1], "position", item),
        ring_setting=_parse_offset(elems[2], "ring location", item),
    )


def _parse_plug(item: str) -> Tuple[str, str]:
    elems = item.split("-")
    if len(elems) != 2 or not all(is_letter(e) for e in elems):
        raise ConfigStringError(f"Invalid plugboard config received: {item!r}")
    return elems[0].upper(), elems[1].upper()


# ============================================================================
# PRESETS
# ============================================================================

PRESETS: Dict[str, str] = {
    "enigma-i": "B;I-A-A,II-A-A,III-A-A",
    "enigma-i-plugged": "B;IV-Q-E,II-C-V,V-K-M;A-V,B-S,C-G,D-L,F-U,H-Z,I-N,K-M,O-W,R-X",
    "ring-settings": "A;III-X-B,I-D-Q,II-Z-F;P-O,M-L",
    "naval-m3": "C;VI-Y-C,VII-L-H,VIII-M-Z;Q-W,E-R,T-Z",
    "four-rotor": "B;V-A-A,IV-E-B,III-U-C,II-D-D;J-K",
}


def list_presets() -> List[str]:
    return sorted(PRESETS)


def get_template(name: str) -> MachineSpec:
    if name not in PRESETS:
        raise KeyError(f"Unknown preset: {name}. Available: {', '.join(list_presets())}")
    return MachineSpec.parse(PRESETS[name], name=name)
