from __future__ import annotations

from typing import Optional, Union

from .components_builtin import ReflectorType
from .registry import ComponentRegistry


class Reflector:
    """Stateless wheel that sends the signal back through the rotor stack."""

    def __init__(
        self,
        reflector: Union[str, ReflectorType] = "B",
        *,
        registry: Optional[ComponentRegistry] = None,
    ) -> None:
        if not isinstance(reflector, ReflectorType):
            reflector = (registry or ComponentRegistry()).reflector_type(reflector)
        self.reflector_type: ReflectorType = reflector

    @classmethod
    def from_type(cls, reflector_type: ReflectorType) -> "Reflector":
        return cls(reflector_type)

    @property
    def reflector_id(self) -> str:
        return self.reflector_type.reflector_id

    def map(self, symbol: int) -> int:
        return self.reflector_type.alphabet.map(symbol)

    def __repr__(self) -> str:
        return f"<Reflector {self.reflector_id}>"
