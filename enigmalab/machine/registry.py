from __future__ import annotations

from typing import Dict, List, Union

from .components_builtin import ReflectorType, RotorType, builtins
from .errors import UnknownComponentError

# Roman-numeral order, not lexical
_ROTOR_ORDER = ["I", "II", "III", "IV", "V", "VI", "VII", "VIII"]


def normalize_id(component_id: str) -> str:
    return component_id.strip().upper()


class ComponentRegistry:
    def __init__(self):
        self._components: Dict[str, Dict[str, Union[RotorType, ReflectorType]]] = builtins()

    def rotor_type(self, rotor_id: str) -> RotorType:
        key = normalize_id(rotor_id)
        if key not in self._components["ROTOR"]:
            raise UnknownComponentError("rotor", rotor_id)
        return self._components["ROTOR"][key]

    def reflector_type(self, reflector_id: str) -> ReflectorType:
        key = normalize_id(reflector_id)
        if key not in self._components["REFLECTOR"]:
            raise UnknownComponentError("reflector", reflector_id)
        return self._components["REFLECTOR"][key]

    def register(self, component: Union[RotorType, ReflectorType]) -> None:
        """Add a custom wheel; later registrations replace earlier ones."""
        if isinstance(component, RotorType):
            self._components["ROTOR"][normalize_id(component.rotor_id)] = component
        else:
            self._components["REFLECTOR"][normalize_id(component.reflector_id)] = component

    def rotor_ids(self) -> List[str]:
        return sorted(
            self._components["ROTOR"],
            key=lambda r: (_ROTOR_ORDER.index(r) if r in _ROTOR_ORDER else len(_ROTOR_ORDER), r),
        )

    def reflector_ids(self) -> List[str]:
        return sorted(self._components["REFLECTOR"])

    def list_by_kind(self, kind: str) -> List[Union[RotorType, ReflectorType]]:
        kind = kind.upper()
        if kind == "ROTOR":
            return [self._components["ROTOR"][r] for r in self.rotor_ids()]
        if kind == "REFLECTOR":
            return [self._components["REFLECTOR"][r] for r in self.reflector_ids()]
        raise ValueError(f"Unknown component kind: {kind}")

    def exists(self, kind: str, component_id: str) -> bool:
        return normalize_id(component_id) in self._components.get(kind.upper(), {})
