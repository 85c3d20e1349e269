"""Error definitions for the rotor machine engine."""

from __future__ import annotations


class EnigmaError(Exception):
    """Base exception for all custom errors."""


class ConfigurationError(EnigmaError):
    """Raised when a machine cannot be assembled from its configuration."""


class UnknownComponentError(ConfigurationError, KeyError):
    """Raised when a rotor or reflector identifier is not recognised."""

    def __init__(self, kind: str, component_id: str) -> None:
        self.kind = kind
        self.component_id = component_id
        super().__init__(f"Unknown {kind} id: {component_id!r}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class PlugBoardError(EnigmaError, ValueError):
    """Raised when a plugboard cable cannot be connected."""


class ConfigStringError(EnigmaError, ValueError):
    """Raised when a machine configuration string is malformed."""
