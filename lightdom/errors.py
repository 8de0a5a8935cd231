"""Exception types raised by lightdom."""

from __future__ import annotations


class LightDomError(Exception):
    """Base class for lightdom errors."""


class InvalidNodeError(LightDomError, ValueError):
    """Raised when node construction data is invalid."""


class UnknownNodeTypeError(LightDomError, TypeError):
    """Raised when an object outside the node variants reaches a dispatch."""

    def __init__(self, node: object) -> None:
        super().__init__(f"Unsupported node type: {type(node).__name__}")
        self.node = node


class UnknownStateError(LightDomError, KeyError):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown state: {self.name!r}"


class InvalidConfigError(LightDomError, ValueError):
    """Raised when render configuration text cannot be parsed."""
