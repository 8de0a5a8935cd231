"""Stateless mode handlers selected by the caller."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Dict

from .errors import UnknownStateError
from .nodes import Node
from .signals import SignalSink, resolve_sink


class State(ABC):
    """Produce a fixed signal for any node.

    The node argument is unused by the built-in states; it is there for
    states that depend on node identity or attributes.
    """

    message: str = ""

    def __init__(self, sink: SignalSink | None = None) -> None:
        self.sink = resolve_sink(sink)

    @abstractmethod
    def handle(self, node: Node) -> None:
        raise NotImplementedError


class ActiveState(State):
    message = "Element is active"

    def handle(self, node: Node) -> None:
        self.sink.emit(self.message)


class InactiveState(State):
    message = "Element is inactive"

    def handle(self, node: Node) -> None:
        self.sink.emit(self.message)


STATES: Dict[str, Callable[..., State]] = {
    "active": ActiveState,
    "inactive": InactiveState,
}


def state_for(name: str, *, sink: SignalSink | None = None) -> State:
    """Return a state instance for a mode name such as ``"active"``."""
    try:
        factory = STATES[name.strip().lower()]
    except KeyError as exc:
        raise UnknownStateError(name) from exc
    return factory(sink)


__all__ = ["ActiveState", "InactiveState", "STATES", "State", "state_for"]
