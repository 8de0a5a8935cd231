"""Mutating commands applied to a node and, recursively, its subtree."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .errors import UnknownNodeTypeError
from .nodes import ElementNode, Node, TextNode
from .signals import SignalSink, resolve_sink


class Command(ABC):
    """An operation applied to one node at a time.

    ``apply`` must tolerate every node variant: a command that only makes
    sense for some variants skips the others silently.
    """

    @abstractmethod
    def apply(self, node: Node) -> None:
        raise NotImplementedError


class AddClassCommand(Command):
    def __init__(self, class_name: str, *, sink: SignalSink | None = None) -> None:
        self.class_name = class_name
        self.sink = resolve_sink(sink)

    def apply(self, node: Node) -> None:
        if isinstance(node, ElementNode):
            node.classes.append(self.class_name)
            self.sink.emit(f"Added class {self.class_name} to element {node.tag_name}")
        elif isinstance(node, TextNode):
            return
        else:
            raise UnknownNodeTypeError(node)

    def __repr__(self) -> str:
        return f"AddClassCommand({self.class_name!r})"


def execute_on(node: Node, command: Command) -> None:
    """Apply ``command`` to ``node`` then to each descendant in pre-order."""
    command.apply(node)
    for child in node.iter_children():
        execute_on(child, command)


__all__ = ["AddClassCommand", "Command", "execute_on"]
