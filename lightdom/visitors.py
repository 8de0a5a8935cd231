"""Read-only visitors dispatched through ``Node.accept``."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from .errors import UnknownNodeTypeError
from .nodes import ElementNode, Node, TextNode
from .signals import SignalSink, resolve_sink


class Visitor(ABC):
    """Inspects one node per call; ``accept`` drives the descent.

    Subclasses implement one method per node variant.
    """

    def visit(self, node: Node) -> None:
        if isinstance(node, TextNode):
            self.visit_text(node)
        elif isinstance(node, ElementNode):
            self.visit_element(node)
        else:
            raise UnknownNodeTypeError(node)

    @abstractmethod
    def visit_text(self, node: TextNode) -> None:
        raise NotImplementedError

    @abstractmethod
    def visit_element(self, node: ElementNode) -> None:
        raise NotImplementedError


class TextVisitor(Visitor):
    """Report each visited node by kind."""

    def __init__(self, sink: SignalSink | None = None) -> None:
        self.sink = resolve_sink(sink)

    def visit_text(self, node: TextNode) -> None:
        self.sink.emit("Text node visited")

    def visit_element(self, node: ElementNode) -> None:
        self.sink.emit("Element visited")


class CollectingVisitor(Visitor):
    def __init__(self) -> None:
        self.visited: List[Node] = []

    def visit_text(self, node: TextNode) -> None:
        self.visited.append(node)

    def visit_element(self, node: ElementNode) -> None:
        self.visited.append(node)


__all__ = ["CollectingVisitor", "TextVisitor", "Visitor"]
