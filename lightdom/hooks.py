"""Lifecycle hook observer for nodes.

A host that attaches nodes to a real document calls these at the matching
moments. Nothing in lightdom itself calls them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .signals import SignalSink, resolve_sink

if TYPE_CHECKING:
    from .nodes import Node


class LifecycleHooks:
    """Default hooks: emit a descriptive signal and do nothing else."""

    def __init__(self, sink: SignalSink | None = None) -> None:
        self.sink = resolve_sink(sink)

    def on_created(self, node: Node) -> None:
        self.sink.emit("Element created")

    def on_inserted(self, node: Node) -> None:
        self.sink.emit("Element inserted into DOM")

    def on_removed(self, node: Node) -> None:
        self.sink.emit("Element removed from DOM")

    def on_styles_applied(self, node: Node) -> None:
        self.sink.emit("Styles applied to element")

    def on_class_list_applied(self, node: Node) -> None:
        self.sink.emit("Classes applied to element")

    def on_text_rendered(self, node: Node) -> None:
        self.sink.emit("Text rendered on element")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(sink={self.sink!r})"
