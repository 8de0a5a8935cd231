"""Node model: text and element nodes that render themselves to markup."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Iterator, List, Union

from .errors import InvalidNodeError
from .hooks import LifecycleHooks

if TYPE_CHECKING:
    from .commands import Command
    from .visitors import Visitor


class DisplayType(str, Enum):
    BLOCK = "block"
    INLINE = "inline"


class ClosingType(str, Enum):
    SINGLE_TAG = "single"
    CLOSING_TAG = "closing"


class _NodeBase(ABC):
    """Behaviour shared by both node variants."""

    hooks: LifecycleHooks

    def on_created(self) -> None:
        self.hooks.on_created(self)

    def on_inserted(self) -> None:
        self.hooks.on_inserted(self)

    def on_removed(self) -> None:
        self.hooks.on_removed(self)

    def on_styles_applied(self) -> None:
        self.hooks.on_styles_applied(self)

    def on_class_list_applied(self) -> None:
        self.hooks.on_class_list_applied(self)

    def on_text_rendered(self) -> None:
        self.hooks.on_text_rendered(self)

    def execute_command(self, command: Command) -> None:
        """Apply ``command`` to this node and every descendant, pre-order."""
        from .commands import execute_on

        execute_on(self, command)

    def depth_first(self) -> Iterator[Node]:
        """Traverse the subtree depth-first, yielding self then children."""
        yield self
        for child in self.iter_children():
            yield from child.depth_first()

    @abstractmethod
    def iter_children(self) -> Iterator[Node]:
        raise NotImplementedError

    @abstractmethod
    def render(self, *, merge_classes: bool = False) -> str:
        raise NotImplementedError

    @abstractmethod
    def inner_render(self, *, merge_classes: bool = False) -> str:
        raise NotImplementedError

    @abstractmethod
    def accept(self, visitor: Visitor) -> None:
        raise NotImplementedError

    @property
    def outer_markup(self) -> str:
        return self.render()

    @property
    def inner_markup(self) -> str:
        return self.inner_render()


@dataclass(eq=False)
class TextNode(_NodeBase):
    """Leaf node holding raw, unescaped text."""

    text: str
    hooks: LifecycleHooks = field(default_factory=LifecycleHooks, repr=False)

    def render(self, *, merge_classes: bool = False) -> str:
        return self.text

    def inner_render(self, *, merge_classes: bool = False) -> str:
        return self.text

    def iter_children(self) -> Iterator[Node]:
        return iter(())

    def accept(self, visitor: Visitor) -> None:
        visitor.visit(self)


@dataclass(eq=False)
class ElementNode(_NodeBase):
    """Tagged element owning an ordered list of child nodes.

    ``display`` is descriptive metadata only. ``closing`` decides whether the
    element renders as ``<tag />`` (children kept but never rendered) or as
    an open/close pair around its inner markup.
    """

    tag_name: str
    display: DisplayType = DisplayType.BLOCK
    closing: ClosingType = ClosingType.CLOSING_TAG
    classes: List[str] = field(default_factory=list)
    children: List["Node"] = field(default_factory=list)
    hooks: LifecycleHooks = field(default_factory=LifecycleHooks, repr=False)

    def __post_init__(self) -> None:
        if not self.tag_name:
            raise InvalidNodeError("ElementNode requires a non-empty tag_name")
        self.display = DisplayType(self.display)
        self.closing = ClosingType(self.closing)

    @property
    def is_single_tag(self) -> bool:
        return self.closing is ClosingType.SINGLE_TAG

    def _render_classes(self, merge_classes: bool) -> str:
        if merge_classes:
            if not self.classes:
                return ""
            return f' class="{" ".join(self.classes)}"'
        return "".join(f' class="{name}"' for name in self.classes)

    def render(self, *, merge_classes: bool = False) -> str:
        parts: List[str] = [f"<{self.tag_name}", self._render_classes(merge_classes)]
        if self.is_single_tag:
            parts.append(" />")
            return "".join(parts)
        parts.append(">")
        parts.append(self.inner_render(merge_classes=merge_classes))
        parts.append(f"</{self.tag_name}>")
        return "".join(parts)

    def inner_render(self, *, merge_classes: bool = False) -> str:
        return "".join(child.render(merge_classes=merge_classes) for child in self.children)

    def iter_children(self) -> Iterator[Node]:
        for child in self.children:
            yield child

    def accept(self, visitor: Visitor) -> None:
        visitor.visit(self)
        for child in self.children:
            child.accept(visitor)


Node = Union[TextNode, ElementNode]


__all__ = ["ClosingType", "DisplayType", "ElementNode", "Node", "TextNode"]
