"""Build node trees from declarative data (mappings or YAML text).

This is construction from structured data, not markup parsing.
"""

from __future__ import annotations

from typing import Any, Dict

import yaml
from pydantic import TypeAdapter, ValidationError

from .errors import InvalidNodeError, UnknownNodeTypeError
from .models import ElementSpec, NodeSpec, TextSpec, with_node_type
from .nodes import ElementNode, Node, TextNode

_NODE_SPEC: TypeAdapter[NodeSpec] = TypeAdapter(NodeSpec)


def _node_from_spec(spec: TextSpec | ElementSpec) -> Node:
    if isinstance(spec, TextSpec):
        return TextNode(spec.text)
    return ElementNode(
        tag_name=spec.tag,
        display=spec.display,
        closing=spec.closing,
        classes=list(spec.classes),
        children=[_node_from_spec(child) for child in spec.children],
    )


def build_node(data: Any) -> Node:
    """Validate ``data`` and construct the corresponding node tree.

    Accepts a mapping, a ``TextSpec``/``ElementSpec`` instance, or a plain
    string (shorthand for a text node). A mapping without ``type`` is
    inferred from its ``tag`` or ``text`` key.
    """
    if isinstance(data, (TextSpec, ElementSpec)):
        return _node_from_spec(data)
    if isinstance(data, str):
        return TextNode(data)
    try:
        spec = _NODE_SPEC.validate_python(with_node_type(data))
    except ValidationError as exc:
        raise InvalidNodeError(f"Invalid node data: {exc}") from exc
    return _node_from_spec(spec)


def load_tree(text: str) -> Node:
    """Parse YAML text describing a single root node."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise InvalidNodeError(f"Invalid YAML tree: {exc}") from exc
    if data is None:
        raise InvalidNodeError("Tree document is empty")
    return build_node(data)


def node_to_data(node: Node) -> Dict[str, Any]:
    if isinstance(node, TextNode):
        return {"type": "text", "text": node.text}
    if isinstance(node, ElementNode):
        return {
            "type": "element",
            "tag": node.tag_name,
            "display": node.display.value,
            "closing": node.closing.value,
            "classes": list(node.classes),
            "children": [node_to_data(child) for child in node.children],
        }
    raise UnknownNodeTypeError(node)


__all__ = ["build_node", "load_tree", "node_to_data"]
