"""Wrap a rendered tree into a standalone HTML page."""

from __future__ import annotations

from jinja2 import Environment, StrictUndefined, select_autoescape
from markupsafe import Markup

from .models import RenderConfig
from .nodes import Node

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="{{ lang }}">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{{ title }}</title>
</head>
<body>
{{ body }}
</body>
</html>
"""


def jinja_env() -> Environment:
    """Create the Jinja environment used for page rendering."""

    return Environment(
        autoescape=select_autoescape(default_for_string=True),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )


def render_document(node: Node, config: RenderConfig | None = None) -> str:
    """Render ``node`` as the body of a minimal HTML5 document.

    The title and lang are escaped; the body is inserted as-is since node
    markup is never escaped.
    """

    config = config or RenderConfig()
    body = node.render(merge_classes=config.merge_classes)
    template = jinja_env().from_string(PAGE_TEMPLATE)
    return template.render(title=config.document_title, lang=config.lang, body=Markup(body))


__all__ = ["PAGE_TEMPLATE", "jinja_env", "render_document"]
