"""Command-line interface for lightdom."""

import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional

from pydantic import ValidationError

from .builder import load_tree
from .commands import AddClassCommand, execute_on
from .document import render_document
from .errors import LightDomError
from .models import RenderConfig, load_render_config
from .nodes import ClosingType, DisplayType, ElementNode, Node, TextNode
from .signals import StreamSink, emit_warning
from .states import state_for
from .visitors import TextVisitor


def sample_paragraph() -> ElementNode:
    return ElementNode(
        "p",
        DisplayType.BLOCK,
        ClosingType.CLOSING_TAG,
        ["paragraph"],
        [TextNode("This is the first paragraph."), TextNode("This is the second paragraph.")],
    )


def sample_list() -> ElementNode:
    items: list[Node] = [TextNode("Item 1"), TextNode("Item 2"), TextNode("Item 3")]
    return ElementNode("ul", DisplayType.BLOCK, ClosingType.CLOSING_TAG, ["list"], items)


def _write_output(markup: str, output: Optional[Path]) -> None:
    if output is None:
        sys.stdout.write(markup if markup.endswith("\n") else markup + "\n")
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(markup, encoding="utf-8")


def _handle_demo(args: argparse.Namespace) -> None:
    sink = StreamSink()
    paragraph = sample_paragraph()
    unordered_list = sample_list()

    execute_on(paragraph, AddClassCommand("highlight", sink=sink))
    paragraph.accept(TextVisitor(sink))
    state_for("active", sink=sink).handle(paragraph)

    _write_output(paragraph.render() + "\n" + unordered_list.render(), None)


def _load_config(path: Optional[Path]) -> RenderConfig:
    if path is None:
        return RenderConfig()
    if not path.exists():
        raise SystemExit(f"Config file not found: {path}")
    try:
        return load_render_config(path.read_text(encoding="utf-8"))
    except (LightDomError, ValidationError) as exc:
        raise SystemExit(f"Invalid render config in {path}: {exc}") from exc


def _handle_render(args: argparse.Namespace) -> None:
    tree_path: Path = args.tree
    if not tree_path.exists():
        raise SystemExit(f"Tree file not found: {tree_path}")

    config = _load_config(args.config)
    if args.merge_classes:
        config = config.model_copy(update={"merge_classes": True})

    try:
        root = load_tree(tree_path.read_text(encoding="utf-8"))
    except LightDomError as exc:
        raise SystemExit(f"Invalid tree in {tree_path}: {exc}") from exc

    sink = StreamSink()
    for class_name in args.add_class:
        if not class_name:
            emit_warning("Ignoring empty --add-class value")
            continue
        execute_on(root, AddClassCommand(class_name, sink=sink))
    if args.visit:
        root.accept(TextVisitor(sink))
    if args.state:
        try:
            state_for(args.state, sink=sink).handle(root)
        except LightDomError as exc:
            raise SystemExit(str(exc)) from exc

    if args.document:
        markup = render_document(root, config)
    else:
        markup = root.render(merge_classes=config.merge_classes)
    _write_output(markup, args.out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lightdom",
        description="Build, mutate, inspect and render light markup trees.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="lightdom 0.1.0",
        help="Show the lightdom version and exit.",
    )

    subparsers = parser.add_subparsers(dest="command")

    demo_parser = subparsers.add_parser(
        "demo",
        help="Run the built-in sample tree.",
        description="Add a class to a sample paragraph, visit it, signal its state and print markup.",
    )
    demo_parser.set_defaults(func=_handle_demo)

    render_parser = subparsers.add_parser(
        "render",
        help="Render a tree described in YAML.",
        description="Load a YAML node tree, apply optional operations and print its markup.",
    )
    render_parser.add_argument("tree", type=Path, help="Path to the YAML tree file.")
    render_parser.add_argument("--config", type=Path, default=None, help="Path to a render config YAML file.")
    render_parser.add_argument(
        "--add-class",
        dest="add_class",
        action="append",
        default=[],
        metavar="NAME",
        help="Add a class to every element in the tree (repeatable).",
    )
    render_parser.add_argument("--visit", action="store_true", help="Run the text visitor over the tree.")
    render_parser.add_argument("--state", default=None, help="Signal a state for the root node (active|inactive).")
    render_parser.add_argument(
        "--merge-classes",
        dest="merge_classes",
        action="store_true",
        help="Render classes as one space-joined attribute.",
    )
    render_parser.add_argument("--document", action="store_true", help="Wrap the markup in a full HTML page.")
    render_parser.add_argument("--out", type=Path, default=None, help="Write output here instead of stdout.")
    render_parser.set_defaults(func=_handle_render)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main", "sample_list", "sample_paragraph"]
