import pytest

from lightdom.builder import build_node, load_tree, node_to_data
from lightdom.errors import InvalidNodeError
from lightdom.models import ElementSpec
from lightdom.nodes import ClosingType, DisplayType, ElementNode, TextNode

TREE_YAML = """
type: element
tag: p
classes: [paragraph]
children:
  - A
  - type: element
    tag: img
    display: inline
    closing: single
    children: [caption]
  - type: text
    text: B
"""


def test_load_tree_builds_nodes() -> None:
    root = load_tree(TREE_YAML)
    assert isinstance(root, ElementNode)
    assert root.render() == '<p class="paragraph">A<img />B</p>'
    image = root.children[1]
    assert isinstance(image, ElementNode)
    assert image.display is DisplayType.INLINE
    assert image.closing is ClosingType.SINGLE_TAG
    assert image.inner_render() == "caption"


def test_build_node_accepts_string_and_spec() -> None:
    text = build_node("hello")
    assert isinstance(text, TextNode)
    assert text.render() == "hello"

    element = build_node(ElementSpec(tag="div", classes=["a"]))
    assert element.render() == '<div class="a"></div>'


@pytest.mark.parametrize(
    "data",
    [
        {"type": "element", "tag": ""},
        {"type": "element", "tag": "p", "closing": "sometimes"},
        {"type": "comment", "text": "x"},
        {"type": "text"},
        {"type": "element", "tag": "p", "unknown": 1},
        42,
    ],
)
def test_build_node_rejects_invalid_data(data) -> None:
    with pytest.raises(InvalidNodeError):
        build_node(data)


def test_load_tree_rejects_empty_and_broken_yaml() -> None:
    with pytest.raises(InvalidNodeError):
        load_tree("")
    with pytest.raises(InvalidNodeError):
        load_tree("type: [unclosed")


def test_node_to_data_rebuilds_same_markup() -> None:
    root = load_tree(TREE_YAML)
    data = node_to_data(root)
    assert data["children"][0] == {"type": "text", "text": "A"}
    assert data["children"][1]["closing"] == "single"
    assert build_node(data).render() == root.render()


def test_missing_type_is_inferred_from_keys() -> None:
    root = build_node(
        {
            "tag": "div",
            "children": [{"tag": "span", "classes": ["x"], "children": [{"text": "in"}]}, "tail"],
        }
    )
    assert isinstance(root, ElementNode)
    assert root.render() == '<div><span class="x">in</span>tail</div>'


def test_mapping_without_type_tag_or_text_is_rejected() -> None:
    with pytest.raises(InvalidNodeError):
        build_node({"classes": ["x"]})
