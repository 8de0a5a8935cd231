import pytest

from lightdom.errors import InvalidNodeError
from lightdom.nodes import ClosingType, DisplayType, ElementNode, TextNode, _NodeBase


def _paragraph() -> ElementNode:
    return ElementNode(
        "p",
        DisplayType.BLOCK,
        ClosingType.CLOSING_TAG,
        ["paragraph"],
        [TextNode("A"), TextNode("B")],
    )


@pytest.mark.parametrize("text", ["", "plain", "<b>not escaped</b> & more"])
def test_text_node_markup_is_verbatim(text: str) -> None:
    node = TextNode(text)
    assert node.outer_markup == text
    assert node.inner_markup == text
    assert list(node.iter_children()) == []


def test_closing_tag_wraps_inner_markup() -> None:
    paragraph = _paragraph()
    assert paragraph.outer_markup == '<p class="paragraph">AB</p>'
    assert paragraph.inner_markup == "AB"
    assert paragraph.outer_markup == f'<p class="paragraph">{paragraph.inner_markup}</p>'


def test_nested_elements_render_in_child_order() -> None:
    inner = ElementNode("span", DisplayType.INLINE, classes=["x"], children=[TextNode("mid")])
    outer = ElementNode("div", children=[TextNode("a"), inner, TextNode("b")])
    assert outer.render() == '<div>a<span class="x">mid</span>b</div>'
    assert outer.inner_render() == 'a<span class="x">mid</span>b'


def test_single_tag_never_renders_children() -> None:
    image = ElementNode("img", DisplayType.INLINE, ClosingType.SINGLE_TAG, [], [TextNode("hidden")])
    assert image.outer_markup == "<img />"
    assert "hidden" not in image.outer_markup
    assert image.inner_markup == "hidden"
    assert [child.text for child in image.iter_children()] == ["hidden"]


def test_classes_keep_order_and_duplicates() -> None:
    node = ElementNode("div", classes=["b", "a", "b"])
    assert node.render() == '<div class="b" class="a" class="b"></div>'


def test_merge_classes_joins_into_one_attribute() -> None:
    inner = ElementNode("em", classes=["x", "y"], children=[TextNode("t")])
    outer = ElementNode("p", classes=["paragraph", "hl"], children=[inner])
    assert outer.render(merge_classes=True) == '<p class="paragraph hl"><em class="x y">t</em></p>'
    assert ElementNode("br", closing=ClosingType.SINGLE_TAG).render(merge_classes=True) == "<br />"


def test_render_is_idempotent() -> None:
    paragraph = _paragraph()
    assert paragraph.render() == paragraph.render()


def test_display_does_not_affect_rendering() -> None:
    block = ElementNode("span", DisplayType.BLOCK, children=[TextNode("x")])
    inline = ElementNode("span", DisplayType.INLINE, children=[TextNode("x")])
    assert block.render() == inline.render()


def test_iter_children_is_restartable() -> None:
    paragraph = _paragraph()
    first = [child.text for child in paragraph.iter_children()]
    second = [child.text for child in paragraph.iter_children()]
    assert first == second == ["A", "B"]


def test_depth_first_is_pre_order() -> None:
    leaf = TextNode("leaf")
    inner = ElementNode("span", children=[leaf])
    root = ElementNode("div", children=[inner, TextNode("tail")])
    order = list(root.depth_first())
    assert order[0] is root
    assert order[1] is inner
    assert order[2] is leaf
    assert order[3].render() == "tail"


def test_empty_tag_name_is_rejected() -> None:
    with pytest.raises(InvalidNodeError):
        ElementNode("")


def test_enum_values_are_coerced() -> None:
    node = ElementNode("hr", display="inline", closing="single")
    assert node.display is DisplayType.INLINE
    assert node.closing is ClosingType.SINGLE_TAG
    assert node.render() == "<hr />"


def test_node_base_is_abstract() -> None:
    with pytest.raises(TypeError):
        _NodeBase()  # type: ignore[abstract]
