import unittest

from lightdom.errors import UnknownStateError
from lightdom.nodes import ElementNode, TextNode
from lightdom.signals import RecordingSink
from lightdom.states import ActiveState, InactiveState, state_for


class StateTest(unittest.TestCase):
    def test_states_emit_fixed_signal_for_any_node(self) -> None:
        sink = RecordingSink()
        active = ActiveState(sink)
        inactive = InactiveState(sink)

        active.handle(ElementNode("p"))
        active.handle(TextNode("x"))
        inactive.handle(ElementNode("div", classes=["a"]))

        self.assertEqual(
            sink.messages,
            ["Element is active", "Element is active", "Element is inactive"],
        )

    def test_handle_does_not_touch_node(self) -> None:
        node = ElementNode("p", classes=["a"], children=[TextNode("t")])
        before = node.render()
        ActiveState().handle(node)
        InactiveState().handle(node)
        self.assertEqual(node.render(), before)

    def test_state_for_resolves_names(self) -> None:
        self.assertIsInstance(state_for("active"), ActiveState)
        self.assertIsInstance(state_for(" Inactive "), InactiveState)

    def test_state_for_unknown_name(self) -> None:
        with self.assertRaises(UnknownStateError) as ctx:
            state_for("paused")
        self.assertIsInstance(ctx.exception, KeyError)
        self.assertEqual(str(ctx.exception), "Unknown state: 'paused'")


if __name__ == "__main__":
    unittest.main()
