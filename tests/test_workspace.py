import pytest

from agx.input import KeyEvent
from agx.split import SplitDirection
from agx.workspace import Workspace


class FakePane:
    def __init__(self, label):
        self.label = label
        self.keys = []
        self.polls = 0

    def poll(self):
        self.polls += 1

    def send_key(self, key):
        self.keys.append(key)


def dummy_workspace():
    return Workspace("test", SplitDirection.VERTICAL, [])


def test_focus_prev_at_zero_stays():
    ws = dummy_workspace()
    ws.focused = 0
    ws.focus_prev()
    assert ws.focused == 0


def test_focus_prev_decrements():
    ws = dummy_workspace()
    ws.focused = 2
    ws.focus_prev()
    assert ws.focused == 1


def test_focus_next_at_end_stays():
    ws = dummy_workspace()
    ws.focused = 0
    ws.focus_next()
    assert ws.focused == 0


def test_close_on_empty_is_noop():
    ws = dummy_workspace()
    ws.close_focused_pane()
    assert ws.is_empty()
    assert ws.focused == 0


def test_empty_workspace():
    assert dummy_workspace().is_empty()


def test_workspace_name():
    ws = Workspace("my-ws", SplitDirection.HORIZONTAL, [])
    assert ws.name == "my-ws"
    assert ws.split == SplitDirection.HORIZONTAL


def test_add_pane_focuses_new_pane():
    ws = dummy_workspace()
    ws.add_pane(FakePane("a"))
    ws.add_pane(FakePane("b"))
    assert ws.focused == 1
    assert not ws.is_empty()


def test_focus_next_moves_within_panes():
    ws = Workspace("w", panes=[FakePane("a"), FakePane("b")])
    ws.focus_next()
    assert ws.focused == 1
    ws.focus_next()
    assert ws.focused == 1


def test_close_last_focused_moves_focus_back():
    ws = Workspace("w", panes=[FakePane("a"), FakePane("b")], focused=1)
    ws.close_focused_pane()
    assert [pane.label for pane in ws.panes] == ["a"]
    assert ws.focused == 0
    ws.close_focused_pane()
    assert ws.is_empty()
    assert ws.focused == 0


def test_close_middle_keeps_index():
    ws = Workspace("w", panes=[FakePane("a"), FakePane("b"), FakePane("c")], focused=1)
    ws.close_focused_pane()
    assert [pane.label for pane in ws.panes] == ["a", "c"]
    assert ws.focused == 1


def test_send_key_goes_to_focused_only():
    a, b = FakePane("a"), FakePane("b")
    ws = Workspace("w", panes=[a, b], focused=1)
    key = KeyEvent("x")
    ws.send_key_to_focused(key)
    assert b.keys == [key]
    assert a.keys == []


def test_send_key_out_of_range_is_ignored():
    a = FakePane("a")
    ws = Workspace("w", panes=[a], focused=3)
    ws.send_key_to_focused(KeyEvent("x"))
    assert a.keys == []


def test_poll_reaches_every_pane():
    panes = [FakePane("a"), FakePane("b")]
    ws = Workspace("w", panes=panes)
    ws.poll()
    assert [pane.polls for pane in panes] == [1, 1]


def test_close_with_bad_focus_raises():
    ws = Workspace("w", panes=[FakePane("a")], focused=5)
    with pytest.raises(IndexError):
        ws.close_focused_pane()