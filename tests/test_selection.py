import pytest

from pictures_manager.models import Theme
from pictures_manager.selection import (
    Context,
    MainPaneDisplayType,
    StaticContext,
    protocol_for,
    resolve_theme,
)

PICTURES = ["p0", "p1", "p2", "p3", "p4", "p5", "p6"]


def _context() -> Context:
    return Context(main_pane_pictures=list(PICTURES))


def test_first_selection():
    context = _context()
    context.select_index(3, shift=True, ctrl=True)
    assert context.main_pane_selected_index == 3
    assert context.main_pane_selected_indices == [3]


def test_plain_click_replaces_selection():
    context = _context()
    context.select_index(1)
    context.select_index(4)
    assert context.main_pane_selected_index == 4
    assert context.main_pane_selected_indices == [4]


def test_shift_selects_range_and_keeps_anchor():
    context = _context()
    context.select_index(2)
    context.select_index(5, shift=True)
    assert context.main_pane_selected_indices == list(range(2, 6))
    assert context.main_pane_selected_index == 2


def test_shift_range_backwards():
    context = _context()
    context.select_index(5)
    context.select_index(2, shift=True)
    assert context.main_pane_selected_indices == list(range(2, 6))


def test_shift_ctrl_adds_range_and_moves_anchor():
    context = _context()
    context.select_index(0)
    context.select_index(5, ctrl=True)
    context.select_index(3, shift=True, ctrl=True)
    assert context.main_pane_selected_indices == sorted({0, *range(3, 6)})
    assert context.main_pane_selected_index == 3


def test_ctrl_toggles():
    context = _context()
    context.select_index(1)
    context.select_index(4, ctrl=True)
    assert context.main_pane_selected_indices == [1, 4]
    assert context.main_pane_selected_index == 4
    context.select_index(4, ctrl=True)
    assert context.main_pane_selected_indices == [1]
    assert context.main_pane_selected_index == 1


def test_ctrl_toggle_last_clears_index():
    context = _context()
    context.select_index(2)
    context.select_index(2, ctrl=True)
    assert context.main_pane_selected_indices == []
    assert context.main_pane_selected_index is None


def test_selected_ids():
    context = _context()
    assert context.get_selected_picture_ids() == []
    context.select_index(1)
    assert context.get_selected_picture_ids() == [PICTURES[1]]
    context.select_index(6, ctrl=True)
    assert context.get_selected_picture_ids() == [PICTURES[1], PICTURES[6]]


def test_selected_id_out_of_range_raises():
    context = Context(main_pane_pictures=["only"])
    context.select_index(3)
    with pytest.raises(IndexError):
        context.get_selected_picture_ids()


def test_protocols():
    assert protocol_for(True) == "https://reqimg.localhost"
    assert protocol_for(False) == "reqimg://localhost"


@pytest.mark.parametrize(
    ("requested", "light", "expected"),
    [
        (Theme.SYSTEM, True, Theme.LIGHT),
        (Theme.SYSTEM, False, Theme.DARK),
        (Theme.DARK, True, Theme.DARK),
        (Theme.LIGHT, False, Theme.LIGHT),
    ],
)
def test_resolve_theme(requested, light, expected):
    assert resolve_theme(requested, light) is expected


def test_display_type():
    display = MainPaneDisplayType.pictures_and_dirs(["a", "b"])
    assert display.root == ("a", "b")
    assert display.kind is MainPaneDisplayType.Kind.PICTURES_AND_DIRS
    assert MainPaneDisplayType().kind is MainPaneDisplayType.Kind.NONE
    with pytest.raises(ValueError):
        MainPaneDisplayType(MainPaneDisplayType.Kind.NONE, ("a",))


def test_defaults():
    context = Context()
    assert context.theme is Theme.SYSTEM
    assert context.main_pane_selected_index is None
    assert StaticContext().protocol == ""