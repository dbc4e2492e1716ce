import pytest

from pictures_manager.tree import TreeItem, TreeItemData, TreeView


@pytest.fixture
def data():
    c = TreeItemData("c", "C")
    b = TreeItemData("b", "B", (c,))
    d = TreeItemData("d", "D")
    return [TreeItemData("a", "A", (b, d)), TreeItemData("e", "E")]


def make_view(data, selected=()):
    received = []
    view = TreeView(data, received.append, selected)
    return view, received


def test_roots_follow_items(data):
    view, _ = make_view(data)
    roots = view.roots()
    assert [root.id for root in roots] == ["a", "e"]
    assert [root.path for root in roots] == [["a"], ["e"]]


def test_select_root_reports_its_id(data):
    view, received = make_view(data)
    view.roots()[1].select()
    assert received == [["e"]]


def test_closed_item_has_no_child_items(data):
    view, _ = make_view(data)
    assert view.roots()[0].child_items() == []


def test_open_item_children_paths(data):
    view, _ = make_view(data)
    root = view.roots()[0]
    assert root.toggle_open([]) is True
    assert root.is_open
    assert [child.path for child in root.child_items()] == [["a", "b"], ["a", "d"]]


def test_nested_select_builds_full_path(data):
    view, received = make_view(data, ["a", "b", "c"])
    root = view.roots()[0]
    assert root.is_open
    b = root.child_items()[0]
    assert b.is_open
    c = b.child_items()[0]
    c.select()
    assert received == [["a", "b", "c"]]


def test_selection_predicates(data):
    item = TreeItem(data[0].children[0], ["a"])
    assert item.path == ["a", "b"]
    assert item.is_selected_exactly(["a", "b"])
    assert not item.is_selected_exactly(["a", "b", "c"])
    assert item.is_selected(["a", "b", "c"])
    assert not item.is_selected(["a"])
    assert not item.is_selected(["a", "d"])
    assert item.is_children_selected(["a", "b", "c"])
    assert not item.is_children_selected(["a", "b"])


def test_closing_over_selected_child_selects_item(data):
    view, received = make_view(data, ["a", "b"])
    root = view.roots()[0]
    assert root.is_open
    assert root.toggle_open(view.selected_path) is False
    assert not root.is_open
    assert received == [["a"]]


def test_closing_without_selected_child_only_toggles(data):
    view, received = make_view(data)
    root = view.roots()[0]
    root.toggle_open([])
    assert root.toggle_open([]) is True
    assert not root.is_open
    assert received == []


def test_children_keep_state_between_calls(data):
    view, _ = make_view(data)
    root = view.roots()[0]
    root.toggle_open([])
    root.child_items()[0].toggle_open([])
    assert root.child_items()[0].is_open


def test_view_select_forwards_path(data):
    view, received = make_view(data)
    assert view.select(["x", "y"]) is True
    assert received == [["x", "y"]]


def test_context_menu_items(data):
    item = TreeItem(data[1])
    menu = item.context_menu()
    assert [entry.label for entry in menu.items] == ["Open in Finder", "", "Open in Terminal"]
    assert [entry.is_separator for entry in menu.items] == [False, True, False]
    assert menu.items[0].event == "contex_menu_tree_item_files"
    assert menu.items[2].event == "contex_menu_tree_item_terminal"
    assert menu.items[0].payload == "e"
    assert menu.items[2].payload == "e"