from pictures_manager.contextmenu import ContextMenu, MenuIcon, MenuItem


def test_new_menu_is_empty():
    assert ContextMenu().to_dict() == {"items": []}


def test_add_item_keeps_order():
    menu = ContextMenu()
    menu.add_item(MenuItem(label="first"))
    menu.add_item(MenuItem(label="second"))
    assert [item.label for item in menu.items] == ["first", "second"]


def test_separator_is_default_item_flagged():
    menu = ContextMenu()
    menu.add_separator()
    assert menu.items == [MenuItem(is_separator=True)]
    data = menu.to_dict()["items"][0]
    assert data["is_separator"] is True
    assert data["label"] == ""
    assert data["sub_items"] == []
    assert data["icon"] is None


def test_item_to_dict_has_every_field():
    item = MenuItem(label="Open", event="ev", payload="id-1", shortcut="Cmd+O", checked=True)
    data = item.to_dict()
    assert set(data) == {
        "label",
        "disabled",
        "checked",
        "event",
        "payload",
        "shortcut",
        "icon",
        "sub_items",
        "is_separator",
    }
    assert data["label"] == "Open"
    assert data["event"] == "ev"
    assert data["payload"] == "id-1"
    assert data["shortcut"] == "Cmd+O"
    assert data["checked"] is True
    assert data["disabled"] is False


def test_icon_and_sub_items_nest():
    child = MenuItem(label="child")
    item = MenuItem(label="parent", icon=MenuIcon(path="icons/a.png"), sub_items=[child])
    data = item.to_dict()
    assert data["icon"] == {"path": "icons/a.png"}
    assert data["sub_items"] == [child.to_dict()]