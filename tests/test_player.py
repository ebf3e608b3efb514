from zoork.objects import Item
from zoork.player import Player
from zoork.world import NullRoom, Room


def test_instance_is_shared():
    first = Player.instance()
    assert first.name == "You"
    room = Room("hall", "A hall.")
    first.current_room = room
    second = Player.instance()
    assert second.current_room is room
    assert second is first


def test_new_player_defaults():
    player = Player()
    assert player.name == "You"
    assert player.description == (
        "You are a person, alike in dignity to any other, but uniquely you."
    )
    assert isinstance(player.current_room, NullRoom)
    assert player.inventory == []


def test_current_room_can_be_set():
    player = Player()
    room = Room("foyer", "Foyer.")
    player.current_room = room
    assert player.current_room is room


def test_add_and_get_item():
    player = Player()
    key = Item("key", "A key.")
    player.add_item(key)
    assert player.get_item("key") is key
    assert player.get_item("lamp") is None


def test_retrieve_item_removes_it():
    player = Player()
    key = Item("key", "A key.")
    player.add_item(key)
    assert player.retrieve_item("key") is key
    assert player.get_item("key") is None
    assert player.retrieve_item("key") is None


def test_remove_item_only_first_match():
    player = Player()
    first = Item("key", "First.")
    second = Item("key", "Second.")
    player.add_item(first)
    player.add_item(second)
    player.remove_item("key")
    assert player.inventory == [second]
    player.remove_item("missing")
    assert player.inventory == [second]


def test_print_empty_inventory(capsys):
    Player().print_inventory()
    assert capsys.readouterr().out == "You are not carrying anything.\n"


def test_print_inventory_lists_items_in_order(capsys):
    player = Player()
    player.add_item(Item("key", "A key."))
    player.add_item(Item("book", "A book."))
    player.print_inventory()
    assert capsys.readouterr().out == "You are carrying:\n- key\n- book\n"


def test_separate_players_have_separate_inventories():
    first = Player()
    second = Player()
    first.add_item(Item("key", "A key."))
    assert second.inventory == []