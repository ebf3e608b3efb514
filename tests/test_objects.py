import pytest

from zoork.objects import Character, Command, GameObject, Item, NullCommand


class _Recorder(Command):
    def __init__(self, game_object=None):
        super().__init__(game_object)
        self.calls = 0

    def execute(self):
        self.calls += 1


def test_game_object_keeps_name_and_description():
    obj = GameObject("lamp", "A brass lamp.")
    assert obj.name == "lamp"
    assert obj.description == "A brass lamp."


def test_game_object_attributes_are_mutable():
    obj = GameObject("lamp", "A brass lamp.")
    obj.name = "torch"
    assert obj.name == "torch"
    assert obj.description == "A brass lamp."


def test_character_starts_with_empty_inventory():
    character = Character("bob", "A person.")
    assert character.inventory == []
    assert character.name == "bob"


def test_characters_do_not_share_inventory():
    first = Character("a", "A.")
    second = Character("b", "B.")
    first.inventory.append(Item("key", "A key."))
    assert second.inventory == []


def test_command_is_abstract():
    with pytest.raises(TypeError):
        Command(None)


def test_null_command_prints_nothing_happens(capsys):
    command = NullCommand()
    command.execute()
    assert capsys.readouterr().out == "Nothing happens.\n"
    assert command.game_object is None


def test_item_without_command_says_nothing_happens(capsys):
    Item("key", "A rusty key used to open a door.").use()
    assert capsys.readouterr().out == "Nothing happens.\n"


def test_item_use_runs_its_command(capsys):
    recorder = _Recorder()
    item = Item("key", "A key.", recorder)
    item.use()
    item.use()
    assert recorder.calls == 2
    assert capsys.readouterr().out == ""


def test_item_use_command_can_be_replaced():
    recorder = _Recorder()
    item = Item("key", "A key.")
    item.use_command = recorder
    item.use()
    assert recorder.calls == 1