"""Commands that guard entry to a room."""

from __future__ import annotations

from collections.abc import Callable

from .objects import Command, NullCommand
from .player import Player
from .world import Room

InputFunc = Callable[[str], str]


class KeyRequiredCommand(Command):
    """Keep a room locked until the player shows the right item."""

    def __init__(
        self,
        room: Room,
        required_item: str,
        player: Player,
        input_func: InputFunc | None = None,
    ) -> None:
        super().__init__(room)
        self.room = room
        self.required_item = required_item
        self.player = player
        self._input_func = input_func

    def _read(self, prompt: str) -> str:
        reader = self._input_func if self._input_func is not None else input
        try:
            return reader(prompt)
        except EOFError:
            return ""

    def _unlock(self) -> None:
        print(
            f"You unlock the door with the {self.required_item} "
            f"and enter {self.room.name}!"
        )
        self.room.enter_command = NullCommand()
        self.room.enter()

    def execute(self) -> None:
        if self.player.get_item(self.required_item) is not None:
            self._unlock()
            return

        print("The door is locked. Would you like to use an item? (yes/no)")
        answer = self._read("> ")
        if answer not in ("yes", "y"):
            print("You decide not to use an item.")
            return

        print("Which item would you like to use?")
        item_name = self._read("> ")
        if self.player.get_item(item_name) is None:
            print("You don't have that item.")
        elif item_name == self.required_item:
            self._unlock()
        else:
            print("That item doesn't unlock the door.")