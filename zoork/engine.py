"""The command loop that reads what the player types and acts on it."""

from __future__ import annotations

from collections.abc import Callable

from .player import Player
from .world import Room

InputFunc = Callable[[str], str]

_DIRECTION_ALIASES = {
    "n": "north",
    "s": "south",
    "e": "east",
    "w": "west",
    "u": "up",
    "d": "down",
}


def tokenize_string(text: str) -> list[str]:
    """Split *text* on single spaces and lower-case every word."""
    tokens = text.split(" ")
    if tokens[-1] == "":
        tokens.pop()
    return [token.lower() for token in tokens]


class ZOOrkEngine:
    """Runs the game from a starting room until the player quits."""

    def __init__(
        self,
        start: Room,
        player: Player | None = None,
        input_func: InputFunc | None = None,
    ) -> None:
        self.player = player if player is not None else Player.instance()
        self.game_over = False
        self._input_func = input_func
        self._handlers: dict[str, Callable[[list[str]], None]] = {
            "go": self._handle_go,
            "look": self._handle_look,
            "inspect": self._handle_look,
            "take": self._handle_take,
            "get": self._handle_take,
            "drop": self._handle_drop,
            "inventory": self._handle_inventory,
            "inv": self._handle_inventory,
            "quit": self._handle_quit,
            "use": self._handle_use,
        }
        self.player.current_room = start
        start.enter()

    def _read(self, prompt: str) -> str:
        reader = self._input_func if self._input_func is not None else input
        return reader(prompt)

    def run(self) -> None:
        """Read and act on commands until the game is over or input ends."""
        while not self.game_over:
            try:
                line = self._read("> ")
            except EOFError:
                break
            self.handle_line(line)

    def handle_line(self, line: str) -> None:
        """Act on one line of player input."""
        words = tokenize_string(line)
        if not words:
            print("I don't understand that command.")
            return
        command, arguments = words[0], words[1:]
        handler = self._handlers.get(command)
        if handler is None:
            print("I don't understand that command.")
            return
        handler(arguments)

    def _handle_go(self, arguments: list[str]) -> None:
        word = arguments[0] if arguments else ""
        direction = _DIRECTION_ALIASES.get(word, word)
        passage = self.player.current_room.get_passage(direction)
        self.player.current_room = passage.to_room
        passage.enter()

    def _handle_look(self, arguments: list[str]) -> None:
        room = self.player.current_room
        if not arguments:
            print(room.description)
            return
        target = arguments[0]
        item = room.get_item(target) or self.player.get_item(target)
        if item is not None:
            print(item.description)
        else:
            print(f'You don\'t see any "{target}" here.')

    def _handle_take(self, arguments: list[str]) -> None:
        if not arguments:
            print("Take what?")
            return
        name = arguments[0]
        item = self.player.current_room.retrieve_item(name)
        if item is not None:
            self.player.add_item(item)
            print(f"You take the {name}.")
        else:
            print(f"There is no {name} here.")

    def _handle_drop(self, arguments: list[str]) -> None:
        if not arguments:
            print("Drop what?")
            return
        name = arguments[0]
        item = self.player.retrieve_item(name)
        if item is not None:
            self.player.current_room.add_item(item)
            print(f"You drop the {name}.")
        else:
            print(f"You don't have a {name}.")

    def _handle_use(self, arguments: list[str]) -> None:
        if not arguments:
            print("Use what?")
            return
        name = arguments[0]
        item = self.player.get_item(name)
        if item is not None:
            item.use()
        else:
            print(f"You don't have a {name} to use.")

    def _handle_inventory(self, arguments: list[str]) -> None:
        self.player.print_inventory()

    def _handle_quit(self, arguments: list[str]) -> None:
        print("Are you sure you want to QUIT?")
        try:
            answer = self._read("> ")
        except EOFError:
            answer = ""
        words = answer.split()
        reply = words[0].lower() if words else ""
        if reply in ("y", "yes"):
            self.game_over = True