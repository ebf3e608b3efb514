"""The house to explore and the command that starts the game."""

from __future__ import annotations

from collections.abc import Sequence

from .commands import KeyRequiredCommand
from .engine import ZOOrkEngine
from .objects import Item
from .player import Player
from .world import Passage, Room

_ROOMS = {
    "foyer": "You are in the foyer. There is a grand staircase and doors leading in all directions.",
    "library": "You are in a dusty old library. Bookcases line the walls.",
    "kitchen": "You are in the kitchen. Pots and pans hang from the ceiling.",
    "garden": "You are in a lush garden with blooming flowers.",
    "cellar": "You are in a dark, damp cellar. It smells of earth.",
    "observatory": "You are in an observatory with a large telescope.",
    "ballroom": "You are in a grand ballroom with a sparkling chandelier.",
    "bedroom": "You are in a cozy bedroom with a large bed and a window.",
    "attic": "You are in a cluttered attic filled with old trunks.",
    "secret-room": "You have found a secret room hidden behind a bookshelf!",
}

_PASSAGES = [
    ("foyer", "library", "north"),
    ("library", "observatory", "up"),
    ("foyer", "kitchen", "east"),
    ("kitchen", "garden", "south"),
    ("foyer", "cellar", "down"),
    ("foyer", "ballroom", "west"),
    ("ballroom", "bedroom", "north"),
    ("bedroom", "attic", "up"),
    ("library", "secret-room", "west"),
    ("garden", "kitchen", "north"),
    ("attic", "bedroom", "down"),
    ("cellar", "foyer", "up"),
    ("observatory", "library", "down"),
]


def build_world(player: Player) -> Room:
    """Build the house, place the player in the foyer and return the foyer."""
    rooms = {name: Room(name, description) for name, description in _ROOMS.items()}
    rooms["library"].add_item(Item("key", "A rusty key used to open a door."))

    foyer = rooms["foyer"]
    player.current_room = foyer

    for origin, destination, direction in _PASSAGES:
        Passage.create_basic_passage(rooms[origin], rooms[destination], direction, True)

    secret_room = rooms["secret-room"]
    secret_room.enter_command = KeyRequiredCommand(secret_room, "key", player)
    return foyer


def main(argv: Sequence[str] | None = None) -> int:
    """Play the game on standard input and output."""
    player = Player.instance()
    start = build_world(player)
    ZOOrkEngine(start, player).run()
    return 0