"""Locations of the game world: rooms, passages and their default behaviour."""

from __future__ import annotations

from .objects import Character, Command, GameObject, Item, NullCommand

_OPPOSITES = {
    "north": "south",
    "south": "north",
    "east": "west",
    "west": "east",
    "up": "down",
    "down": "up",
    "in": "out",
    "out": "in",
}


def opposite_direction(direction: str) -> str:
    """Return the direction opposite to *direction*, or "unknown_direction"."""
    return _OPPOSITES.get(direction, "unknown_direction")


class Location(GameObject):
    """A place that runs a command when entered."""

    def __init__(
        self,
        name: str,
        description: str,
        enter_command: Command | None = None,
    ) -> None:
        super().__init__(name, description)
        self.enter_command: Command = (
            enter_command if enter_command is not None else NullCommand()
        )

    def enter(self) -> None:
        """Run the location's enter command."""
        self.enter_command.execute()


class RoomDefaultEnterCommand(Command):
    """Describe a room and list the items lying in it."""

    def execute(self) -> None:
        room = self.game_object
        print(room.description)
        if room.items:
            print("You see the following item(s) in this room:")
            for item in room.items:
                print(f"- {item.name}")


class Room(Location):
    """A room holding items and passages leading elsewhere."""

    def __init__(
        self,
        name: str,
        description: str,
        enter_command: Command | None = None,
    ) -> None:
        super().__init__(name, description, enter_command)
        if enter_command is None:
            self.enter_command = RoomDefaultEnterCommand(self)
        self.items: list[Item] = []
        self.characters: list[Character] = []
        self.passages: dict[str, Passage] = {}

    def add_item(self, item: Item) -> None:
        self.items.append(item)

    def remove_item(self, name: str) -> None:
        """Remove the first item called *name*, if there is one."""
        self.retrieve_item(name)

    def get_item(self, name: str) -> Item | None:
        return next((item for item in self.items if item.name == name), None)

    def retrieve_item(self, name: str) -> Item | None:
        """Remove and return the first item called *name*, or None."""
        item = self.get_item(name)
        if item is not None:
            self.items.remove(item)
        return item

    def add_passage(self, direction: str, passage: Passage) -> None:
        self.passages[direction] = passage

    def remove_passage(self, direction: str) -> None:
        self.passages.pop(direction, None)

    def get_passage(self, direction: str) -> Passage:
        """Return the passage in *direction*, or a passage back into this room."""
        try:
            return self.passages[direction]
        except KeyError:
            print(f"It is impossible to go {direction}!")
            return NullPassage(self)


class PassageDefaultEnterCommand(Command):
    """Walk through a passage into the room it leads to."""

    def execute(self) -> None:
        self.game_object.to_room.enter()


class Passage(Location):
    """A one-way connection between two rooms."""

    def __init__(
        self,
        name: str,
        description: str,
        from_room: Room,
        to_room: Room,
        enter_command: Command | None = None,
    ) -> None:
        super().__init__(name, description, enter_command)
        if enter_command is None:
            self.enter_command = PassageDefaultEnterCommand(self)
        self.from_room = from_room
        self.to_room = to_room

    @staticmethod
    def create_basic_passage(
        from_room: Room,
        to_room: Room,
        direction: str,
        bidirectional: bool = True,
    ) -> None:
        """Connect two rooms in *direction*, and back again if bidirectional."""
        passage_name = f"{from_room.name}_to_{to_room.name}"
        description = "A totally normal passageway."
        from_room.add_passage(
            direction, Passage(passage_name, description, from_room, to_room)
        )
        if bidirectional:
            to_room.add_passage(
                opposite_direction(direction),
                Passage(passage_name, description, to_room, from_room),
            )


class NullRoom(Room):
    """A room that is nowhere."""

    def __init__(self) -> None:
        super().__init__("Nowhere", "This is a nonplace.", NullCommand())


class NullPassage(Passage):
    """A passage that leads straight back into the room it starts from."""

    def __init__(self, from_room: Room) -> None:
        super().__init__("null", "Time is a flat circle.", from_room, from_room)