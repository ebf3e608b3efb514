"""The player character."""

from __future__ import annotations

from typing import ClassVar

from .objects import Character, Item
from .world import NullRoom, Room


class Player(Character):
    """The person playing the game, carrying items and standing in a room."""

    _instance: ClassVar[Player | None] = None

    def __init__(self) -> None:
        super().__init__(
            "You",
            "You are a person, alike in dignity to any other, but uniquely you.",
        )
        self.current_room: Room = NullRoom()

    @classmethod
    def instance(cls) -> Player:
        """Return the shared player, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get_item(self, name: str) -> Item | None:
        return next((item for item in self.inventory if item.name == name), None)

    def add_item(self, item: Item) -> None:
        self.inventory.append(item)

    def remove_item(self, name: str) -> None:
        """Drop the first carried item called *name*, if there is one."""
        self.retrieve_item(name)

    def retrieve_item(self, name: str) -> Item | None:
        """Remove and return the first carried item called *name*, or None."""
        item = self.get_item(name)
        if item is not None:
            self.inventory.remove(item)
        return item

    def print_inventory(self) -> None:
        if not self.inventory:
            print("You are not carrying anything.")
            return
        print("You are carrying:")
        for item in self.inventory:
            print(f"- {item.name}")