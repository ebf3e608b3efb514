"""Basic game objects: named things, characters, items and commands."""

from __future__ import annotations

from abc import ABC, abstractmethod


class GameObject:
    """Anything in the game world that has a name and a description."""

    def __init__(self, name: str, description: str) -> None:
        self.name = name
        self.description = description

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class Character(GameObject):
    """A game object that can carry items."""

    def __init__(self, name: str, description: str) -> None:
        super().__init__(name, description)
        self.inventory: list[Item] = []


class Command(ABC):
    """An action bound to a game object, run on demand."""

    def __init__(self, game_object: GameObject | None) -> None:
        self.game_object = game_object

    @abstractmethod
    def execute(self) -> None:
        """Carry out the action."""


class NullCommand(Command):
    """A command that does nothing but say so."""

    def __init__(self) -> None:
        super().__init__(None)

    def execute(self) -> None:
        print("Nothing happens.")


class Item(GameObject):
    """An object that can be picked up and, possibly, used."""

    def __init__(
        self,
        name: str,
        description: str,
        use_command: Command | None = None,
    ) -> None:
        super().__init__(name, description)
        self.use_command = use_command

    def use(self) -> None:
        """Run the item's use command, if it has one."""
        if self.use_command is not None:
            self.use_command.execute()
        else:
            print("Nothing happens.")