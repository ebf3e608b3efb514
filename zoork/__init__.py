"""A small text adventure: rooms, passages, items, a player and a command loop."""

__version__ = "0.1.0"