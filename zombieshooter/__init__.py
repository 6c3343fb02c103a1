"""Top-down zombie shooter: game logic for players, zombies and bullets, and a pygame front end."""

__version__ = "0.1.0"