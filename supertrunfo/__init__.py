"""Super Trunfo city card game for the console, in basic, adventurer and master modes."""

__version__ = "0.1.0"
__all__ = ["adventure", "basic", "cards", "master"]