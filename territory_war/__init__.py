"""Territory War - dice combat and mission engine for a territorial-conquest game."""

__version__ = "0.1.0"
