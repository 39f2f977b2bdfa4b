"""Seedable RNG wrapper for deterministic gameplay."""

import random


class GameRNG:
    """Single source of randomness for dice rolls and mission picks.

    A session built from the same seed replays the same game. Anything that
    offers ``randint`` and ``choice`` with these signatures can be injected
    in its place (tests use a scripted stand-in).
    """

    def __init__(self, seed: int | None = None):
        self.seed = seed  # None seeds from system entropy
        self.rng = random.Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Inclusive on both ends, like random.randint."""
        return self.rng.randint(a, b)

    def choice(self, seq):
        return self.rng.choice(seq)
