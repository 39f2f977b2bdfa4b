"""Shared fixtures for Territory War tests."""

import pytest

from territory_war.models import Territory, TerritoryRegistry


class ScriptedRNG:
    """RNG stand-in that replays fixed values.

    ``rolls`` feed randint() in order; ``picks`` are indexes used by choice().
    """

    def __init__(self, rolls=(), picks=()):
        self.rolls = list(rolls)
        self.picks = list(picks)

    def randint(self, a: int, b: int) -> int:
        value = self.rolls.pop(0)
        assert a <= value <= b, f"scripted roll {value} outside [{a}, {b}]"
        return value

    def choice(self, seq):
        return seq[self.picks.pop(0)]


@pytest.fixture
def scripted_rng():
    """Factory for ScriptedRNG instances."""
    return ScriptedRNG


@pytest.fixture
def demo_registry():
    """Five-territory demo layout (Verde, Vermelho, Azul, Amarelo, Verde)."""
    return TerritoryRegistry.demo()


@pytest.fixture
def scripted_input(monkeypatch):
    """Feed lines to builtins.input; raises EOFError when exhausted."""

    def _install(lines):
        remaining = list(lines)

        def fake_input(prompt=""):
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        monkeypatch.setattr("builtins.input", fake_input)
        return remaining

    return _install
