"""Tests for combat resolution."""

import itertools

import pytest

from territory_war.engine.combat import CombatResolver, apply_round
from territory_war.models import Territory, TerritoryRegistry
from territory_war.utils import GameRNG


def pair(attacker_troops, defender_troops):
    attacker = Territory(name="Attacker", color="Vermelho", troops=attacker_troops)
    defender = Territory(name="Defender", color="Verde", troops=defender_troops)
    return attacker, defender


def test_attacker_wins_and_conquers_with_transfer():
    """3 vs 1, rolls 6/1: defender emptied, one troop moves in."""
    attacker, defender = pair(3, 1)

    outcome = apply_round(attacker, defender, 6, 1)

    assert outcome.attack_roll == 6
    assert outcome.defense_roll == 1
    assert outcome.attacker_won is True
    assert outcome.conquered is True
    assert outcome.troops_transferred == 1
    assert attacker.troops == 2
    assert defender.troops == 1


def test_tie_conquest_without_spare_troop():
    """1 vs 1, rolls 3/3: tie favors attacker, nothing to transfer."""
    attacker, defender = pair(1, 1)

    outcome = apply_round(attacker, defender, 3, 3)

    assert outcome.attacker_won is True
    assert outcome.conquered is True
    assert outcome.troops_transferred == 0
    assert attacker.troops == 1
    assert defender.troops == 0


def test_defender_wins():
    """2 vs 5, rolls 2/5: attacker loses one troop."""
    attacker, defender = pair(2, 5)

    outcome = apply_round(attacker, defender, 2, 5)

    assert outcome.attacker_won is False
    assert outcome.conquered is False
    assert outcome.troops_transferred == 0
    assert attacker.troops == 1
    assert defender.troops == 5


def test_attacker_wins_without_conquest():
    attacker, defender = pair(4, 3)

    outcome = apply_round(attacker, defender, 5, 2)

    assert outcome.attacker_won is True
    assert outcome.conquered is False
    assert attacker.troops == 4
    assert defender.troops == 2


def test_empty_defender_is_conquered_on_win():
    """A defender already at 0 stays clamped and is conquered."""
    attacker, defender = pair(2, 0)

    outcome = apply_round(attacker, defender, 4, 4)

    assert outcome.conquered is True
    assert outcome.troops_transferred == 1
    assert attacker.troops == 1
    assert defender.troops == 1


def test_empty_defender_can_still_win_the_round():
    attacker, defender = pair(1, 0)

    outcome = apply_round(attacker, defender, 1, 6)

    assert outcome.attacker_won is False
    assert attacker.troops == 0
    assert defender.troops == 0


@pytest.mark.parametrize("roll", range(1, 7))
def test_ties_always_favor_attacker(roll):
    attacker, defender = pair(3, 3)
    assert apply_round(attacker, defender, roll, roll).attacker_won is True


@pytest.mark.parametrize(
    "attacker_troops,defender_troops",
    list(itertools.product(range(1, 4), range(0, 4))),
)
def test_round_invariants_for_every_roll_pair(attacker_troops, defender_troops):
    """No negative troops, conquest iff the defender was emptied, transfer rules."""
    for attack_roll, defense_roll in itertools.product(range(1, 7), repeat=2):
        attacker, defender = pair(attacker_troops, defender_troops)

        outcome = apply_round(attacker, defender, attack_roll, defense_roll)

        assert attacker.troops >= 0
        assert defender.troops >= 0
        assert outcome.attacker_won == (attack_roll >= defense_roll)

        emptied = outcome.attacker_won and max(defender_troops - 1, 0) == 0
        assert outcome.conquered == emptied

        if outcome.conquered and attacker_troops > 1:
            assert outcome.troops_transferred == 1
            assert attacker.troops == attacker_troops - 1
            assert defender.troops == 1
        elif outcome.conquered:
            assert outcome.troops_transferred == 0
            assert attacker.troops == 1
            assert defender.troops == 0
        elif outcome.attacker_won:
            assert attacker.troops == attacker_troops
            assert defender.troops == defender_troops - 1
        else:
            assert attacker.troops == attacker_troops - 1
            assert defender.troops == defender_troops


class TestCombatResolver:
    """Test CombatResolver against a registry."""

    def test_resolve_uses_injected_dice(self, scripted_rng):
        registry = TerritoryRegistry.from_entries([("A", "Vermelho", 3), ("B", "Verde", 1)])
        resolver = CombatResolver(registry, scripted_rng(rolls=[6, 1]))

        outcome = resolver.resolve(0, 1)

        assert (outcome.attack_roll, outcome.defense_roll) == (6, 1)
        assert outcome.conquered is True
        assert registry.get(0).troops == 2
        assert registry.get(1).troops == 1

    def test_resolve_draws_attacker_die_first(self, scripted_rng):
        registry = TerritoryRegistry.from_entries([("A", "Vermelho", 2), ("B", "Verde", 5)])
        resolver = CombatResolver(registry, scripted_rng(rolls=[2, 5]))

        outcome = resolver.resolve(0, 1)

        assert outcome.attacker_won is False
        assert registry.get(0).troops == 1
        assert registry.get(1).troops == 5

    def test_resolve_leaves_colors_alone(self, scripted_rng):
        registry = TerritoryRegistry.from_entries([("A", "Vermelho", 3), ("B", "Verde", 1)])
        CombatResolver(registry, scripted_rng(rolls=[6, 1])).resolve(0, 1)
        assert registry.get(1).color == "Verde"

    def test_resolve_with_seeded_rng_stays_in_range(self):
        registry = TerritoryRegistry.demo()
        resolver = CombatResolver(registry, GameRNG(123))

        for _ in range(50):
            outcome = resolver.resolve(3, 1)
            assert 1 <= outcome.attack_roll <= 6
            assert 1 <= outcome.defense_roll <= 6
            assert all(t.troops >= 0 for t in registry)
            if registry.get(3).troops == 0:
                break

    def test_seeded_resolvers_agree(self):
        outcomes = []
        for _ in range(2):
            registry = TerritoryRegistry.demo()
            resolver = CombatResolver(registry, GameRNG(99))
            outcomes.append([resolver.resolve(1, 2) for _ in range(3)])
        assert outcomes[0] == outcomes[1]
