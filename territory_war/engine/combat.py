"""Combat resolution.

One call resolves exactly one round between two territories:
1. Attacker and defender each roll one six-sided die
2. Ties favor the attacker
3. The loser of the round loses one troop (never below zero)
4. A defender emptied by the attack is conquered; the attacker moves one
   troop in if it can spare one

Recoloring a conquered territory is left to the caller (see GameSession),
the resolver only does troop arithmetic.
"""

from dataclasses import dataclass

from ..models.registry import TerritoryRegistry
from ..models.territory import Territory
from ..utils.constants import DIE_FACES
from ..utils.rng import GameRNG


@dataclass
class CombatOutcome:
    """Result of a single combat round.

    Attributes:
        attack_roll: Attacker's die (1-6)
        defense_roll: Defender's die (1-6)
        attacker_won: True if attack_roll >= defense_roll
        conquered: True if the defender was emptied by this round
        troops_transferred: Troops moved into the conquered territory (0 or 1)
    """

    attack_roll: int
    defense_roll: int
    attacker_won: bool
    conquered: bool
    troops_transferred: int


def apply_round(
    attacker: Territory, defender: Territory, attack_roll: int, defense_roll: int
) -> CombatOutcome:
    """Apply the troop rules for one round with the given dice.

    Mutates both territories in place.

    Combat rules:
    - attack_roll >= defense_roll: defender loses 1 troop
      - defender reaches 0: conquered; if attacker has more than 1 troop,
        exactly 1 moves in (attacker -1, defender = 1), otherwise the
        territory stays empty
    - attack_roll < defense_roll: attacker loses 1 troop

    Args:
        attacker: Attacking territory
        defender: Defending territory
        attack_roll: Attacker's die value
        defense_roll: Defender's die value

    Returns:
        CombatOutcome describing what happened
    """
    if attack_roll < defense_roll:
        # Defender wins
        attacker.troops = max(attacker.troops - 1, 0)
        return CombatOutcome(
            attack_roll=attack_roll,
            defense_roll=defense_roll,
            attacker_won=False,
            conquered=False,
            troops_transferred=0,
        )

    # Attacker wins (including ties)
    defender.troops = max(defender.troops - 1, 0)
    if defender.troops > 0:
        return CombatOutcome(
            attack_roll=attack_roll,
            defense_roll=defense_roll,
            attacker_won=True,
            conquered=False,
            troops_transferred=0,
        )

    transferred = 0
    if attacker.troops > 1:
        attacker.troops -= 1
        defender.troops = 1
        transferred = 1

    return CombatOutcome(
        attack_roll=attack_roll,
        defense_roll=defense_roll,
        attacker_won=True,
        conquered=True,
        troops_transferred=transferred,
    )


class CombatResolver:
    """Resolves combat rounds between territories of a registry.

    Preconditions (distinct, valid indices and an attacker with troops) are
    checked by the caller with ``validate_attack`` before calling ``resolve``.
    """

    def __init__(self, registry: TerritoryRegistry, rng: GameRNG):
        """Initialize resolver.

        Args:
            registry: Registry whose territories are mutated by combat
            rng: Random source for dice rolls
        """
        self.registry = registry
        self.rng = rng

    def roll_dice(self) -> tuple[int, int]:
        """Roll attacker die then defender die."""
        attack_roll = self.rng.randint(1, DIE_FACES)
        defense_roll = self.rng.randint(1, DIE_FACES)
        return attack_roll, defense_roll

    def resolve(self, attacker_index: int, defender_index: int) -> CombatOutcome:
        """Resolve one combat round.

        Args:
            attacker_index: Registry index of the attacking territory
            defender_index: Registry index of the defending territory

        Returns:
            CombatOutcome for the round
        """
        attacker = self.registry.get(attacker_index)
        defender = self.registry.get(defender_index)
        attack_roll, defense_roll = self.roll_dice()
        return apply_round(attacker, defender, attack_roll, defense_roll)
