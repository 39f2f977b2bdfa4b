"""Boundary checks run before a combat round is resolved."""

from ..models.errors import InsufficientTroopsError, InvalidSelfAttackError
from ..models.registry import TerritoryRegistry


def validate_attack(
    registry: TerritoryRegistry, attacker_index: int, defender_index: int
) -> None:
    """Check that an attack request can be handed to the combat resolver.

    Checks, in order:
    - Both indices are inside the registry
    - Attacker and defender differ
    - Attacker has at least one troop

    Args:
        registry: Territory registry
        attacker_index: Index of the attacking territory (0-based)
        defender_index: Index of the defending territory (0-based)

    Raises:
        IndexOutOfRangeError: If either index is invalid
        InvalidSelfAttackError: If the indices are equal
        InsufficientTroopsError: If the attacker has no troops
    """
    attacker = registry.get(attacker_index)
    registry.get(defender_index)

    if attacker_index == defender_index:
        raise InvalidSelfAttackError(attacker_index)

    if attacker.troops <= 0:
        raise InsufficientTroopsError(attacker.name)
