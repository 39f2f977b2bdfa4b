"""Game engine components."""

from .combat import CombatOutcome, CombatResolver, apply_round
from .missions import DEFAULT_MISSIONS, MissionEngine
from .session import CombatReport, GameSession, MissionState
from .validation import validate_attack

__all__ = [
    "CombatOutcome",
    "CombatResolver",
    "apply_round",
    "DEFAULT_MISSIONS",
    "MissionEngine",
    "CombatReport",
    "GameSession",
    "MissionState",
    "validate_attack",
]
