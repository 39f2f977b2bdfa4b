"""Utility functions and constants for Territory War."""

from .constants import (
    CONTROL_TARGET_COUNT,
    DEFAULT_TERRITORY_COUNT,
    DEMO_COLORS,
    DEMO_NAMES,
    DEMO_TROOPS,
    DIE_FACES,
    ELIMINATE_TARGET_COLOR,
    MAX_COLOR_LENGTH,
    MAX_NAME_LENGTH,
    MIN_TERRITORY_COUNT,
    UNASSIGNED_OWNER,
)
from .rng import GameRNG

__all__ = [
    "CONTROL_TARGET_COUNT",
    "DEFAULT_TERRITORY_COUNT",
    "DEMO_COLORS",
    "DEMO_NAMES",
    "DEMO_TROOPS",
    "DIE_FACES",
    "ELIMINATE_TARGET_COLOR",
    "MAX_COLOR_LENGTH",
    "MAX_NAME_LENGTH",
    "MIN_TERRITORY_COUNT",
    "UNASSIGNED_OWNER",
    "GameRNG",
]
