"""Data models for Territory War."""

from .errors import (
    AttackValidationError,
    ErrorType,
    IndexOutOfRangeError,
    InsufficientTroopsError,
    InvalidSelfAttackError,
)
from .mission import ControlCount, EliminateColor, Mission, NoMission
from .registry import TerritoryRegistry
from .territory import Territory, color_matches

__all__ = [
    "AttackValidationError",
    "ErrorType",
    "IndexOutOfRangeError",
    "InsufficientTroopsError",
    "InvalidSelfAttackError",
    "ControlCount",
    "EliminateColor",
    "Mission",
    "NoMission",
    "TerritoryRegistry",
    "Territory",
    "color_matches",
]
