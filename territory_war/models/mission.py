"""Mission data models.

A mission is a tagged variant: ``NoMission``, ``EliminateColor`` or
``ControlCount``. Missions are immutable; the session replaces its mission
rather than editing it.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class NoMission:
    """No mission assigned. Never satisfied."""


@dataclass(frozen=True)
class EliminateColor:
    """Wipe out every army of a color.

    Satisfied when every territory whose color contains ``color``
    (case-insensitive) holds zero troops.
    """

    color: str

    def __post_init__(self):
        if not self.color:
            raise ValueError("EliminateColor needs a non-empty color")


@dataclass(frozen=True)
class ControlCount:
    """Hold at least ``min_count`` territories with troops."""

    min_count: int

    def __post_init__(self):
        if self.min_count < 0:
            raise ValueError(f"Invalid min_count: {self.min_count} (must be >= 0)")


Mission = Union[NoMission, EliminateColor, ControlCount]
