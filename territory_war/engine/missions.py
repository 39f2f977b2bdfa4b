"""Mission selection and evaluation."""

from typing import Optional, Sequence

from ..models.mission import ControlCount, EliminateColor, Mission, NoMission
from ..models.registry import TerritoryRegistry
from ..utils.constants import CONTROL_TARGET_COUNT, ELIMINATE_TARGET_COLOR
from ..utils.rng import GameRNG

DEFAULT_MISSIONS: tuple[Mission, ...] = (
    EliminateColor(ELIMINATE_TARGET_COLOR),
    ControlCount(CONTROL_TARGET_COUNT),
)


class MissionEngine:
    """Picks missions from a catalog and checks them against a registry."""

    def __init__(self, rng: GameRNG, catalog: Optional[Sequence[Mission]] = None):
        """Initialize mission engine.

        Args:
            rng: Random source for mission selection
            catalog: Missions to choose from (defaults to DEFAULT_MISSIONS)

        Raises:
            ValueError: If the catalog is empty
        """
        self.rng = rng
        self.catalog = tuple(catalog) if catalog is not None else DEFAULT_MISSIONS
        if not self.catalog:
            raise ValueError("Mission catalog cannot be empty")

    def generate_random(self) -> Mission:
        """Pick a mission uniformly from the catalog."""
        return self.rng.choice(self.catalog)

    def evaluate(self, registry: TerritoryRegistry, mission: Mission) -> bool:
        """Check whether the registry currently satisfies a mission.

        Mission rules:
        - EliminateColor(c): every territory whose color contains c
          (case-insensitive) has 0 troops; true if no territory matches
        - ControlCount(k): at least k territories of any color have troops
        - NoMission: never satisfied

        Args:
            registry: Current territory registry (not modified)
            mission: Mission to check

        Returns:
            True if the mission is accomplished
        """
        if isinstance(mission, EliminateColor):
            return all(not t.has_troops for t in registry.matching_color(mission.color))
        if isinstance(mission, ControlCount):
            # Counts every color, not only the player's
            return registry.count_with_troops() >= mission.min_count
        if isinstance(mission, NoMission):
            return False
        raise TypeError(f"Unknown mission type: {type(mission).__name__}")
