"""Game session: the level controller that owns the registry.

The session is the boundary between the interactive layer and the pure
combat/mission core. It validates attack requests, runs the resolver,
applies the conquest recoloring and tracks the mission lifecycle:

    ASSIGNED --check--> FAILED (attack or check again)
    ASSIGNED --check--> SUCCEEDED --reroll--> ASSIGNED (new mission)
                                  --retain--> ASSIGNED (same mission)

There is no terminal state; the caller decides when the session ends.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..models.mission import Mission, NoMission
from ..models.registry import TerritoryRegistry
from ..utils.constants import DEFAULT_TERRITORY_COUNT
from ..utils.rng import GameRNG
from .combat import CombatOutcome, CombatResolver
from .missions import MissionEngine
from .validation import validate_attack

logger = logging.getLogger(__name__)


class MissionState(Enum):
    """Where the current mission is in its lifecycle."""

    ASSIGNED = "assigned"
    FAILED = "failed"
    SUCCEEDED = "succeeded"


@dataclass
class CombatReport:
    """Record of a combat round as seen by the session.

    Attributes:
        attacker_index: Registry index of the attacker (0-based)
        defender_index: Registry index of the defender (0-based)
        attacker_name: Attacker's territory name
        defender_name: Defender's territory name
        attacker_color: Attacker's color
        defender_color_before: Defender's color before the round
        defender_color_after: Defender's color after recoloring (if any)
        attacker_troops_before: Attacker troops before the round
        defender_troops_before: Defender troops before the round
        attacker_troops_after: Attacker troops after the round
        defender_troops_after: Defender troops after the round
        outcome: Raw resolver outcome (dice, winner, conquest, transfer)
    """

    attacker_index: int
    defender_index: int
    attacker_name: str
    defender_name: str
    attacker_color: str
    defender_color_before: str
    defender_color_after: str
    attacker_troops_before: int
    defender_troops_before: int
    attacker_troops_after: int
    defender_troops_after: int
    outcome: CombatOutcome

    @property
    def recolored(self) -> bool:
        return self.defender_color_before != self.defender_color_after


@dataclass
class GameSession:
    """State for one level of play.

    Attributes:
        registry: Territory registry owned by this session
        rng: Random source shared by dice and mission selection
        recolor_on_conquest: If True, a conquered territory takes the
            attacker's color
        mission: Current mission (NoMission when missions are not played)
        mission_engine: Mission catalog/evaluator (created from rng if omitted)
        mission_state: Lifecycle state of the current mission
        history: Combat reports in the order they happened
    """

    registry: TerritoryRegistry
    rng: GameRNG
    recolor_on_conquest: bool = True
    mission: Mission = field(default_factory=NoMission)
    mission_engine: Optional[MissionEngine] = None
    mission_state: MissionState = MissionState.ASSIGNED
    history: List[CombatReport] = field(default_factory=list)

    def __post_init__(self):
        if self.mission_engine is None:
            self.mission_engine = MissionEngine(self.rng)
        self.resolver = CombatResolver(self.registry, self.rng)

    @classmethod
    def master(
        cls, rng: GameRNG, size: int = DEFAULT_TERRITORY_COUNT
    ) -> "GameSession":
        """Demo layout, random mission, conquest recolors territories."""
        registry = TerritoryRegistry.demo(size)
        session = cls(registry=registry, rng=rng, recolor_on_conquest=True)
        session.mission = session.mission_engine.generate_random()
        logger.info("Master session started with mission %s", session.mission)
        return session

    @classmethod
    def adventurer(cls, registry: TerritoryRegistry, rng: GameRNG) -> "GameSession":
        """Player-registered territories, battles only, colors never change."""
        return cls(registry=registry, rng=rng, recolor_on_conquest=False)

    def attack(self, attacker_index: int, defender_index: int) -> CombatReport:
        """Validate and resolve one combat round.

        Args:
            attacker_index: Registry index of the attacker (0-based)
            defender_index: Registry index of the defender (0-based)

        Returns:
            CombatReport for the round

        Raises:
            AttackValidationError: If the request breaks a combat precondition
                (nothing is mutated in that case)
        """
        validate_attack(self.registry, attacker_index, defender_index)

        attacker = self.registry.get(attacker_index)
        defender = self.registry.get(defender_index)
        attacker_before = attacker.troops
        defender_before = defender.troops
        color_before = defender.color

        logger.debug(
            "Attack %s (%d) -> %s (%d)",
            attacker.name,
            attacker_before,
            defender.name,
            defender_before,
        )

        outcome = self.resolver.resolve(attacker_index, defender_index)

        if outcome.conquered and self.recolor_on_conquest:
            defender.color = attacker.color

        report = CombatReport(
            attacker_index=attacker_index,
            defender_index=defender_index,
            attacker_name=attacker.name,
            defender_name=defender.name,
            attacker_color=attacker.color,
            defender_color_before=color_before,
            defender_color_after=defender.color,
            attacker_troops_before=attacker_before,
            defender_troops_before=defender_before,
            attacker_troops_after=attacker.troops,
            defender_troops_after=defender.troops,
            outcome=outcome,
        )
        self.history.append(report)

        # Earlier mission checks no longer describe the board
        self.mission_state = MissionState.ASSIGNED

        logger.info(
            "Rolls %d vs %d: %s%s",
            outcome.attack_roll,
            outcome.defense_roll,
            "attacker wins" if outcome.attacker_won else "defender wins",
            f", {defender.name} conquered" if outcome.conquered else "",
        )
        return report

    def check_mission(self) -> bool:
        """Evaluate the current mission and update the lifecycle state."""
        accomplished = self.mission_engine.evaluate(self.registry, self.mission)
        self.mission_state = (
            MissionState.SUCCEEDED if accomplished else MissionState.FAILED
        )
        logger.info("Mission %s checked: %s", self.mission, self.mission_state.value)
        return accomplished

    def reroll_mission(self) -> Mission:
        """Replace an accomplished mission with a freshly drawn one.

        Raises:
            RuntimeError: If the current mission has not just succeeded
        """
        self._require_success("reroll")
        self.mission = self.mission_engine.generate_random()
        self.mission_state = MissionState.ASSIGNED
        logger.info("New mission assigned: %s", self.mission)
        return self.mission

    def retain_mission(self) -> Mission:
        """Keep an accomplished mission as the current one.

        Raises:
            RuntimeError: If the current mission has not just succeeded
        """
        self._require_success("retain")
        self.mission_state = MissionState.ASSIGNED
        return self.mission

    def _require_success(self, action: str) -> None:
        if self.mission_state is not MissionState.SUCCEEDED:
            raise RuntimeError(
                f"Cannot {action} mission in state '{self.mission_state.value}'"
            )
