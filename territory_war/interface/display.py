"""Text rendering for the territory map, combat reports and missions.

Every method returns a string; callers decide where it goes (stdout for
the text levels, a RichLog panel for the TUI).
"""

from ..engine.session import CombatReport
from ..models.errors import AttackValidationError, IndexOutOfRangeError
from ..models.mission import ControlCount, EliminateColor, Mission, NoMission
from ..models.registry import TerritoryRegistry

SEPARATOR = "-" * 47

# Event report emoji prefixes for visual differentiation
REPORT_EMOJIS = {
    "combat": "⚔️",
    "conquest": "🏳️",
    "mission": "🎯",
    "error": "❌",
}


class DisplayManager:
    """Formats game state for human players.

    Territory indices are shown 1-based, matching what players type.
    """

    def format_map(self, registry: TerritoryRegistry) -> str:
        """Render the territory table."""
        lines = [SEPARATOR, f"Current map ({len(registry)} territories):", SEPARATOR]
        for i, territory in enumerate(registry, start=1):
            lines.append(
                f"[{i}] Name: {territory.name:<20} | Color: {territory.color:<8} "
                f"| Troops: {territory.troops:>3}"
            )
        lines.append(SEPARATOR)
        return "\n".join(lines)

    def format_combat_report(self, report: CombatReport) -> str:
        """Narrate one combat round.

        Args:
            report: Combat report from GameSession.attack

        Returns:
            Multi-line narrative
        """
        outcome = report.outcome
        lines = [
            f"{REPORT_EMOJIS['combat']} Battle: {report.attacker_name} "
            f"({report.attacker_troops_before} troops) -> {report.defender_name} "
            f"({report.defender_troops_before} troops)",
            f"Dice: attacker rolled {outcome.attack_roll} | defender rolled {outcome.defense_roll}",
        ]

        if outcome.attacker_won:
            lines.append("Result: attacker wins the round. Defender loses 1 troop.")
        else:
            lines.append("Result: defender wins. Attacker loses 1 troop.")

        if outcome.conquered:
            lines.append(
                f"{REPORT_EMOJIS['conquest']} {report.defender_name} was emptied and is conquered!"
            )
            if outcome.troops_transferred:
                lines.append(
                    f"{outcome.troops_transferred} troop moved from "
                    f"{report.attacker_name} into {report.defender_name}."
                )
            else:
                lines.append(
                    f"{report.attacker_name} had no troops to spare; "
                    f"{report.defender_name} is left with 0 troops."
                )
            if report.recolored:
                lines.append(
                    f"{report.defender_name} now carries the color '{report.defender_color_after}'."
                )

        lines.append(
            f"Now: {report.attacker_name} {report.attacker_troops_after} troops, "
            f"{report.defender_name} {report.defender_troops_after} troops"
        )
        return "\n".join(lines)

    def describe_mission(self, mission: Mission) -> str:
        """One-line description of a mission."""
        if isinstance(mission, EliminateColor):
            return (
                f"DESTROY the {mission.color} army "
                f"(every '{mission.color}' territory must reach 0 troops)."
            )
        if isinstance(mission, ControlCount):
            return (
                f"CONQUER {mission.min_count} territories "
                f"(have {mission.min_count} territories with troops > 0)."
            )
        if isinstance(mission, NoMission):
            return "No mission."
        raise TypeError(f"Unknown mission type: {type(mission).__name__}")

    def format_mission_result(self, accomplished: bool) -> str:
        if accomplished:
            return f"{REPORT_EMOJIS['mission']} Congratulations, mission accomplished!"
        return "Mission not accomplished yet. Keep playing!"

    def format_error(self, error: AttackValidationError, size: int) -> str:
        """Format a validation failure for a player who types 1-based indices.

        Args:
            error: Validation error raised by the session
            size: Number of territories in the registry

        Returns:
            Error message prefixed with the error emoji
        """
        if isinstance(error, IndexOutOfRangeError):
            message = f"Invalid indices. Must be between 1 and {size}."
        else:
            message = error.message
        return f"{REPORT_EMOJIS['error']} {message}"
