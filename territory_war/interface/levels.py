"""Text-mode level loops.

Each level reads 1-based territory numbers from the player, converts them to
0-based indices and hands them to the game session. Validation failures are
printed and the player is re-prompted; nothing here is fatal.
"""

import logging

from ..engine.session import GameSession
from ..models.errors import AttackValidationError
from ..models.registry import TerritoryRegistry
from ..models.territory import Territory
from ..utils.constants import DEFAULT_TERRITORY_COUNT, MAX_COLOR_LENGTH, MAX_NAME_LENGTH
from ..utils.rng import GameRNG
from .display import DisplayManager
from .prompts import pause, read_int, read_text

logger = logging.getLogger(__name__)


def register_territories(count: int) -> TerritoryRegistry:
    """Prompt the player for every territory's name, color and troops."""
    territories = []
    for i in range(count):
        print(f"\nTerritory {i + 1} of {count}")
        name = read_text("  Territory name: ", MAX_NAME_LENGTH)
        color = read_text("  Army color: ", MAX_COLOR_LENGTH)
        troops = read_int("  Number of troops: ")
        territories.append(Territory(name=name, color=color, troops=troops))
    return TerritoryRegistry(territories)


def run_novice(count: int = DEFAULT_TERRITORY_COUNT) -> TerritoryRegistry:
    """Novice level: register the territories and show the map."""
    display = DisplayManager()
    print("\n=== Novice Level: Initial Territory Registration ===")
    registry = register_territories(count)

    print("\nRegistration complete. Showing the map:")
    print(display.format_map(registry))
    pause()
    return registry


def _attack_prompt(session: GameSession, display: DisplayManager) -> bool:
    """Ask for attacker/defender numbers and run one round.

    Returns:
        True if a round was resolved, False if the request was rejected
    """
    size = len(session.registry)
    attacker = read_int(f"Choose the attacking territory (1 to {size}): ") - 1
    defender = read_int(f"Choose the defending territory (1 to {size}): ") - 1

    try:
        report = session.attack(attacker, defender)
    except AttackValidationError as e:
        logger.debug("Attack rejected: %s", e)
        print(display.format_error(e, size))
        return False

    print()
    print(display.format_combat_report(report))
    return True


def run_adventurer(rng: GameRNG, count: int = DEFAULT_TERRITORY_COUNT) -> GameSession:
    """Adventurer level: registered territories fight; colors never change."""
    display = DisplayManager()
    print("\n=== Adventurer Level: Strategic Battles ===")
    print(f"Register the {count} territories:")
    session = GameSession.adventurer(register_territories(count), rng)

    while True:
        print(display.format_map(session.registry))
        print("Options:")
        print("  0 - Leave the Adventurer level")
        print("  1 - Attack")
        option = read_int("Choose an option: ")
        if option == 0:
            break
        if option != 1:
            print("Invalid option.")
            continue

        if _attack_prompt(session, display):
            print("Updating map...")
            pause()

    print("Leaving the Adventurer level.")
    pause()
    return session


def _mission_prompt(session: GameSession, display: DisplayManager) -> None:
    print("\nChecking mission...")
    accomplished = session.check_mission()
    print(display.format_mission_result(accomplished))
    if not accomplished:
        return

    answer = read_int("Generate a new mission? (1 = yes / 0 = no): ")
    if answer == 1:
        mission = session.reroll_mission()
        print("New mission generated: " + display.describe_mission(mission))
    else:
        session.retain_mission()
        print("Keeping the current mission.")


def run_master(rng: GameRNG, count: int = DEFAULT_TERRITORY_COUNT) -> GameSession:
    """Master level: demo layout, random mission, conquest recolors territories."""
    display = DisplayManager()
    print("\n=== Master Level: Missions ===")
    session = GameSession.master(rng, count)
    print("Mission assigned: " + display.describe_mission(session.mission))

    while True:
        print(display.format_map(session.registry))
        print("Master menu:")
        print("  1 - Attack")
        print("  2 - Check mission")
        print("  0 - Leave the Master level")
        option = read_int("Choose an option: ")
        if option == 0:
            break
        if option == 1:
            if _attack_prompt(session, display):
                pause()
        elif option == 2:
            _mission_prompt(session, display)
            pause()
        else:
            print("Invalid option.")

    print("Leaving the Master level.")
    pause()
    return session


def run_menu(rng: GameRNG, count: int = DEFAULT_TERRITORY_COUNT) -> None:
    """Top-level level selection loop. Returns when the player picks 0."""
    print("=" * 43)
    print("  Welcome to Territory War")
    print("  Choose the level you want to play:")
    print("    1 - Novice (registration only)")
    print("    2 - Adventurer (battles)")
    print("    3 - Master (missions)")
    print("    0 - Quit")
    print("=" * 43)

    while True:
        choice = read_int("Enter an option (0-3): ")
        if choice == 0:
            print("Exiting. Thanks for playing!")
            return
        if choice == 1:
            run_novice(count)
        elif choice == 2:
            run_adventurer(rng, count)
        elif choice == 3:
            run_master(rng, count)
        else:
            print("Invalid option. Try again.")
