#!/usr/bin/env python3
"""Territory War - Main entry point.

A turn-based territorial-conquest game: territories held by colored armies
fight one dice round at a time while players chase randomly drawn missions.
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from territory_war.config import GameSettings
from territory_war.engine.session import GameSession
from territory_war.interface.levels import run_adventurer, run_master, run_menu, run_novice
from territory_war.utils.constants import DEFAULT_TERRITORY_COUNT

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Territory War - Dice Combat and Missions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                          # Choose a level from the menu
  %(prog)s --level master           # Jump straight into the master level
  %(prog)s --level master --seed 7  # Reproducible dice and missions
  %(prog)s --tui                    # Master level in the terminal user interface
        """,
    )
    parser.add_argument(
        "--level",
        choices=["menu", "novice", "adventurer", "master"],
        default="menu",
        help="Level to play: menu=choose interactively (default: menu)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for dice and missions (default: random)",
    )
    parser.add_argument(
        "--territories",
        type=int,
        default=DEFAULT_TERRITORY_COUNT,
        help=f"Number of territories per level (default: {DEFAULT_TERRITORY_COUNT})",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--tui",
        action="store_true",
        help="Play the master level in the terminal user interface (TUI)",
    )
    return parser


def configure_logging(settings: GameSettings) -> None:
    # Rolls and mission checks log at INFO/DEBUG
    log_level = logging.DEBUG if settings.debug else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def run(settings: GameSettings) -> None:
    """Start the requested level."""
    rng = settings.make_rng()
    count = settings.territory_count

    if settings.tui:
        # Textual is only needed for the TUI
        from territory_war.interface.tui_app import TerritoryWarTUI

        TerritoryWarTUI(GameSession.master(rng, count)).run(mouse=False)
    elif settings.level == "novice":
        run_novice(count)
    elif settings.level == "adventurer":
        run_adventurer(rng, count)
    elif settings.level == "master":
        run_master(rng, count)
    else:
        run_menu(rng, count)


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = GameSettings.from_args(args)
    except ValidationError as e:
        print(f"Error: invalid options\n{e}", file=sys.stderr)
        return 2

    configure_logging(settings)
    logger.debug("Starting with settings %s", settings)

    try:
        run(settings)
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user. Exiting...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
