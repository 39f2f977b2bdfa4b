"""Command parser for the TUI command line.

Parses commands like "attack 1 3" into Command objects. Territory numbers
are typed 1-based and converted to 0-based registry indices; range checks
happen later, in the session.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CommandErrorType(Enum):
    """Classification of command input errors."""

    UNKNOWN_COMMAND = "unknown_command"
    SYNTAX_ERROR = "syntax_error"


class CommandParseError(Exception):
    """Raised when command parsing fails with classification."""

    def __init__(self, error_type: CommandErrorType, message: str):
        """Initialize parse error.

        Args:
            error_type: Classification of the error
            message: Human-readable error message
        """
        self.error_type = error_type
        self.message = message
        super().__init__(message)


@dataclass
class Command:
    """A parsed player command.

    Attributes:
        action: "attack", "mission", "reroll", "keep", "map", "help" or "quit"
        attacker: 0-based attacker index (attack only)
        defender: 0-based defender index (attack only)
    """

    action: str
    attacker: Optional[int] = None
    defender: Optional[int] = None


ATTACK_WORDS = ("attack", "atk", "a")

# Single-word commands and their aliases
SIMPLE_COMMANDS = {
    "mission": "mission",
    "m": "mission",
    "reroll": "reroll",
    "keep": "keep",
    "map": "map",
    "help": "help",
    "h": "help",
    "?": "help",
    "quit": "quit",
    "exit": "quit",
    "q": "quit",
}

_ATTACK_PATTERN = re.compile(r"^(?:attack|atk|a)\s+(\S+)\s+(?:to\s+|on\s+)?(\S+)$")


class CommandParser:
    """Parse command strings into Commands."""

    def parse(self, command: str) -> Command:
        """Parse a command string.

        Supported formats:
        - "attack <attacker> <defender>" (also "attack 1 to 3", "a 1 3")
        - "mission" / "m"
        - "reroll", "keep"
        - "map", "help", "quit"

        Args:
            command: Command string to parse

        Returns:
            Parsed Command

        Raises:
            CommandParseError: If the command is unknown or malformed
        """
        cmd = command.strip().lower()
        words = cmd.split()
        if not words:
            raise CommandParseError(CommandErrorType.SYNTAX_ERROR, "Empty command")

        first_word = words[0]
        if first_word in ATTACK_WORDS:
            return self._parse_attack(cmd)

        if first_word in SIMPLE_COMMANDS:
            if len(words) > 1:
                raise CommandParseError(
                    CommandErrorType.SYNTAX_ERROR,
                    f"'{first_word}' takes no arguments",
                )
            return Command(action=SIMPLE_COMMANDS[first_word])

        raise CommandParseError(
            CommandErrorType.UNKNOWN_COMMAND, f"Unknown command: '{first_word}'"
        )

    def _parse_attack(self, cmd: str) -> Command:
        """Parse 'attack <attacker> <defender>'.

        Raises:
            CommandParseError: If the territory numbers are missing or not integers
        """
        match = _ATTACK_PATTERN.match(cmd)
        if not match:
            raise CommandParseError(
                CommandErrorType.SYNTAX_ERROR,
                "Syntax error: invalid command format\n"
                "Correct format: attack <attacker> <defender>",
            )

        attacker_str, defender_str = match.groups()
        attacker = self._parse_number(attacker_str)
        defender = self._parse_number(defender_str)
        return Command(action="attack", attacker=attacker - 1, defender=defender - 1)

    def _parse_number(self, text: str) -> int:
        try:
            return int(text)
        except ValueError:
            raise CommandParseError(
                CommandErrorType.SYNTAX_ERROR,
                f"Invalid territory number: '{text}' is not a number",
            ) from None
