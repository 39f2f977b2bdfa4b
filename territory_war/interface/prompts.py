"""Input helpers that re-prompt until the player types something valid.

End of input (``EOFError``) is not retried; it propagates so the caller can
leave the current level.
"""

import re

# ASCII digits only; int() alone would also take "5_0" and other scripts' digits
_INTEGER = re.compile(r"\s*[+-]?[0-9]+\s*")


def read_text(prompt: str, max_length: int) -> str:
    """Read a non-empty line, truncated to ``max_length`` characters.

    Args:
        prompt: Text shown before the cursor
        max_length: Maximum number of characters kept

    Returns:
        The entered text (without trailing newline)
    """
    while True:
        text = input(prompt).rstrip("\r\n")
        if not text:
            print("Input cannot be empty. Try again.")
            continue
        return text[:max_length]


def read_int(prompt: str) -> int:
    """Read a non-negative integer.

    Rejects anything that is not a single integer, e.g. "5x", "2 3" or "5_0".

    Args:
        prompt: Text shown before the cursor

    Returns:
        The entered integer (>= 0)
    """
    while True:
        text = input(prompt)
        if not _INTEGER.fullmatch(text):
            print("Invalid input. Enter a whole number (e.g. 5).")
            continue
        value = int(text)
        if value < 0:
            print("Value cannot be negative. Enter 0 or more.")
            continue
        return value


def pause() -> None:
    """Wait for the player to press ENTER."""
    input("\nPress ENTER to continue...")
