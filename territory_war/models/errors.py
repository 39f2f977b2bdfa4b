"""Validation errors raised at the combat boundary."""

from enum import Enum


class ErrorType(Enum):
    """Classification of attack validation failures."""

    INDEX_OUT_OF_RANGE = "index_out_of_range"
    INVALID_SELF_ATTACK = "invalid_self_attack"
    INSUFFICIENT_TROOPS = "insufficient_troops"


class AttackValidationError(Exception):
    """Raised when an attack request violates a combat precondition."""

    error_type: ErrorType

    def __init__(self, message: str):
        """Initialize validation error.

        Args:
            message: Human-readable error message
        """
        self.message = message
        super().__init__(message)


class IndexOutOfRangeError(AttackValidationError, IndexError):
    """Territory index outside the registry."""

    error_type = ErrorType.INDEX_OUT_OF_RANGE

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Invalid territory index {index} (must be 0-{size - 1})")


class InvalidSelfAttackError(AttackValidationError):
    """Attacker and defender are the same territory."""

    error_type = ErrorType.INVALID_SELF_ATTACK

    def __init__(self, index: int):
        self.index = index
        super().__init__("Attacker and defender cannot be the same territory")


class InsufficientTroopsError(AttackValidationError):
    """Attacking territory has no troops."""

    error_type = ErrorType.INSUFFICIENT_TROOPS

    def __init__(self, territory_name: str):
        self.territory_name = territory_name
        super().__init__(f"Attacking territory '{territory_name}' has no troops to attack with")
