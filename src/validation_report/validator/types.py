"""
Shared types for the validator module.

This module exists to avoid circular imports between report.py and core.py.
"""

from dataclasses import dataclass
from enum import Enum


class ValidationStatus(Enum):
    """
    Aggregate severity of a validation run.

    Members are ordered by severity: PASS < WARN < ERROR.
    """
    PASS = "PASS"
    WARN = "WARN"
    ERROR = "ERROR"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    def __lt__(self, other: "ValidationStatus") -> bool:
        if not isinstance(other, ValidationStatus):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: "ValidationStatus") -> bool:
        if not isinstance(other, ValidationStatus):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: "ValidationStatus") -> bool:
        if not isinstance(other, ValidationStatus):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: "ValidationStatus") -> bool:
        if not isinstance(other, ValidationStatus):
            return NotImplemented
        return self.rank >= other.rank


_RANKS = {
    ValidationStatus.PASS: 0,
    ValidationStatus.WARN: 1,
    ValidationStatus.ERROR: 2,
}


def escalate(
    current: ValidationStatus,
    incoming: ValidationStatus,
    errors_recorded: bool,
) -> ValidationStatus:
    """
    Transition function for the aggregate status.

    Args:
        current: Status before the batch is applied
        incoming: Level of a non-empty batch (WARN or ERROR)
        errors_recorded: Whether any error message was recorded before the batch

    Returns:
        The status after the batch is applied
    """
    if incoming is ValidationStatus.ERROR:
        return ValidationStatus.ERROR
    if incoming is ValidationStatus.WARN:
        # Warnings never touch a report that already holds errors
        if errors_recorded:
            return current
        return ValidationStatus.WARN
    return current


@dataclass(frozen=True)
class InfoMessage:
    """An informational message paired with the level it was reported at."""
    level: ValidationStatus
    text: str
