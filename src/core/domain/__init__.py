"""
Domain models and value objects.

Contains the tagged result of checked arithmetic.
"""

from src.core.domain.outcome import (
    DIVIDE_BY_ZERO_MESSAGE,
    CheckedDivisionError,
    DivisionError,
    DivisionOutcome,
    OutcomeStatus,
)

__all__ = [
    # Constants
    "DIVIDE_BY_ZERO_MESSAGE",
    # Enums
    "DivisionError",
    "OutcomeStatus",
    # Exceptions
    "CheckedDivisionError",
    # Models
    "DivisionOutcome",
]
