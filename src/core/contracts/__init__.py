"""
Contract Validation Module

JSON Schema контракты для сериализованных результатов checked-арифметики.
"""

from .schemas import DIVISION_OUTCOME_SCHEMA, SCHEMA_DIVISION_OUTCOME, SCHEMAS
from .validators import (
    ContractValidator,
    DivisionOutcomeValidator,
    SchemaRegistry,
    validate_division_outcome,
)

__all__ = [
    # Schemas
    "DIVISION_OUTCOME_SCHEMA",
    "SCHEMA_DIVISION_OUTCOME",
    "SCHEMAS",
    # Classes
    "SchemaRegistry",
    "ContractValidator",
    "DivisionOutcomeValidator",
    # Functions
    "validate_division_outcome",
]
