"""
JSON Schema контракты (in-memory)

Схемы хранятся как Python dict: загрузка с диска не требуется.

Схемы:
- division_outcome — сериализованный DivisionOutcome (model_dump(mode="json"))
"""

from typing import Any, Dict, Final

SCHEMA_DIVISION_OUTCOME: Final[str] = "division_outcome"


DIVISION_OUTCOME_SCHEMA: Final[Dict[str, Any]] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$id": "division_outcome.json",
    "title": "DivisionOutcome",
    "type": "object",
    "additionalProperties": False,
    "required": ["status"],
    "properties": {
        "status": {"enum": ["SUCCESS", "FAILURE"]},
        "value": {"type": ["integer", "null"]},
        "error": {"enum": ["DIVIDE_BY_ZERO", None]},
        "message": {"type": ["string", "null"]},
    },
    # success XOR failure
    "oneOf": [
        {
            "properties": {
                "status": {"const": "SUCCESS"},
                "value": {"type": "integer"},
                "error": {"const": None},
                "message": {"const": None},
            },
            "required": ["value"],
        },
        {
            "properties": {
                "status": {"const": "FAILURE"},
                "value": {"const": None},
                "error": {"const": "DIVIDE_BY_ZERO"},
                "message": {"const": "cannot divide by zero"},
            },
            "required": ["error", "message"],
        },
    ],
}


SCHEMAS: Final[Dict[str, Dict[str, Any]]] = {
    SCHEMA_DIVISION_OUTCOME: DIVISION_OUTCOME_SCHEMA,
}
