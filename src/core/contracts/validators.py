"""
JSON Schema Contract Validators

Модуль для валидации сериализованных результатов согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы (см. schemas.py):
- division_outcome
"""

from typing import Any, Dict, Iterator, Mapping, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from src.core.contracts.schemas import SCHEMA_DIVISION_OUTCOME, SCHEMAS


# =============================================================================
# SCHEMA REGISTRY
# =============================================================================


class SchemaRegistry:
    """
    Реестр JSON Schema контрактов.

    Каждая схема проходит meta-validation при первом запросе.
    """

    def __init__(self, schemas: Optional[Mapping[str, Dict[str, Any]]] = None):
        self._source: Mapping[str, Dict[str, Any]] = SCHEMAS if schemas is None else schemas

        # Кэш проверенных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Получение JSON Schema по имени.

        Args:
            schema_name: Имя схемы (например, 'division_outcome')

        Returns:
            Схема как dict

        Raises:
            KeyError: Если схема не зарегистрирована
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        if schema_name not in self._source:
            raise KeyError(f"Schema not registered: {schema_name}")

        schema = self._source[schema_name]

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema {schema_name}: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр реестра
_SCHEMA_REGISTRY = SchemaRegistry()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, registry: Optional[SchemaRegistry] = None):
        self.schema_name = schema_name
        self.schema = (registry or _SCHEMA_REGISTRY).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception"""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации"""
        return self.validator.iter_errors(data)


class DivisionOutcomeValidator(ContractValidator):
    """Валидатор для division_outcome контракта."""

    def __init__(self):
        super().__init__(SCHEMA_DIVISION_OUTCOME)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_division_outcome(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного DivisionOutcome.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    DivisionOutcomeValidator().validate(data)
