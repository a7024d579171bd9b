"""
Outcome — Результат checked-арифметики

Immutable Pydantic модель, представляющая результат целочисленного деления:
либо успех (quotient), либо типизированную ошибку (DivisionError).

Ошибка возвращается вызывающему коду как данные, а не как exception.
Вызывающий код сам выбирает политику:
- unwrap()       — остановиться (CheckedDivisionError)
- unwrap_or(x)   — продолжить с default значением

ИНВАРИАНТ: success XOR failure (проверяется model_validator).
"""

import logging
from enum import Enum
from typing import Final, Optional

from pydantic import BaseModel, Field, StrictInt, model_validator

logger = logging.getLogger(__name__)


# Фиксированное сообщение для DIVIDE_BY_ZERO
DIVIDE_BY_ZERO_MESSAGE: Final[str] = "cannot divide by zero"


# =============================================================================
# ENUMS
# =============================================================================


class DivisionError(str, Enum):
    """Типы ошибок деления (единственный вариант)."""

    DIVIDE_BY_ZERO = "DIVIDE_BY_ZERO"

    @property
    def message(self) -> str:
        """Человекочитаемое сообщение об ошибке"""
        return _ERROR_MESSAGES[self]


_ERROR_MESSAGES: Final[dict[DivisionError, str]] = {
    DivisionError.DIVIDE_BY_ZERO: DIVIDE_BY_ZERO_MESSAGE,
}


class OutcomeStatus(str, Enum):
    """Тег результата"""

    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CheckedDivisionError(ArithmeticError):
    """
    Failure-результат, превращённый в exception через unwrap().

    Само деление никогда не бросает это исключение: оно появляется только
    когда вызывающий код явно выбирает политику "остановиться".
    """

    def __init__(self, error: DivisionError):
        # args = (error,): исключение переживает pickle
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        return self.error.message


# =============================================================================
# OUTCOME MODEL
# =============================================================================


class DivisionOutcome(BaseModel):
    """
    Результат checked_divide / checked_remainder.

    Success: status=SUCCESS, value задан, error/message отсутствуют.
    Failure: status=FAILURE, error и message заданы, value отсутствует.
    """

    status: OutcomeStatus = Field(..., description="Тег результата")
    value: Optional[StrictInt] = Field(None, description="Частное (только для SUCCESS)")
    error: Optional[DivisionError] = Field(None, description="Тип ошибки (только для FAILURE)")
    message: Optional[str] = Field(None, description="Сообщение об ошибке (только для FAILURE)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_tagged_union(self) -> "DivisionOutcome":
        """Проверка success XOR failure"""
        if self.status == OutcomeStatus.SUCCESS:
            if self.value is None:
                raise ValueError("SUCCESS outcome requires value")
            if self.error is not None or self.message is not None:
                raise ValueError("SUCCESS outcome must not carry error or message")
        else:
            if self.error is None:
                raise ValueError("FAILURE outcome requires error")
            if self.value is not None:
                raise ValueError("FAILURE outcome must not carry value")
            if self.message != self.error.message:
                raise ValueError(
                    f"FAILURE message must be {self.error.message!r}, got {self.message!r}"
                )
        return self

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def success(cls, value: int) -> "DivisionOutcome":
        return cls(status=OutcomeStatus.SUCCESS, value=value)

    @classmethod
    def failure(cls, error: DivisionError) -> "DivisionOutcome":
        return cls(status=OutcomeStatus.FAILURE, error=error, message=error.message)

    # -------------------------------------------------------------------------
    # Consumption
    # -------------------------------------------------------------------------

    @property
    def is_success(self) -> bool:
        return self.status == OutcomeStatus.SUCCESS

    @property
    def is_failure(self) -> bool:
        return self.status == OutcomeStatus.FAILURE

    def unwrap(self) -> int:
        """
        Значение успеха или exception.

        Returns:
            value для SUCCESS

        Raises:
            CheckedDivisionError: для FAILURE
        """
        if self.is_failure:
            logger.debug("unwrap() on failed division outcome: %s", self.error.value)
            raise CheckedDivisionError(self.error)
        return self.value

    def unwrap_or(self, default: int) -> int:
        """Значение успеха или default для FAILURE"""
        if self.is_failure:
            return default
        return self.value
