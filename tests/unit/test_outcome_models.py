"""
Tests for DivisionOutcome Pydantic Model

Покрывает:
- Factories success/failure
- Инвариант success XOR failure
- Immutability (frozen=True)
- Политики unwrap / unwrap_or
- JSON сериализацию/десериализацию
"""

import logging
import pickle

import pytest
from pydantic import ValidationError

from src.core.domain import (
    CheckedDivisionError,
    DivisionError,
    DivisionOutcome,
    OutcomeStatus,
)
from src.core.math import checked_divide


@pytest.fixture
def success_outcome() -> DivisionOutcome:
    return DivisionOutcome.success(5)


@pytest.fixture
def failure_outcome() -> DivisionOutcome:
    return DivisionOutcome.failure(DivisionError.DIVIDE_BY_ZERO)


class TestDivisionError:
    def test_single_variant(self) -> None:
        assert list(DivisionError) == [DivisionError.DIVIDE_BY_ZERO]

    def test_message(self) -> None:
        assert DivisionError.DIVIDE_BY_ZERO.message == "cannot divide by zero"


class TestDivisionOutcomeInvariants:
    """Инвариант success XOR failure"""

    def test_success_fields(self, success_outcome) -> None:
        assert success_outcome.status == OutcomeStatus.SUCCESS
        assert success_outcome.value == 5
        assert success_outcome.error is None
        assert success_outcome.message is None

    def test_failure_fields(self, failure_outcome) -> None:
        assert failure_outcome.status == OutcomeStatus.FAILURE
        assert failure_outcome.value is None
        assert failure_outcome.error == DivisionError.DIVIDE_BY_ZERO
        assert failure_outcome.message == "cannot divide by zero"

    def test_success_without_value_rejected(self) -> None:
        with pytest.raises(ValidationError, match="SUCCESS outcome requires value"):
            DivisionOutcome(status=OutcomeStatus.SUCCESS)

    def test_success_with_error_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must not carry error"):
            DivisionOutcome(
                status=OutcomeStatus.SUCCESS,
                value=1,
                error=DivisionError.DIVIDE_BY_ZERO,
            )

    def test_failure_without_error_rejected(self) -> None:
        with pytest.raises(ValidationError, match="FAILURE outcome requires error"):
            DivisionOutcome(status=OutcomeStatus.FAILURE)

    def test_failure_with_value_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must not carry value"):
            DivisionOutcome(
                status=OutcomeStatus.FAILURE,
                value=0,
                error=DivisionError.DIVIDE_BY_ZERO,
                message="cannot divide by zero",
            )

    def test_failure_with_custom_message_rejected(self) -> None:
        with pytest.raises(ValidationError, match="FAILURE message must be"):
            DivisionOutcome(
                status=OutcomeStatus.FAILURE,
                error=DivisionError.DIVIDE_BY_ZERO,
                message="oops",
            )

    def test_bool_value_rejected(self) -> None:
        """value строго int: bool не приводится к 1"""
        with pytest.raises(ValidationError):
            DivisionOutcome.success(True)

    def test_string_value_rejected(self) -> None:
        """value строго int: '5' не приводится к 5 (как в JSON контракте)"""
        with pytest.raises(ValidationError):
            DivisionOutcome.model_validate({"status": "SUCCESS", "value": "5"})

    def test_frozen(self, success_outcome) -> None:
        with pytest.raises(ValidationError):
            success_outcome.value = 6


class TestDivisionOutcomeConsumption:
    """Политики: остановиться (unwrap) или продолжить (unwrap_or)"""

    def test_unwrap_success(self, success_outcome) -> None:
        assert success_outcome.unwrap() == 5

    def test_unwrap_failure_raises(self, failure_outcome) -> None:
        with pytest.raises(CheckedDivisionError, match="cannot divide by zero") as exc_info:
            failure_outcome.unwrap()

        assert exc_info.value.error == DivisionError.DIVIDE_BY_ZERO
        assert isinstance(exc_info.value, ArithmeticError)

    def test_unwrap_error_survives_pickle(self, failure_outcome) -> None:
        """Исключение передаётся между процессами без потери error"""
        with pytest.raises(CheckedDivisionError) as exc_info:
            failure_outcome.unwrap()

        restored = pickle.loads(pickle.dumps(exc_info.value))

        assert isinstance(restored, CheckedDivisionError)
        assert restored.error == DivisionError.DIVIDE_BY_ZERO
        assert str(restored) == "cannot divide by zero"

    def test_unwrap_failure_logs_debug(self, failure_outcome, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.core.domain.outcome"):
            with pytest.raises(CheckedDivisionError):
                failure_outcome.unwrap()

        assert "DIVIDE_BY_ZERO" in caplog.text

    def test_unwrap_or(self, success_outcome, failure_outcome) -> None:
        assert success_outcome.unwrap_or(-1) == 5
        assert failure_outcome.unwrap_or(-1) == -1

    def test_unwrap_or_on_division(self) -> None:
        """Продолжение вычислений после деления на ноль"""
        totals = [checked_divide(100, d).unwrap_or(0) for d in (4, 0, -3)]
        assert totals == [25, 0, -33]


class TestDivisionOutcomeSerialization:
    def test_success_json(self, success_outcome) -> None:
        data = success_outcome.model_dump(mode="json")
        assert data == {"status": "SUCCESS", "value": 5, "error": None, "message": None}

    def test_failure_json(self, failure_outcome) -> None:
        data = failure_outcome.model_dump(mode="json")
        assert data == {
            "status": "FAILURE",
            "value": None,
            "error": "DIVIDE_BY_ZERO",
            "message": "cannot divide by zero",
        }

    def test_json_round_trip(self, failure_outcome) -> None:
        restored = DivisionOutcome.model_validate_json(failure_outcome.model_dump_json())
        assert restored == failure_outcome
        assert restored.is_failure
