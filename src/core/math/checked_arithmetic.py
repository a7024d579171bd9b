"""
Checked Arithmetic — Целочисленное деление без exception

Модуль обеспечивает total-функции деления над int:
- checked_divide: частное с округлением к нулю (truncation, не floor)
- checked_remainder: остаток, согласованный с truncating division

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль никогда не происходит (возвращается FAILURE outcome)
2. Ошибка возвращается как данные, ZeroDivisionError наружу не выходит
3. Вычисления точные для любых int (без промежуточного float)
4. a == q * b + r, |r| < |b|, знак r совпадает со знаком a
"""

import operator

from src.core.domain.outcome import DivisionError, DivisionOutcome


# =============================================================================
# ВАЛИДАЦИЯ ОПЕРАНДОВ
# =============================================================================


def _require_int(value: object, name: str) -> int:
    # bool — подкласс int, но не является операндом деления
    if isinstance(value, bool):
        raise TypeError(f"{name} must be int, got bool")

    # Любой целочисленный тип с __index__ (например numpy.int64) → int
    try:
        return operator.index(value)
    except TypeError as e:
        raise TypeError(f"{name} must be int, got {type(value).__name__}") from e


def _truncating_divmod(a: int, b: int) -> tuple[int, int]:
    """
    Пара (quotient, remainder) с округлением частного к нулю.

    Python // округляет к -inf, поэтому делим модули и восстанавливаем знак.
    """
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


# =============================================================================
# CHECKED DIVISION
# =============================================================================


def checked_divide(a: int, b: int) -> DivisionOutcome:
    """
    Целочисленное деление с явным результатом вместо exception.

    Args:
        a: Делимое
        b: Делитель

    Returns:
        DivisionOutcome:
        - SUCCESS с частным, округлённым к нулю, если b != 0
        - FAILURE(DIVIDE_BY_ZERO, "cannot divide by zero"), если b == 0

    Raises:
        TypeError: Если операнды не int

    Examples:
        >>> checked_divide(10, 2).value
        5
        >>> checked_divide(7, 2).value
        3
        >>> checked_divide(-7, 2).value
        -3
        >>> checked_divide(10, 0).error
        <DivisionError.DIVIDE_BY_ZERO: 'DIVIDE_BY_ZERO'>
    """
    a = _require_int(a, "dividend")
    b = _require_int(b, "divisor")

    if b == 0:
        return DivisionOutcome.failure(DivisionError.DIVIDE_BY_ZERO)

    quotient, _ = _truncating_divmod(a, b)
    return DivisionOutcome.success(quotient)


def checked_remainder(a: int, b: int) -> DivisionOutcome:
    """
    Остаток от truncating division (знак совпадает с делимым).

    Examples:
        >>> checked_remainder(7, 2).value
        1
        >>> checked_remainder(-7, 2).value
        -1
        >>> checked_remainder(7, 0).is_failure
        True
    """
    a = _require_int(a, "dividend")
    b = _require_int(b, "divisor")

    if b == 0:
        return DivisionOutcome.failure(DivisionError.DIVIDE_BY_ZERO)

    _, remainder = _truncating_divmod(a, b)
    return DivisionOutcome.success(remainder)
