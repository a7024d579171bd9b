"""
Ordering — Generic сравнение значений

Модуль обеспечивает выбор максимума/минимума для любого упорядоченного типа
(int, float, str, Decimal, datetime, tuple, пользовательские классы с __lt__/__gt__).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Оба аргумента одного типа T (TypeVar с bound=SupportsOrdering,
   проверяется type checker'ом; runtime сравнение несравнимых типов
   даёт TypeError от самого Python и не маскируется)
2. При равенстве (или отсутствии строгого порядка, например NaN)
   побеждает ВТОРОЙ аргумент — для max_of и min_of одинаково
3. Никаких side effects, никакого состояния
"""

from typing import Any, Protocol, TypeVar


class SupportsOrdering(Protocol):
    """Тип с операциями строгого сравнения (total или partial order)."""

    def __lt__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=SupportsOrdering)


# =============================================================================
# MAX / MIN
# =============================================================================


def max_of(a: T, b: T) -> T:
    """
    Больший из двух значений.

    Args:
        a: Первое значение
        b: Второе значение (того же типа)

    Returns:
        a если a > b, иначе b (при равенстве возвращается b)

    Examples:
        >>> max_of(3, 7)
        7
        >>> max_of("pear", "apple")
        'pear'
        >>> max_of(2.0, 2.0)
        2.0
    """
    if a > b:
        return a
    return b


def min_of(a: T, b: T) -> T:
    """
    Меньший из двух значений.

    При равенстве возвращается b (тот же tie-break, что у max_of).

    Examples:
        >>> min_of(3, 7)
        3
    """
    if a < b:
        return a
    return b


# =============================================================================
# THREE-WAY COMPARISON
# =============================================================================


def compare(a: T, b: T) -> int:
    """
    Трёхзначное сравнение.

    Returns:
        -1 если a < b
         0 если ни a < b, ни a > b (равенство или несравнимость, например NaN)
        +1 если a > b

    Examples:
        >>> compare(1, 2)
        -1
        >>> compare("b", "a")
        1
        >>> compare(float("nan"), 1.0)
        0
    """
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def clamp_ordered(value: T, lower: T, upper: T) -> T:
    """
    Ограничение значения диапазоном [lower, upper] для любого упорядоченного типа.

    Args:
        value: Исходное значение
        lower: Нижняя граница
        upper: Верхняя граница

    Returns:
        min_of(max_of(value, lower), upper)

    Raises:
        ValueError: Если lower > upper

    Examples:
        >>> clamp_ordered(15, 0, 10)
        10
        >>> clamp_ordered("m", "a", "f")
        'f'
    """
    if lower > upper:
        raise ValueError(f"lower must be <= upper, got lower={lower!r}, upper={upper!r}")

    return min_of(max_of(value, lower), upper)
