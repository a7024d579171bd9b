"""
Core math modules

Generic сравнение и checked-арифметика без exception в основном пути.
"""

# Ordering
from src.core.math.ordering import (
    SupportsOrdering,
    clamp_ordered,
    compare,
    max_of,
    min_of,
)

# Checked Arithmetic
from src.core.math.checked_arithmetic import (
    checked_divide,
    checked_remainder,
)

__all__ = [
    # Ordering — Types
    "SupportsOrdering",
    # Ordering — Functions
    "clamp_ordered",
    "compare",
    "max_of",
    "min_of",
    # Checked Arithmetic — Functions
    "checked_divide",
    "checked_remainder",
]
