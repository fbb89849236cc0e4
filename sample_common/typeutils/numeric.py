from decimal import Decimal
from typing import Any, TypeVar, cast

import numpy as np

from sample_common.typeutils.require import require_instance

N = TypeVar("N", int, float, Decimal, np.integer[Any], np.floating[Any])

# bool is an int subclass and np.bool_ is not an np.number, but both are rejected explicitly
_NUMERIC_TYPES: tuple[type, ...] = (int, float, Decimal, np.integer, np.floating)
_EXCLUDED_TYPES: tuple[type, ...] = (bool, np.bool_)

def numeric_types() -> tuple[type, ...]:
    """
    Returns the scalar base types accepted by `add` and `sum_values`.
    """
    return _NUMERIC_TYPES

def _require_numeric(value: object, name: str) -> Any:
    """
    Enforce the numeric value type constraint on a single operand.

    Raises:
        ValueError:
            If the operand is None.
        TypeError:
            If the operand is not a real numeric scalar, or is a boolean.
    """
    if isinstance(value, _EXCLUDED_TYPES):
        raise TypeError(f"{name}: expected a numeric value, got {type(value).__name__}")
    return require_instance(_NUMERIC_TYPES, value, name)

def add(a: N, b: N) -> N:
    """
    Add two numeric scalars after checking both satisfy the numeric constraint.

    Accepted operands are `int`, `float`, `Decimal` and numpy integer or floating scalars.
    Booleans, complex numbers and non-numeric values are rejected before any arithmetic
    happens, so `add("", 1)` fails on the type rather than on the operator. Operands of
    accepted but incompatible types, such as `Decimal` and `float`, raise Python's own
    `TypeError` from the `+` operator.

    Args:
        a (N):
            The left operand.
        b (N):
            The right operand.

    Returns:
        N:
            The sum `a + b`, following Python and numpy promotion rules.

    Raises:
        ValueError:
            If an operand is None.
        TypeError:
            If an operand is not an accepted numeric scalar, or the operands cannot be added.

    Example:
        >>> add(1, 2)
        3

        >>> add(Decimal("1.5"), Decimal("2.5"))
        Decimal('4.0')
    """
    left = _require_numeric(a, "a")
    right = _require_numeric(b, "b")
    return cast(N, left + right)

def sum_values(a: N, *items: N) -> N:
    """
    Add `items` to `a`, left to right.

    Every operand is checked, including `a` when `items` is empty. A rejected item is
    reported by its position, e.g. `items[1]`.

    Args:
        a (N):
            The starting value.
        *items (N):
            Zero or more values to add to `a`, left to right.

    Returns:
        N:
            The accumulated sum, or `a` unchanged when no items are given.

    Raises:
        ValueError:
            If any operand is None.
        TypeError:
            If any operand is not an accepted numeric scalar.

    Example:
        >>> sum_values(1, 2, 3, 4, 5, 6, 7, 8, 9)
        45
    """
    total = _require_numeric(a, "a")
    for index, item in enumerate(items):
        total = total + _require_numeric(item, f"items[{index}]")
    return cast(N, total)

__all__ = [
    "add",
    "numeric_types",
    "sum_values",
]
