"""Small numeric helpers shared by the solver."""

from __future__ import annotations

from collections.abc import Iterable


def min_array(values: Iterable[float]) -> float:
    """Return the smallest value in ``values``.

    Raises ValueError if ``values`` is empty.
    """
    iterator = iter(values)
    try:
        smallest = next(iterator)
    except StopIteration:
        raise ValueError("min_array() of an empty sequence") from None
    for value in iterator:
        if value < smallest:
            smallest = value
    return float(smallest)


def max_array(values: Iterable[float]) -> float:
    """Return the largest value in ``values``.

    Raises ValueError if ``values`` is empty.
    """
    iterator = iter(values)
    try:
        largest = next(iterator)
    except StopIteration:
        raise ValueError("max_array() of an empty sequence") from None
    for value in iterator:
        if value > largest:
            largest = value
    return float(largest)


def clamp(value: float, lower: float, upper: float) -> float:
    """Limit ``value`` to the closed interval ``[lower, upper]``."""
    if value < lower:
        return lower
    if value > upper:
        return upper
    return value