"""Numeric range checker."""

from collections.abc import Sequence
from typing import Any

from valuekind.errors import ArgumentError
from valuekind.predicates.base import predicate
from valuekind.predicates.containers import is_array
from valuekind.predicates.primitives import is_bigint, is_number
from valuekind.taxonomy import TypeDescription

Bound = int | float | Sequence[int | float]


def _is_numeric(value: Any) -> bool:
    return is_number(value) or is_bigint(value)


def _interval(bound: Any) -> tuple[int | float, int | float]:
    if _is_numeric(bound):
        return min(0, bound), max(0, bound)

    if not is_array(bound):
        raise ArgumentError(f"Invalid range bound: {bound!r}, expected a number or a pair of numbers")
    if len(bound) != 2:
        raise ArgumentError(f"Invalid range bound: {bound!r}, expected exactly 2 elements, got {len(bound)}")

    start, end = bound
    if not (_is_numeric(start) and _is_numeric(end)):
        raise ArgumentError(f"Invalid range bound: {bound!r}, both ends must be numbers")
    return min(start, end), max(start, end)


@predicate("in_range", description=TypeDescription.IN_RANGE)
def in_range(value: Any, bound: Bound) -> bool:
    """Check that ``value`` lies in a closed numeric interval.

    Parameters
    ----------
    value
        Value to test. Anything that is not a number or bigint is out of
        range.
    bound
        Either a single number ``n``, meaning ``[min(0, n), max(0, n)]``, or
        a pair ``(a, b)`` in either order, meaning ``[min(a, b), max(a, b)]``.

    Raises
    ------
    ArgumentError
        If ``bound`` is not a number or a two-element list/tuple of numbers.
        The bound is validated before ``value`` is looked at.

    Examples
    --------
    >>> in_range(3, [5, 0])
    True
    >>> in_range(-2, -3)
    True
    >>> in_range(3, 2)
    False
    """
    low, high = _interval(bound)
    if not _is_numeric(value):
        return False
    return low <= value <= high
