"""Predicates refining the ``number`` category."""

import math
from typing import Any

from valuekind.classifier import classify
from valuekind.predicates.base import predicate
from valuekind.predicates.primitives import is_number
from valuekind.taxonomy import MAX_SAFE_INTEGER, Category, TypeDescription


@predicate("nan", description=TypeDescription.NAN)
def is_nan(value: Any) -> bool:
    return classify(value) is Category.NUMBER and isinstance(value, float) and math.isnan(value)


@predicate("integer", description=TypeDescription.INTEGER)
def is_integer(value: Any) -> bool:
    """Check for a ``number`` with no fractional part.

    Integral floats such as ``3.0`` qualify. An ``int`` above
    ``MAX_SAFE_INTEGER`` in magnitude is a ``bigint``, not a ``number``, so
    ``is_integer(2**60)`` is False while ``is_integer(float(2**60))`` is
    True. ``is_even_integer`` and ``is_odd_integer`` follow the same rule;
    use :func:`valuekind.predicates.primitives.is_bigint` for large ints.
    """
    if not is_number(value):
        return False
    return isinstance(value, int) or value.is_integer()


@predicate("safe_integer", description=TypeDescription.SAFE_INTEGER)
def is_safe_integer(value: Any) -> bool:
    return is_integer(value) and abs(value) <= MAX_SAFE_INTEGER


@predicate("infinite", description=TypeDescription.INFINITE)
def is_infinite(value: Any) -> bool:
    return is_number(value) and math.isinf(value)


@predicate("even_integer", description=TypeDescription.EVEN_INTEGER)
def is_even_integer(value: Any) -> bool:
    return is_integer(value) and value % 2 == 0


@predicate("odd_integer", description=TypeDescription.ODD_INTEGER)
def is_odd_integer(value: Any) -> bool:
    return is_integer(value) and value % 2 == 1
