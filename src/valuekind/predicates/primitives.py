"""Predicates for absence, primitives and truthiness."""

import math
from typing import Any

from valuekind.classifier import classify
from valuekind.predicates.base import predicate
from valuekind.taxonomy import PRIMITIVE_CATEGORIES, UNDEFINED, Category, TypeDescription


@predicate("undefined", Category.UNDEFINED)
def is_undefined(value: Any) -> bool:
    return value is UNDEFINED


@predicate("null", Category.NULL)
def is_null(value: Any) -> bool:
    return value is None


@predicate("null_or_undefined", description=TypeDescription.NULL_OR_UNDEFINED)
def is_null_or_undefined(value: Any) -> bool:
    return value is None or value is UNDEFINED


@predicate("string", Category.STRING)
def is_string(value: Any) -> bool:
    return classify(value) is Category.STRING


@predicate("number", Category.NUMBER)
def is_number(value: Any) -> bool:
    """Numbers in the exactly representable range, excluding NaN.

    ``classify(float("nan"))`` is still ``number``; NaN is matched by
    :func:`valuekind.predicates.numbers.is_nan` instead.
    """
    return classify(value) is Category.NUMBER and not (isinstance(value, float) and math.isnan(value))


@predicate("bigint", Category.BIGINT)
def is_bigint(value: Any) -> bool:
    return classify(value) is Category.BIGINT


@predicate("boolean", Category.BOOLEAN)
def is_boolean(value: Any) -> bool:
    return classify(value) is Category.BOOLEAN


@predicate("symbol", Category.SYMBOL)
def is_symbol(value: Any) -> bool:
    return classify(value) is Category.SYMBOL


@predicate("primitive", description=TypeDescription.PRIMITIVE)
def is_primitive(value: Any) -> bool:
    return classify(value) in PRIMITIVE_CATEGORIES


@predicate("truthy", description=TypeDescription.TRUTHY)
def is_truthy(value: Any) -> bool:
    return bool(value)


@predicate("falsy", description=TypeDescription.FALSY)
def is_falsy(value: Any) -> bool:
    return not value
