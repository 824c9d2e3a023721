"""Predicates for containers, binary buffers and iteration shapes."""

from collections.abc import Mapping
from typing import Any

from valuekind.classifier import classify
from valuekind.predicates.base import predicate
from valuekind.taxonomy import TYPED_ARRAY_CATEGORIES, UNDEFINED, Category, TypeDescription


def _is_absent(value: Any) -> bool:
    return value is None or value is UNDEFINED


def _type_exposes(value: Any, member: str) -> bool:
    # Special methods are looked up on the type, as the interpreter does.
    return callable(getattr(type(value), member, None))


@predicate("array", Category.ARRAY)
def is_array(value: Any) -> bool:
    return classify(value) is Category.ARRAY


@predicate("empty_array", description=TypeDescription.EMPTY_ARRAY)
def is_empty_array(value: Any) -> bool:
    return is_array(value) and len(value) == 0


@predicate("non_empty_array", description=TypeDescription.NON_EMPTY_ARRAY)
def is_non_empty_array(value: Any) -> bool:
    return is_array(value) and len(value) > 0


@predicate("map", Category.MAP)
def is_map(value: Any) -> bool:
    return classify(value) is Category.MAP


@predicate("empty_map", description=TypeDescription.EMPTY_MAP)
def is_empty_map(value: Any) -> bool:
    return is_map(value) and len(value) == 0


@predicate("non_empty_map", description=TypeDescription.NON_EMPTY_MAP)
def is_non_empty_map(value: Any) -> bool:
    return is_map(value) and len(value) > 0


@predicate("set", Category.SET)
def is_set(value: Any) -> bool:
    return classify(value) is Category.SET


@predicate("empty_set", description=TypeDescription.EMPTY_SET)
def is_empty_set(value: Any) -> bool:
    return is_set(value) and len(value) == 0


@predicate("non_empty_set", description=TypeDescription.NON_EMPTY_SET)
def is_non_empty_set(value: Any) -> bool:
    return is_set(value) and len(value) > 0


@predicate("weak_map", Category.WEAK_MAP)
def is_weak_map(value: Any) -> bool:
    return classify(value) is Category.WEAK_MAP


@predicate("weak_set", Category.WEAK_SET)
def is_weak_set(value: Any) -> bool:
    return classify(value) is Category.WEAK_SET


@predicate("typed_array", description=TypeDescription.TYPED_ARRAY)
def is_typed_array(value: Any) -> bool:
    return classify(value) in TYPED_ARRAY_CATEGORIES


@predicate("int8_array", Category.INT8_ARRAY)
def is_int8_array(value: Any) -> bool:
    return classify(value) is Category.INT8_ARRAY


@predicate("uint8_array", Category.UINT8_ARRAY)
def is_uint8_array(value: Any) -> bool:
    return classify(value) is Category.UINT8_ARRAY


@predicate("uint8_clamped_array", Category.UINT8_CLAMPED_ARRAY)
def is_uint8_clamped_array(value: Any) -> bool:
    return classify(value) is Category.UINT8_CLAMPED_ARRAY


@predicate("int16_array", Category.INT16_ARRAY)
def is_int16_array(value: Any) -> bool:
    return classify(value) is Category.INT16_ARRAY


@predicate("uint16_array", Category.UINT16_ARRAY)
def is_uint16_array(value: Any) -> bool:
    return classify(value) is Category.UINT16_ARRAY


@predicate("int32_array", Category.INT32_ARRAY)
def is_int32_array(value: Any) -> bool:
    return classify(value) is Category.INT32_ARRAY


@predicate("uint32_array", Category.UINT32_ARRAY)
def is_uint32_array(value: Any) -> bool:
    return classify(value) is Category.UINT32_ARRAY


@predicate("float16_array", Category.FLOAT16_ARRAY)
def is_float16_array(value: Any) -> bool:
    return classify(value) is Category.FLOAT16_ARRAY


@predicate("float32_array", Category.FLOAT32_ARRAY)
def is_float32_array(value: Any) -> bool:
    return classify(value) is Category.FLOAT32_ARRAY


@predicate("float64_array", Category.FLOAT64_ARRAY)
def is_float64_array(value: Any) -> bool:
    return classify(value) is Category.FLOAT64_ARRAY


@predicate("bigint64_array", Category.BIGINT64_ARRAY)
def is_bigint64_array(value: Any) -> bool:
    return classify(value) is Category.BIGINT64_ARRAY


@predicate("biguint64_array", Category.BIGUINT64_ARRAY)
def is_biguint64_array(value: Any) -> bool:
    return classify(value) is Category.BIGUINT64_ARRAY


@predicate("array_buffer", Category.ARRAY_BUFFER)
def is_array_buffer(value: Any) -> bool:
    return classify(value) is Category.ARRAY_BUFFER


@predicate("data_view", Category.DATA_VIEW)
def is_data_view(value: Any) -> bool:
    return classify(value) is Category.DATA_VIEW


@predicate("iterable", description=TypeDescription.ITERABLE)
def is_iterable(value: Any) -> bool:
    return not _is_absent(value) and _type_exposes(value, "__iter__")


@predicate("async_iterable", description=TypeDescription.ASYNC_ITERABLE)
def is_async_iterable(value: Any) -> bool:
    return not _is_absent(value) and _type_exposes(value, "__aiter__")


@predicate("array_like", description=TypeDescription.ARRAY_LIKE)
def is_array_like(value: Any) -> bool:
    """Check for a positionally indexable value with a length.

    Strings, lists, tuples, bytes, ``array.array`` and ``memoryview`` are
    array-like; mappings and sets are not, and neither is anything
    callable.
    """
    if _is_absent(value) or callable(value):
        return False
    if isinstance(value, Mapping):
        return False
    return _type_exposes(value, "__len__") and _type_exposes(value, "__getitem__")
