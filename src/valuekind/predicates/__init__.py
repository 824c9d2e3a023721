"""Predicate set: one boolean test per category or refinement."""

from collections.abc import Callable

from valuekind.taxonomy import Category

from .base import PREDICATES, Predicate, PredicateSpec, describe, expected_label, predicate
from .primitives import (
    is_bigint,
    is_boolean,
    is_falsy,
    is_null,
    is_null_or_undefined,
    is_number,
    is_primitive,
    is_string,
    is_symbol,
    is_truthy,
    is_undefined,
)
from .strings import (
    is_empty_string,
    is_empty_string_or_whitespace,
    is_non_empty_string,
    is_numeric_string,
    is_url_string,
)
from .numbers import (
    is_even_integer,
    is_infinite,
    is_integer,
    is_nan,
    is_odd_integer,
    is_safe_integer,
)
from .functions import (
    is_async_function,
    is_async_generator_function,
    is_bound_function,
    is_class,
    is_function,
    is_generator_function,
)
from .containers import (
    is_array,
    is_array_buffer,
    is_array_like,
    is_async_iterable,
    is_bigint64_array,
    is_biguint64_array,
    is_data_view,
    is_empty_array,
    is_empty_map,
    is_empty_set,
    is_float16_array,
    is_float32_array,
    is_float64_array,
    is_int8_array,
    is_int16_array,
    is_int32_array,
    is_iterable,
    is_map,
    is_non_empty_array,
    is_non_empty_map,
    is_non_empty_set,
    is_set,
    is_typed_array,
    is_uint8_array,
    is_uint8_clamped_array,
    is_uint16_array,
    is_uint32_array,
    is_weak_map,
    is_weak_set,
)
from .objects import (
    is_async_generator,
    is_date,
    is_direct_instance_of,
    is_empty_object,
    is_error,
    is_generator,
    is_native_promise,
    is_non_empty_object,
    is_object,
    is_plain_object,
    is_promise,
    is_regexp,
    is_url_instance,
)
from .ranges import in_range


CATEGORY_PREDICATES: dict[Category, Callable[..., bool]] = {
    Category.UNDEFINED: is_undefined,
    Category.NULL: is_null,
    Category.STRING: is_string,
    Category.NUMBER: is_number,
    Category.BIGINT: is_bigint,
    Category.BOOLEAN: is_boolean,
    Category.SYMBOL: is_symbol,
    Category.ARRAY: is_array,
    Category.OBJECT: is_object,
    Category.REGEXP: is_regexp,
    Category.DATE: is_date,
    Category.ERROR: is_error,
    Category.MAP: is_map,
    Category.SET: is_set,
    Category.WEAK_MAP: is_weak_map,
    Category.WEAK_SET: is_weak_set,
    Category.PROMISE: is_native_promise,
    Category.FUNCTION: is_function,
    Category.INT8_ARRAY: is_int8_array,
    Category.UINT8_ARRAY: is_uint8_array,
    Category.UINT8_CLAMPED_ARRAY: is_uint8_clamped_array,
    Category.INT16_ARRAY: is_int16_array,
    Category.UINT16_ARRAY: is_uint16_array,
    Category.INT32_ARRAY: is_int32_array,
    Category.UINT32_ARRAY: is_uint32_array,
    Category.FLOAT16_ARRAY: is_float16_array,
    Category.FLOAT32_ARRAY: is_float32_array,
    Category.FLOAT64_ARRAY: is_float64_array,
    Category.BIGINT64_ARRAY: is_bigint64_array,
    Category.BIGUINT64_ARRAY: is_biguint64_array,
    Category.ARRAY_BUFFER: is_array_buffer,
    Category.DATA_VIEW: is_data_view,
    Category.GENERATOR: is_generator,
    Category.ASYNC_GENERATOR: is_async_generator,
}


__all__ = [
    # Predicate abstractions
    "CATEGORY_PREDICATES",
    "PREDICATES",
    "Predicate",
    "PredicateSpec",
    "describe",
    "expected_label",
    "predicate",
    # Absence and primitives
    "is_undefined",
    "is_null",
    "is_null_or_undefined",
    "is_string",
    "is_number",
    "is_bigint",
    "is_boolean",
    "is_symbol",
    "is_primitive",
    "is_truthy",
    "is_falsy",
    # Strings
    "is_empty_string",
    "is_non_empty_string",
    "is_empty_string_or_whitespace",
    "is_numeric_string",
    "is_url_string",
    # Numbers
    "is_nan",
    "is_integer",
    "is_safe_integer",
    "is_infinite",
    "is_even_integer",
    "is_odd_integer",
    "in_range",
    # Callables
    "is_function",
    "is_async_function",
    "is_generator_function",
    "is_async_generator_function",
    "is_bound_function",
    "is_class",
    # Containers and buffers
    "is_array",
    "is_empty_array",
    "is_non_empty_array",
    "is_map",
    "is_empty_map",
    "is_non_empty_map",
    "is_set",
    "is_empty_set",
    "is_non_empty_set",
    "is_weak_map",
    "is_weak_set",
    "is_typed_array",
    "is_int8_array",
    "is_uint8_array",
    "is_uint8_clamped_array",
    "is_int16_array",
    "is_uint16_array",
    "is_int32_array",
    "is_uint32_array",
    "is_float16_array",
    "is_float32_array",
    "is_float64_array",
    "is_bigint64_array",
    "is_biguint64_array",
    "is_array_buffer",
    "is_data_view",
    "is_iterable",
    "is_async_iterable",
    "is_array_like",
    # Objects
    "is_object",
    "is_plain_object",
    "is_empty_object",
    "is_non_empty_object",
    "is_regexp",
    "is_date",
    "is_error",
    "is_promise",
    "is_native_promise",
    "is_generator",
    "is_async_generator",
    "is_direct_instance_of",
    "is_url_instance",
]
