"""Public ``is_`` and ``assert_`` namespaces.

``is_.<name>(value, *aux)`` returns a bool, ``assert_.<name>(value, *aux)``
returns None or raises :class:`~valuekind.errors.TypeMismatchError`.
Calling ``is_(value)`` directly classifies the value.

    >>> from valuekind import is_, assert_
    >>> is_("")
    <Category.STRING: 'string'>
    >>> is_.empty_string("")
    True
    >>> assert_.number(5)
"""

from typing import Any

from valuekind import predicates as p
from valuekind.assertions import assertion
from valuekind.classifier import classify
from valuekind.combinators import all_, any_, assert_all, assert_any
from valuekind.taxonomy import Category


class Is:
    """Boolean predicates, one attribute per registered predicate."""

    def __call__(self, value: Any) -> Category:
        return classify(value)

    undefined = staticmethod(p.is_undefined)
    null = staticmethod(p.is_null)
    null_or_undefined = staticmethod(p.is_null_or_undefined)
    string = staticmethod(p.is_string)
    number = staticmethod(p.is_number)
    bigint = staticmethod(p.is_bigint)
    boolean = staticmethod(p.is_boolean)
    symbol = staticmethod(p.is_symbol)
    primitive = staticmethod(p.is_primitive)
    truthy = staticmethod(p.is_truthy)
    falsy = staticmethod(p.is_falsy)

    empty_string = staticmethod(p.is_empty_string)
    non_empty_string = staticmethod(p.is_non_empty_string)
    empty_string_or_whitespace = staticmethod(p.is_empty_string_or_whitespace)
    numeric_string = staticmethod(p.is_numeric_string)
    url_string = staticmethod(p.is_url_string)

    nan = staticmethod(p.is_nan)
    integer = staticmethod(p.is_integer)
    safe_integer = staticmethod(p.is_safe_integer)
    infinite = staticmethod(p.is_infinite)
    even_integer = staticmethod(p.is_even_integer)
    odd_integer = staticmethod(p.is_odd_integer)
    in_range = staticmethod(p.in_range)

    function = staticmethod(p.is_function)
    async_function = staticmethod(p.is_async_function)
    generator_function = staticmethod(p.is_generator_function)
    async_generator_function = staticmethod(p.is_async_generator_function)
    bound_function = staticmethod(p.is_bound_function)
    class_ = staticmethod(p.is_class)

    array = staticmethod(p.is_array)
    empty_array = staticmethod(p.is_empty_array)
    non_empty_array = staticmethod(p.is_non_empty_array)
    map = staticmethod(p.is_map)
    empty_map = staticmethod(p.is_empty_map)
    non_empty_map = staticmethod(p.is_non_empty_map)
    set = staticmethod(p.is_set)
    empty_set = staticmethod(p.is_empty_set)
    non_empty_set = staticmethod(p.is_non_empty_set)
    weak_map = staticmethod(p.is_weak_map)
    weak_set = staticmethod(p.is_weak_set)
    typed_array = staticmethod(p.is_typed_array)
    int8_array = staticmethod(p.is_int8_array)
    uint8_array = staticmethod(p.is_uint8_array)
    uint8_clamped_array = staticmethod(p.is_uint8_clamped_array)
    int16_array = staticmethod(p.is_int16_array)
    uint16_array = staticmethod(p.is_uint16_array)
    int32_array = staticmethod(p.is_int32_array)
    uint32_array = staticmethod(p.is_uint32_array)
    float16_array = staticmethod(p.is_float16_array)
    float32_array = staticmethod(p.is_float32_array)
    float64_array = staticmethod(p.is_float64_array)
    bigint64_array = staticmethod(p.is_bigint64_array)
    biguint64_array = staticmethod(p.is_biguint64_array)
    array_buffer = staticmethod(p.is_array_buffer)
    data_view = staticmethod(p.is_data_view)
    iterable = staticmethod(p.is_iterable)
    async_iterable = staticmethod(p.is_async_iterable)
    array_like = staticmethod(p.is_array_like)

    object = staticmethod(p.is_object)
    plain_object = staticmethod(p.is_plain_object)
    empty_object = staticmethod(p.is_empty_object)
    non_empty_object = staticmethod(p.is_non_empty_object)
    regexp = staticmethod(p.is_regexp)
    date = staticmethod(p.is_date)
    error = staticmethod(p.is_error)
    promise = staticmethod(p.is_promise)
    native_promise = staticmethod(p.is_native_promise)
    generator = staticmethod(p.is_generator)
    async_generator = staticmethod(p.is_async_generator)
    direct_instance_of = staticmethod(p.is_direct_instance_of)
    url_instance = staticmethod(p.is_url_instance)

    any = staticmethod(any_)
    all = staticmethod(all_)


class Assert:
    """Assertion forms of every predicate on :class:`Is`."""

    undefined = staticmethod(assertion(p.is_undefined))
    null = staticmethod(assertion(p.is_null))
    null_or_undefined = staticmethod(assertion(p.is_null_or_undefined))
    string = staticmethod(assertion(p.is_string))
    number = staticmethod(assertion(p.is_number))
    bigint = staticmethod(assertion(p.is_bigint))
    boolean = staticmethod(assertion(p.is_boolean))
    symbol = staticmethod(assertion(p.is_symbol))
    primitive = staticmethod(assertion(p.is_primitive))
    truthy = staticmethod(assertion(p.is_truthy))
    falsy = staticmethod(assertion(p.is_falsy))

    empty_string = staticmethod(assertion(p.is_empty_string))
    non_empty_string = staticmethod(assertion(p.is_non_empty_string))
    empty_string_or_whitespace = staticmethod(assertion(p.is_empty_string_or_whitespace))
    numeric_string = staticmethod(assertion(p.is_numeric_string))
    url_string = staticmethod(assertion(p.is_url_string))

    nan = staticmethod(assertion(p.is_nan))
    integer = staticmethod(assertion(p.is_integer))
    safe_integer = staticmethod(assertion(p.is_safe_integer))
    infinite = staticmethod(assertion(p.is_infinite))
    even_integer = staticmethod(assertion(p.is_even_integer))
    odd_integer = staticmethod(assertion(p.is_odd_integer))
    in_range = staticmethod(assertion(p.in_range))

    function = staticmethod(assertion(p.is_function))
    async_function = staticmethod(assertion(p.is_async_function))
    generator_function = staticmethod(assertion(p.is_generator_function))
    async_generator_function = staticmethod(assertion(p.is_async_generator_function))
    bound_function = staticmethod(assertion(p.is_bound_function))
    class_ = staticmethod(assertion(p.is_class))

    array = staticmethod(assertion(p.is_array))
    empty_array = staticmethod(assertion(p.is_empty_array))
    non_empty_array = staticmethod(assertion(p.is_non_empty_array))
    map = staticmethod(assertion(p.is_map))
    empty_map = staticmethod(assertion(p.is_empty_map))
    non_empty_map = staticmethod(assertion(p.is_non_empty_map))
    set = staticmethod(assertion(p.is_set))
    empty_set = staticmethod(assertion(p.is_empty_set))
    non_empty_set = staticmethod(assertion(p.is_non_empty_set))
    weak_map = staticmethod(assertion(p.is_weak_map))
    weak_set = staticmethod(assertion(p.is_weak_set))
    typed_array = staticmethod(assertion(p.is_typed_array))
    int8_array = staticmethod(assertion(p.is_int8_array))
    uint8_array = staticmethod(assertion(p.is_uint8_array))
    uint8_clamped_array = staticmethod(assertion(p.is_uint8_clamped_array))
    int16_array = staticmethod(assertion(p.is_int16_array))
    uint16_array = staticmethod(assertion(p.is_uint16_array))
    int32_array = staticmethod(assertion(p.is_int32_array))
    uint32_array = staticmethod(assertion(p.is_uint32_array))
    float16_array = staticmethod(assertion(p.is_float16_array))
    float32_array = staticmethod(assertion(p.is_float32_array))
    float64_array = staticmethod(assertion(p.is_float64_array))
    bigint64_array = staticmethod(assertion(p.is_bigint64_array))
    biguint64_array = staticmethod(assertion(p.is_biguint64_array))
    array_buffer = staticmethod(assertion(p.is_array_buffer))
    data_view = staticmethod(assertion(p.is_data_view))
    iterable = staticmethod(assertion(p.is_iterable))
    async_iterable = staticmethod(assertion(p.is_async_iterable))
    array_like = staticmethod(assertion(p.is_array_like))

    object = staticmethod(assertion(p.is_object))
    plain_object = staticmethod(assertion(p.is_plain_object))
    empty_object = staticmethod(assertion(p.is_empty_object))
    non_empty_object = staticmethod(assertion(p.is_non_empty_object))
    regexp = staticmethod(assertion(p.is_regexp))
    date = staticmethod(assertion(p.is_date))
    error = staticmethod(assertion(p.is_error))
    promise = staticmethod(assertion(p.is_promise))
    native_promise = staticmethod(assertion(p.is_native_promise))
    generator = staticmethod(assertion(p.is_generator))
    async_generator = staticmethod(assertion(p.is_async_generator))
    direct_instance_of = staticmethod(assertion(p.is_direct_instance_of))
    url_instance = staticmethod(assertion(p.is_url_instance))

    any = staticmethod(assert_any)
    all = staticmethod(assert_all)


is_ = Is()
assert_ = Assert()
