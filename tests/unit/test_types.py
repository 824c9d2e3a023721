"""Each predicate accepts its own fixtures and rejects every other type's."""

import array
import asyncio
import datetime
import enum
import functools
import math
import re
import weakref
from collections import ChainMap, Counter, OrderedDict, defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from types import MappingProxyType, SimpleNamespace
from typing import Any

import pytest

from valuekind import CATEGORY_PREDICATES, UNDEFINED, Category, TypeMismatchError, assert_, classify, is_


class Color(enum.Enum):
    RED = "red"


class Point:
    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y


class Awaitable:
    def __await__(self):
        return iter(())


class Greeter:
    def greet(self) -> str:
        return "hi"


def plain_function():
    pass


async def coroutine_function():
    pass


def generator_function():
    yield 4


async def async_generator_function():
    yield 4


def native_future() -> asyncio.Future:
    loop = asyncio.new_event_loop()
    try:
        return loop.create_future()
    finally:
        loop.close()


@dataclass
class TypeCase:
    is_: Callable[..., bool]
    assert_: Callable[..., None]
    fixtures: list[Any]
    category: Category | None = None


TYPES: dict[str, TypeCase] = {
    "undefined": TypeCase(is_.undefined, assert_.undefined, [UNDEFINED], Category.UNDEFINED),
    "null": TypeCase(is_.null, assert_.null, [None], Category.NULL),
    "string": TypeCase(is_.string, assert_.string, ["🦄", "hello world", ""], Category.STRING),
    "empty_string": TypeCase(is_.empty_string, assert_.empty_string, ["", str()], Category.STRING),
    "non_empty_string": TypeCase(is_.non_empty_string, assert_.non_empty_string, ["🦄", " "], Category.STRING),
    "empty_string_or_whitespace": TypeCase(
        is_.empty_string_or_whitespace, assert_.empty_string_or_whitespace, ["", " \t\n"], Category.STRING
    ),
    "numeric_string": TypeCase(
        is_.numeric_string, assert_.numeric_string, ["5", "-3.2", "0x56", "1e3", " 42 "], Category.STRING
    ),
    "url_string": TypeCase(
        is_.url_string, assert_.url_string, ["https://example.com/path", "ftp://files.example.org"], Category.STRING
    ),
    "number": TypeCase(is_.number, assert_.number, [6, 1.4, 0, -0.0, math.inf, -math.inf], Category.NUMBER),
    "bigint": TypeCase(is_.bigint, assert_.bigint, [2**64, -(2**63)], Category.BIGINT),
    "boolean": TypeCase(is_.boolean, assert_.boolean, [True, False], Category.BOOLEAN),
    "symbol": TypeCase(is_.symbol, assert_.symbol, [Color.RED], Category.SYMBOL),
    "array": TypeCase(is_.array, assert_.array, [[1, 2], (1, 2)], Category.ARRAY),
    "empty_array": TypeCase(is_.empty_array, assert_.empty_array, [[], ()], Category.ARRAY),
    "non_empty_array": TypeCase(is_.non_empty_array, assert_.non_empty_array, [[0], ("a",)], Category.ARRAY),
    "function": TypeCase(
        is_.function,
        assert_.function,
        [plain_function, lambda: None, coroutine_function, generator_function, async_generator_function],
        Category.FUNCTION,
    ),
    "object": TypeCase(
        is_.object, assert_.object, [Point(1, 2), SimpleNamespace(x=1), {"one": 1}], Category.OBJECT
    ),
    "regexp": TypeCase(is_.regexp, assert_.regexp, [re.compile(r"\w")], Category.REGEXP),
    "date": TypeCase(is_.date, assert_.date, [datetime.datetime.now(), datetime.date.today()], Category.DATE),
    "error": TypeCase(is_.error, assert_.error, [ValueError("🦄"), Exception()], Category.ERROR),
    "native_promise": TypeCase(is_.native_promise, assert_.native_promise, [native_future()], Category.PROMISE),
    "promise": TypeCase(is_.promise, assert_.promise, [Awaitable()], Category.OBJECT),
    "generator": TypeCase(is_.generator, assert_.generator, [generator_function()], Category.GENERATOR),
    "async_generator": TypeCase(
        is_.async_generator, assert_.async_generator, [async_generator_function()], Category.ASYNC_GENERATOR
    ),
    "generator_function": TypeCase(
        is_.generator_function, assert_.generator_function, [generator_function], Category.FUNCTION
    ),
    "async_generator_function": TypeCase(
        is_.async_generator_function, assert_.async_generator_function, [async_generator_function], Category.FUNCTION
    ),
    "async_function": TypeCase(is_.async_function, assert_.async_function, [coroutine_function], Category.FUNCTION),
    "bound_function": TypeCase(
        is_.bound_function,
        assert_.bound_function,
        [Greeter().greet, functools.partial(plain_function), [].append, [].__len__],
        Category.FUNCTION,
    ),
    "map": TypeCase(
        is_.map, assert_.map, [OrderedDict(one=1), MappingProxyType({"one": 1})], Category.MAP
    ),
    "empty_map": TypeCase(is_.empty_map, assert_.empty_map, [OrderedDict(), defaultdict(list)], Category.MAP),
    "non_empty_map": TypeCase(
        is_.non_empty_map, assert_.non_empty_map, [Counter("ab"), ChainMap({"a": 1})], Category.MAP
    ),
    "set": TypeCase(is_.set, assert_.set, [{"one"}, frozenset({1})], Category.SET),
    "empty_set": TypeCase(is_.empty_set, assert_.empty_set, [set(), frozenset()], Category.SET),
    "non_empty_set": TypeCase(is_.non_empty_set, assert_.non_empty_set, [{0}, frozenset("ab")], Category.SET),
    "weak_set": TypeCase(is_.weak_set, assert_.weak_set, [weakref.WeakSet()], Category.WEAK_SET),
    "weak_map": TypeCase(
        is_.weak_map,
        assert_.weak_map,
        [weakref.WeakKeyDictionary(), weakref.WeakValueDictionary()],
        Category.WEAK_MAP,
    ),
    "typed_array": TypeCase(is_.typed_array, assert_.typed_array, [array.array("i", [1]), bytearray(b"x")]),
    "int8_array": TypeCase(is_.int8_array, assert_.int8_array, [array.array("b")], Category.INT8_ARRAY),
    "uint8_array": TypeCase(is_.uint8_array, assert_.uint8_array, [array.array("B")], Category.UINT8_ARRAY),
    "uint8_clamped_array": TypeCase(
        is_.uint8_clamped_array, assert_.uint8_clamped_array, [bytearray()], Category.UINT8_CLAMPED_ARRAY
    ),
    "int16_array": TypeCase(is_.int16_array, assert_.int16_array, [array.array("h")], Category.INT16_ARRAY),
    "uint16_array": TypeCase(is_.uint16_array, assert_.uint16_array, [array.array("H")], Category.UINT16_ARRAY),
    "int32_array": TypeCase(is_.int32_array, assert_.int32_array, [array.array("i")], Category.INT32_ARRAY),
    "uint32_array": TypeCase(is_.uint32_array, assert_.uint32_array, [array.array("I")], Category.UINT32_ARRAY),
    "float32_array": TypeCase(is_.float32_array, assert_.float32_array, [array.array("f")], Category.FLOAT32_ARRAY),
    "float64_array": TypeCase(is_.float64_array, assert_.float64_array, [array.array("d")], Category.FLOAT64_ARRAY),
    "bigint64_array": TypeCase(
        is_.bigint64_array, assert_.bigint64_array, [array.array("q")], Category.BIGINT64_ARRAY
    ),
    "biguint64_array": TypeCase(
        is_.biguint64_array, assert_.biguint64_array, [array.array("Q")], Category.BIGUINT64_ARRAY
    ),
    "array_buffer": TypeCase(is_.array_buffer, assert_.array_buffer, [b"", bytes(10)], Category.ARRAY_BUFFER),
    "data_view": TypeCase(is_.data_view, assert_.data_view, [memoryview(bytes(10))], Category.DATA_VIEW),
    "nan": TypeCase(is_.nan, assert_.nan, [math.nan, float("nan")], Category.NUMBER),
    "null_or_undefined": TypeCase(is_.null_or_undefined, assert_.null_or_undefined, [None, UNDEFINED]),
    "plain_object": TypeCase(
        is_.plain_object,
        assert_.plain_object,
        [SimpleNamespace(x=1), SimpleNamespace(), object(), {}, {"one": 1}],
        Category.OBJECT,
    ),
    "empty_object": TypeCase(
        is_.empty_object, assert_.empty_object, [SimpleNamespace(), object(), {}], Category.OBJECT
    ),
    "non_empty_object": TypeCase(
        is_.non_empty_object, assert_.non_empty_object, [SimpleNamespace(x=1), {"one": 1}], Category.OBJECT
    ),
    "integer": TypeCase(is_.integer, assert_.integer, [6], Category.NUMBER),
    "safe_integer": TypeCase(
        is_.safe_integer, assert_.safe_integer, [2**53 - 1, -(2**53) + 1], Category.NUMBER
    ),
    "infinite": TypeCase(is_.infinite, assert_.infinite, [math.inf, -math.inf], Category.NUMBER),
    "even_integer": TypeCase(is_.even_integer, assert_.even_integer, [4, -2], Category.NUMBER),
    "odd_integer": TypeCase(is_.odd_integer, assert_.odd_integer, [3, -1], Category.NUMBER),
}

if "e" in array.typecodes:
    TYPES["float16_array"] = TypeCase(
        is_.float16_array, assert_.float16_array, [array.array("e")], Category.FLOAT16_ARRAY
    )


TYPED_ARRAY_NAMES = [
    "int8_array",
    "uint8_array",
    "uint8_clamped_array",
    "int16_array",
    "uint16_array",
    "int32_array",
    "uint32_array",
    "float16_array",
    "float32_array",
    "float64_array",
    "bigint64_array",
    "biguint64_array",
]

# Predicates that legitimately accept other types' fixtures
EXCLUDES: dict[str, list[str]] = {
    "undefined": ["null_or_undefined"],
    "null": ["null_or_undefined"],
    "string": ["empty_string", "non_empty_string", "empty_string_or_whitespace", "numeric_string", "url_string"],
    "empty_string": ["string", "empty_string_or_whitespace"],
    "non_empty_string": ["string", "empty_string_or_whitespace", "numeric_string", "url_string"],
    "empty_string_or_whitespace": ["string", "empty_string", "non_empty_string"],
    "number": ["integer", "safe_integer", "infinite", "even_integer", "odd_integer"],
    "array": ["empty_array", "non_empty_array"],
    "non_empty_array": ["array"],
    "function": ["generator_function", "async_generator_function", "async_function", "bound_function"],
    "object": ["plain_object", "empty_object", "non_empty_object", "promise"],
    "promise": ["native_promise"],
    "generator_function": ["function"],
    "async_generator_function": ["function"],
    "async_function": ["function"],
    "map": ["empty_map", "non_empty_map"],
    "non_empty_map": ["map"],
    "set": ["empty_set", "non_empty_set"],
    "non_empty_set": ["set"],
    "typed_array": TYPED_ARRAY_NAMES,
    "uint8_clamped_array": ["typed_array"],
    "int32_array": ["typed_array"],
    "null_or_undefined": ["undefined", "null"],
    "plain_object": ["object", "empty_object", "non_empty_object"],
    "empty_object": ["plain_object"],
    "non_empty_object": ["plain_object", "object"],
    "integer": ["number", "safe_integer", "even_integer", "odd_integer"],
    "safe_integer": ["number", "integer", "even_integer", "odd_integer"],
    "infinite": ["number"],
    "even_integer": ["number", "integer"],
    "odd_integer": ["safe_integer"],
}


@pytest.mark.parametrize("type_name", list(TYPES))
def test_predicate_accepts_own_fixtures(type_name):
    case = TYPES[type_name]

    for fixture in case.fixtures:
        assert case.is_(fixture) is True
        assert case.assert_(fixture) is None
        if case.category is not None:
            assert classify(fixture) is case.category
            assert is_(fixture) is case.category


@pytest.mark.parametrize("type_name", list(TYPES))
def test_predicate_rejects_other_fixtures(type_name):
    case = TYPES[type_name]
    excluded = EXCLUDES.get(type_name, [])

    for other_name, other in TYPES.items():
        if other_name == type_name or other_name in excluded:
            continue
        for fixture in other.fixtures:
            assert case.is_(fixture) is False, f"is_.{type_name} accepted {other_name} fixture {fixture!r}"
            with pytest.raises(TypeMismatchError):
                case.assert_(fixture)


def test_category_predicate_table_is_exhaustive():
    assert set(CATEGORY_PREDICATES) == set(Category)


@pytest.mark.parametrize("category", list(Category))
def test_every_category_round_trips(category):
    fixtures = [f for case in TYPES.values() if case.category is category for f in case.fixtures]
    if not fixtures:
        pytest.skip(f"{category} has no producer on this interpreter")

    predicate = CATEGORY_PREDICATES[category]
    for fixture in fixtures:
        if category is Category.NUMBER and isinstance(fixture, float) and math.isnan(fixture):
            continue
        assert classify(fixture) is category
        assert predicate(fixture)
