"""Primitive classifier.

Resolves any value to exactly one :class:`~valuekind.taxonomy.Category`.
Structured values are resolved through their construction tag: the type
hierarchy of the value is walked in MRO order and the first type found in
``_TAG_TABLE`` wins, so subclasses of a built-in keep the built-in's
category. A plain ``dict``, the shape decoded JSON objects take, is an
``Object``; its subclasses and the other mappings are ``Map`` values.
Anything the table does not know about is an ``Object`` too.
"""

import array
import asyncio
import collections
import datetime
import logging
import re
import types
import weakref
from enum import Enum
from typing import Any

from valuekind.taxonomy import MAX_SAFE_INTEGER, UNDEFINED, Category

logger = logging.getLogger(__name__)


_TAG_TABLE: dict[type, Category] = {
    list: Category.ARRAY,
    tuple: Category.ARRAY,
    collections.deque: Category.ARRAY,
    dict: Category.MAP,
    types.MappingProxyType: Category.MAP,
    collections.ChainMap: Category.MAP,
    set: Category.SET,
    frozenset: Category.SET,
    weakref.WeakKeyDictionary: Category.WEAK_MAP,
    weakref.WeakValueDictionary: Category.WEAK_MAP,
    weakref.WeakSet: Category.WEAK_SET,
    re.Pattern: Category.REGEXP,
    datetime.date: Category.DATE,
    BaseException: Category.ERROR,
    asyncio.Future: Category.PROMISE,
    types.CoroutineType: Category.PROMISE,
    types.GeneratorType: Category.GENERATOR,
    types.AsyncGeneratorType: Category.ASYNC_GENERATOR,
    bytes: Category.ARRAY_BUFFER,
    bytearray: Category.UINT8_CLAMPED_ARRAY,
    memoryview: Category.DATA_VIEW,
}

# array.array typecodes, keyed by item size within each kind
_SIGNED_ARRAYS = {
    1: Category.INT8_ARRAY,
    2: Category.INT16_ARRAY,
    4: Category.INT32_ARRAY,
    8: Category.BIGINT64_ARRAY,
}
_UNSIGNED_ARRAYS = {
    1: Category.UINT8_ARRAY,
    2: Category.UINT16_ARRAY,
    4: Category.UINT32_ARRAY,
    8: Category.BIGUINT64_ARRAY,
}
_FLOAT_ARRAYS = {
    2: Category.FLOAT16_ARRAY,
    4: Category.FLOAT32_ARRAY,
    8: Category.FLOAT64_ARRAY,
}


def _array_category(value: array.array) -> Category:
    """Map an ``array.array`` to its fixed-width view category.

    Character arrays (``'u'``, ``'w'``) have no binary view counterpart and
    fall back to ``Object``.
    """
    typecode = value.typecode
    if typecode in "bhilq":
        table = _SIGNED_ARRAYS
    elif typecode in "BHILQ":
        table = _UNSIGNED_ARRAYS
    elif typecode in "efd":
        table = _FLOAT_ARRAYS
    else:
        return Category.OBJECT
    return table.get(value.itemsize, Category.OBJECT)


def _primitive_category(value: Any) -> Category | None:
    # Enum before int/str: IntEnum and StrEnum members are both
    if isinstance(value, Enum):
        return Category.SYMBOL
    if isinstance(value, bool):
        return Category.BOOLEAN
    if isinstance(value, str):
        return Category.STRING
    if isinstance(value, float):
        return Category.NUMBER
    if isinstance(value, int):
        return Category.NUMBER if abs(value) <= MAX_SAFE_INTEGER else Category.BIGINT
    return None


def _tag_category(value: Any) -> Category:
    if type(value) is dict:
        return Category.OBJECT
    if isinstance(value, array.array):
        return _array_category(value)
    for klass in type(value).__mro__:
        category = _TAG_TABLE.get(klass)
        if category is not None:
            return category
    logger.debug("No construction tag for %s, classifying as Object", type(value).__qualname__)
    return Category.OBJECT


def classify(value: Any) -> Category:
    """Return the most specific category of ``value``.

    Parameters
    ----------
    value
        Any Python value.

    Returns
    -------
    Category
        Exactly one category. Unknown values classify as ``Object``; this
        function never raises.

    Examples
    --------
    >>> classify("")
    <Category.STRING: 'string'>
    >>> classify(2**64)
    <Category.BIGINT: 'bigint'>
    >>> classify(lambda: None)
    <Category.FUNCTION: 'Function'>
    """
    if value is UNDEFINED:
        return Category.UNDEFINED
    if value is None:
        return Category.NULL

    primitive = _primitive_category(value)
    if primitive is not None:
        return primitive

    if callable(value):
        return Category.FUNCTION

    return _tag_category(value)
