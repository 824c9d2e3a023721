"""Predicates for objects, built-in structured values and awaitables."""

import types
import urllib.parse
from typing import Any

import httpx

from valuekind.classifier import classify
from valuekind.predicates.base import predicate
from valuekind.taxonomy import Category, TypeDescription

# Types whose instances are plain key-value containers
_PLAIN_OBJECT_TYPES = (dict, object, types.SimpleNamespace)

_URL_TYPES = (
    httpx.URL,
    urllib.parse.SplitResult,
    urllib.parse.ParseResult,
    urllib.parse.SplitResultBytes,
    urllib.parse.ParseResultBytes,
)


@predicate("object", Category.OBJECT)
def is_object(value: Any) -> bool:
    return classify(value) is Category.OBJECT


@predicate("plain_object", description=TypeDescription.PLAIN_OBJECT)
def is_plain_object(value: Any) -> bool:
    """Check for a plain key-value container.

    Accepts a plain ``dict`` (what ``json.loads`` produces for an object),
    ``types.SimpleNamespace`` and ``object()``, whose types add no
    behaviour of their own. ``dict`` subclasses are ``Map`` values, and
    instances of any other class, including ones that merely look like a
    promise, are not plain.
    """
    return is_object(value) and type(value) in _PLAIN_OBJECT_TYPES


def _entry_count(value: Any) -> int:
    if isinstance(value, dict):
        return len(value)
    return len(getattr(value, "__dict__", ()))


@predicate("empty_object", description=TypeDescription.EMPTY_OBJECT)
def is_empty_object(value: Any) -> bool:
    """Check for a plain object with no keys (``dict``) or attributes."""
    return is_plain_object(value) and _entry_count(value) == 0


@predicate("non_empty_object", description=TypeDescription.NON_EMPTY_OBJECT)
def is_non_empty_object(value: Any) -> bool:
    return is_plain_object(value) and _entry_count(value) > 0


@predicate("regexp", Category.REGEXP)
def is_regexp(value: Any) -> bool:
    return classify(value) is Category.REGEXP


@predicate("date", Category.DATE)
def is_date(value: Any) -> bool:
    return classify(value) is Category.DATE


@predicate("error", Category.ERROR)
def is_error(value: Any) -> bool:
    return classify(value) is Category.ERROR


@predicate("promise", description=TypeDescription.PROMISE)
def is_promise(value: Any) -> bool:
    """Check for any awaitable.

    Structural: the value's type must expose a callable ``__await__``, so
    user-defined awaitables qualify alongside futures and coroutines. Use
    :func:`is_native_promise` to accept only the interpreter's own.
    """
    return callable(getattr(type(value), "__await__", None))


@predicate("native_promise", description=TypeDescription.NATIVE_PROMISE)
def is_native_promise(value: Any) -> bool:
    return classify(value) is Category.PROMISE


@predicate("generator", Category.GENERATOR)
def is_generator(value: Any) -> bool:
    return classify(value) is Category.GENERATOR


@predicate("async_generator", Category.ASYNC_GENERATOR)
def is_async_generator(value: Any) -> bool:
    return classify(value) is Category.ASYNC_GENERATOR


@predicate("direct_instance_of", description=TypeDescription.DIRECT_INSTANCE_OF)
def is_direct_instance_of(value: Any, cls: type) -> bool:
    """Check that ``value`` was built by ``cls`` itself, not by a subclass.

    >>> is_direct_instance_of(ValueError(), ValueError)
    True
    >>> is_direct_instance_of(ValueError(), Exception)
    False
    """
    return type(value) is cls


@predicate("url_instance", description=TypeDescription.URL_INSTANCE)
def is_url_instance(value: Any) -> bool:
    """Check for a parsed URL: ``httpx.URL`` or a ``urllib.parse`` result."""
    return isinstance(value, _URL_TYPES)
