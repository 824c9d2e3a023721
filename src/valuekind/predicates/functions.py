"""Predicates for callables.

The refinements read the code flags of the underlying function through
``inspect``, which also looks through bound methods and
``functools.partial`` objects.
"""

import functools
import inspect
import types
from typing import Any

from valuekind.classifier import classify
from valuekind.predicates.base import predicate
from valuekind.taxonomy import Category, TypeDescription


@predicate("function", Category.FUNCTION)
def is_function(value: Any) -> bool:
    return classify(value) is Category.FUNCTION


@predicate("async_function", description=TypeDescription.ASYNC_FUNCTION)
def is_async_function(value: Any) -> bool:
    return is_function(value) and inspect.iscoroutinefunction(value)


@predicate("generator_function", description=TypeDescription.GENERATOR_FUNCTION)
def is_generator_function(value: Any) -> bool:
    return is_function(value) and inspect.isgeneratorfunction(value)


@predicate("async_generator_function", description=TypeDescription.ASYNC_GENERATOR_FUNCTION)
def is_async_generator_function(value: Any) -> bool:
    return is_function(value) and inspect.isasyncgenfunction(value)


# Method objects that carry their receiver as ``__self__``
_BOUND_METHOD_TYPES = (types.MethodType, types.BuiltinMethodType, types.MethodWrapperType)


@predicate("bound_function", description=TypeDescription.BOUND_FUNCTION)
def is_bound_function(value: Any) -> bool:
    """Check for a callable with a bound receiver or pre-bound arguments.

    Bound methods (``obj.method``, ``[].append``, ``[].__len__``) and
    ``functools.partial`` objects qualify. Builtins whose ``__self__`` is
    their module (``len``) and plain functions do not.

    Best effort: a classmethod looked up on its class is a bound method
    too, and a partial that binds no arguments still counts as bound.
    """
    if not is_function(value):
        return False
    if isinstance(value, functools.partial):
        return True
    if isinstance(value, _BOUND_METHOD_TYPES):
        receiver = getattr(value, "__self__", None)
        return receiver is not None and not isinstance(receiver, types.ModuleType)
    return False


@predicate("class_", description=TypeDescription.CLASS)
def is_class(value: Any) -> bool:
    return inspect.isclass(value)
