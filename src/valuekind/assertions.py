"""Assertion wrapper turning predicates into raising checks."""

from collections.abc import Callable
from functools import wraps
from typing import Any, Protocol

from valuekind.errors import TypeMismatchError
from valuekind.predicates.base import describe, expected_label


class Assertion(Protocol):
    """Callable protocol for assertions.

    Same argument shape as the predicate it wraps. Returns ``None`` when the
    predicate holds and raises :class:`~valuekind.errors.TypeMismatchError`
    otherwise.
    """

    def __call__(self, value: Any, /, *args: Any) -> None: ...


def assertion(func: Callable[..., bool]) -> Assertion:
    """Wrap a predicate into its assertion form.

    The predicate is evaluated exactly once per call. Exceptions it raises
    (for instance ``ArgumentError`` from a malformed range bound) propagate
    unchanged.

    Example:
        >>> assert_number = assertion(is_number)
        >>> assert_number(5)
        >>> assert_number("5")
        Traceback (most recent call last):
        ...
        valuekind.errors.TypeMismatchError: Expected value which is `number`, received value of type `string`. ...
    """
    spec = describe(func)
    name = spec.name if spec is not None else getattr(func, "__name__", None)
    expected = expected_label(func)

    @wraps(func)
    def check(value: Any, /, *args: Any) -> None:
        if not func(value, *args):
            raise TypeMismatchError.for_value(expected, value, predicate=name)

    check.__name__ = f"assert_{name}" if name else "assertion"
    return check
