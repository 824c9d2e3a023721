"""``any`` / ``all`` combinators over predicates and values."""

from collections.abc import Callable, Sequence
from typing import Any

from valuekind.errors import ArgumentError, MismatchReport, TypeMismatchError
from valuekind.predicates.base import expected_label

PredicateArg = Callable[..., bool] | Sequence[Callable[..., bool]]


def _predicate_list(predicate: PredicateArg, allow_list: bool) -> list[Callable[..., bool]]:
    if allow_list and isinstance(predicate, (list, tuple)):
        predicates = list(predicate)
        if not predicates:
            raise ArgumentError("Expected at least one predicate, got an empty list")
    else:
        predicates = [predicate]  # type: ignore[list-item]

    for candidate in predicates:
        if not callable(candidate):
            raise ArgumentError(f"Expected a callable predicate, got {type(candidate).__qualname__}")
    return predicates


def _require_values(values: tuple[Any, ...]) -> None:
    if not values:
        raise ArgumentError("Expected at least one value to check, got none")


def any_(predicate: PredicateArg, *values: Any) -> bool:
    """Return True if any predicate holds for any value.

    Parameters
    ----------
    predicate
        A predicate, or a list/tuple of predicates.
    *values
        Values to test; at least one is required.

    Raises
    ------
    ArgumentError
        If no value is given, the predicate list is empty, or a predicate is
        not callable. Errors raised by a predicate itself propagate and
        abort the evaluation.
    """
    predicates = _predicate_list(predicate, allow_list=True)
    _require_values(values)
    return any(check(value) for check in predicates for value in values)


def all_(predicate: Callable[..., bool], *values: Any) -> bool:
    """Return True if ``predicate`` holds for every value.

    Only a single predicate is accepted; passing a list raises
    ``ArgumentError`` like any other non-callable.
    """
    predicates = _predicate_list(predicate, allow_list=False)
    _require_values(values)
    check = predicates[0]
    return all(check(value) for value in values)


def assert_any(predicate: PredicateArg, *values: Any) -> None:
    """Assertion form of :func:`any_`."""
    if not any_(predicate, *values):
        labels = [expected_label(check) for check in _predicate_list(predicate, allow_list=True)]
        raise TypeMismatchError(
            MismatchReport.for_values(labels, values, predicate="any", multiple_values=True, quantifier="any")
        )


def assert_all(predicate: Callable[..., bool], *values: Any) -> None:
    """Assertion form of :func:`all_`."""
    check = _predicate_list(predicate, allow_list=False)[0]
    _require_values(values)
    rejected = [value for value in values if not check(value)]
    if rejected:
        raise TypeMismatchError(
            MismatchReport.for_values(
                [expected_label(predicate)],
                rejected,
                predicate="all",
                multiple_values=True,
                quantifier="all",
            )
        )
