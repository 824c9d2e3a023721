"""Predicate protocol, registry and the ``predicate`` decorator."""

import logging
from collections.abc import Callable
from typing import Any, Protocol, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator

from valuekind.taxonomy import Category, TypeDescription

logger = logging.getLogger(__name__)


class Predicate(Protocol):
    """Callable protocol for predicates.

    A predicate receives one value (plus, for a few predicates, auxiliary
    arguments such as a range bound or a class) and returns whether the
    value belongs to its category. Predicates are pure and total: they
    never raise for any value, only for malformed auxiliary arguments.
    """

    def __call__(self, value: Any, /, *args: Any) -> bool: ...


F = TypeVar("F", bound=Callable[..., bool])


class PredicateSpec(BaseModel):
    """Registry record describing a predicate.

    Attributes
    ----------
    name
        Public name, as exposed on ``is_`` and ``assert_``.
    category
        Category the predicate tests for, if it tests for a single one.
    description
        Refinement label for predicates narrower (or broader) than a
        category. At least one of ``category`` and ``description`` is set.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    category: Category | None = None
    description: TypeDescription | None = None

    @model_validator(mode="after")
    def _require_label(self) -> "PredicateSpec":
        if self.category is None and self.description is None:
            raise ValueError(f"Predicate {self.name!r} needs a category or a description")
        return self

    @property
    def expected(self) -> str:
        """Label naming what the predicate accepts, for failure messages."""
        label = self.description if self.description is not None else self.category
        assert label is not None
        return label.value


PREDICATES: dict[str, Callable[..., bool]] = {}


def predicate(
    name: str,
    category: Category | None = None,
    description: TypeDescription | None = None,
) -> Callable[[F], F]:
    """Register a function as a named predicate.

    The function is returned unchanged, with its :class:`PredicateSpec`
    attached as ``predicate_spec``.

    Example:
        >>> @predicate("string", Category.STRING)
        >>> def is_string(value):
        >>>     return classify(value) is Category.STRING
    """
    spec = PredicateSpec(name=name, category=category, description=description)

    def register(func: F) -> F:
        if name in PREDICATES:
            raise ValueError(f"Predicate {name!r} is already registered")
        func.predicate_spec = spec  # type: ignore[attr-defined]
        PREDICATES[name] = func
        logger.debug("Registered predicate %s -> %s", name, spec.expected)
        return func

    return register


def describe(func: Callable[..., Any]) -> PredicateSpec | None:
    """Return the PredicateSpec of a registered predicate, or None for other callables."""
    return getattr(func, "predicate_spec", None)


def expected_label(func: Callable[..., Any]) -> str:
    """Label naming what ``func`` accepts.

    Falls back to the callable's ``__name__`` (or ``repr``) for callables
    that were not registered with :func:`predicate`.
    """
    spec = describe(func)
    if spec is not None:
        return spec.expected
    return getattr(func, "__name__", None) or repr(func)
