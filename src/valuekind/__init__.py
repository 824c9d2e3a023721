"""valuekind - runtime value classification."""

from .taxonomy import MAX_SAFE_INTEGER, UNDEFINED, Category, TypeDescription
from .classifier import classify
from .errors import ArgumentError, MismatchReport, TypeMismatchError, ValueKindError
from .config import ValueKindSettings, get_settings, reset_settings
from .predicates import CATEGORY_PREDICATES, PREDICATES, Predicate, PredicateSpec, describe, predicate
from .assertions import Assertion, assertion
from .combinators import all_, any_, assert_all, assert_any
from .namespace import Assert, Is, assert_, is_
from .version import __version__


__all__ = [
    # Classification
    "classify",
    "Category",
    "TypeDescription",
    "UNDEFINED",
    "MAX_SAFE_INTEGER",
    # Namespaces
    "is_",
    "assert_",
    "Is",
    "Assert",
    # Predicates and assertions
    "CATEGORY_PREDICATES",
    "PREDICATES",
    "Predicate",
    "PredicateSpec",
    "describe",
    "predicate",
    "Assertion",
    "assertion",
    "any_",
    "all_",
    "assert_any",
    "assert_all",
    # Errors
    "ValueKindError",
    "ArgumentError",
    "TypeMismatchError",
    "MismatchReport",
    # Settings
    "ValueKindSettings",
    "get_settings",
    "reset_settings",
    "__version__",
]
