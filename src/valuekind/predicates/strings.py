"""Predicates refining the ``string`` category."""

import math
from typing import Any

import httpx

from valuekind.predicates.base import predicate
from valuekind.predicates.primitives import is_string
from valuekind.taxonomy import TypeDescription


@predicate("empty_string", description=TypeDescription.EMPTY_STRING)
def is_empty_string(value: Any) -> bool:
    return is_string(value) and len(value) == 0


@predicate("non_empty_string", description=TypeDescription.NON_EMPTY_STRING)
def is_non_empty_string(value: Any) -> bool:
    return is_string(value) and len(value) > 0


@predicate("empty_string_or_whitespace", description=TypeDescription.EMPTY_STRING_OR_WHITESPACE)
def is_empty_string_or_whitespace(value: Any) -> bool:
    return is_string(value) and not value.strip()


def _parses_as_finite_number(text: str) -> bool:
    try:
        int(text, 0)
    except ValueError:
        pass
    else:
        return True

    try:
        number = float(text)
    except ValueError:
        return False
    return math.isfinite(number)


@predicate("numeric_string", description=TypeDescription.NUMERIC_STRING)
def is_numeric_string(value: Any) -> bool:
    """Check for a string holding a finite numeric literal.

    Integer literals are read the way ``int(text, 0)`` reads them, so base
    prefixes (``"0x56"``, ``"0o17"``, ``"0b101"``) and digit separators
    (``"1_000"``) are accepted; anything else must satisfy ``float()``.
    Surrounding whitespace is ignored, but a string made only of whitespace
    is not numeric. ``"inf"`` and ``"nan"`` parse but are not finite, and
    are rejected.

    Examples
    --------
    >>> is_numeric_string("-3.2")
    True
    >>> is_numeric_string("0x56")
    True
    >>> is_numeric_string(" ")
    False
    """
    if not is_string(value):
        return False
    text = value.strip()
    return bool(text) and _parses_as_finite_number(text)


@predicate("url_string", description=TypeDescription.URL_STRING)
def is_url_string(value: Any) -> bool:
    """Check for a string that parses as an absolute URL (scheme and host)."""
    if not is_string(value):
        return False
    try:
        url = httpx.URL(value)
    except (httpx.InvalidURL, UnicodeError):
        return False
    return url.is_absolute_url
