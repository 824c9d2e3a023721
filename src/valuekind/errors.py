"""Error types and mismatch reports."""

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, SerializationInfo, field_serializer

from valuekind.classifier import classify
from valuekind.config import get_settings


def render_value(value: Any) -> str:
    """Return ``repr(value)``, or a type placeholder when ``__repr__`` fails."""
    try:
        return repr(value)
    except Exception:
        return f"<{type(value).__qualname__} object>"


def truncate(text: str, max_length: int | None = None) -> str:
    """Cut ``text`` to ``max_length`` characters (settings default), marking the cut with ``...``."""
    if max_length is None:
        max_length = get_settings().repr_max_length
    return text if len(text) <= max_length else text[:max_length] + "..."


def _quote(labels: Sequence[str]) -> list[str]:
    return [f"`{label}`" for label in labels]


class ValueKindError(Exception):
    """Base class for every error raised by valuekind."""


class ArgumentError(ValueKindError, TypeError):
    """Raised when a predicate or combinator is called with malformed arguments."""


class MismatchReport(BaseModel):
    """Structured description of a failed assertion.

    Attributes
    ----------
    expected
        Categories or refinements the value was required to match. More than
        one entry means any of them would have been accepted.
    received
        Distinct categories of the offending values, in first-seen order.
    rendered
        ``repr`` of each offending value.
    predicate
        Public name of the predicate that rejected the value(s), if known.
    multiple_values
        Whether the assertion was made over several values (combinators).
    quantifier
        ``"all"`` when every value had to match, ``"any"`` otherwise.

    Notes
    -----
    ``repr(report)`` returns JSON with ``None`` fields excluded and value
    renderings truncated to the configured ``repr_max_length``.
    """

    model_config = ConfigDict(frozen=True)

    expected: list[str]
    received: list[str]
    rendered: list[str]
    predicate: str | None = None
    multiple_values: bool = False
    quantifier: str = "any"

    @field_serializer("rendered")
    def _truncate(self, v: list[str], info: SerializationInfo) -> list[str]:
        ctx = info.context or {}
        if ctx.get("truncate"):
            return [truncate(s) for s in v]
        return v

    @classmethod
    def for_values(
        cls,
        expected: Sequence[str],
        values: Sequence[Any],
        *,
        predicate: str | None = None,
        multiple_values: bool = False,
        quantifier: str = "any",
    ) -> "MismatchReport":
        """Build a report, classifying each offending value."""
        received: list[str] = []
        for value in values:
            category = classify(value).value
            if category not in received:
                received.append(category)
        return cls(
            expected=[str(label) for label in expected],
            received=received,
            rendered=[render_value(value) for value in values],
            predicate=predicate,
            multiple_values=multiple_values,
            quantifier=quantifier,
        )

    @property
    def message(self) -> str:
        """Human-readable failure message."""
        received = ", ".join(_quote(self.received))
        if self.multiple_values:
            if self.quantifier == "all":
                expected = "all " + " and ".join(_quote(self.expected))
            else:
                expected = " or ".join(_quote(self.expected))
            message = f"Expected values which are {expected}, received values of types {received}."
        else:
            expected = " or ".join(_quote(self.expected))
            message = f"Expected value which is {expected}, received value of type {received}."

        if get_settings().show_values and self.rendered:
            message += " Received: " + ", ".join(truncate(v) for v in self.rendered)
        return message

    def __repr__(self) -> str:
        return self.model_dump_json(
            indent=2,
            exclude_none=True,
            context={"truncate": True},
        )


class TypeMismatchError(ValueKindError, TypeError):
    """TypeError raised by assertion forms, with an attached MismatchReport."""

    def __init__(self, report: MismatchReport):
        self.report = report
        super().__init__(report.message)

    @classmethod
    def for_value(cls, expected: str, value: Any, predicate: str | None = None) -> "TypeMismatchError":
        """Build the error for a single rejected value."""
        return cls(MismatchReport.for_values([expected], [value], predicate=predicate))
