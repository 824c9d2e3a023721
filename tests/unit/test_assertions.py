import collections
import json

import pytest
from pydantic import ValidationError

from valuekind import (
    PREDICATES,
    Assert,
    Category,
    Is,
    MismatchReport,
    PredicateSpec,
    TypeDescription,
    TypeMismatchError,
    ValueKindError,
    assert_,
    assertion,
    describe,
    get_settings,
    is_,
    predicate,
    reset_settings,
)
from valuekind.errors import truncate


@pytest.fixture(autouse=True)
def fresh_settings():
    reset_settings()
    yield
    reset_settings()


class Unprintable:
    def __repr__(self):
        raise RuntimeError("no repr")


def test_assertion_returns_none_on_success():
    assert assert_.string("a") is None
    assert assert_.empty_map(collections.OrderedDict()) is None
    assert assert_.empty_object({}) is None


def test_assertion_failure_message():
    with pytest.raises(TypeMismatchError) as excinfo:
        assert_.number("5")

    assert str(excinfo.value) == "Expected value which is `number`, received value of type `string`. Received: '5'"


def test_refinement_failure_names_the_refinement():
    with pytest.raises(TypeMismatchError) as excinfo:
        assert_.empty_string("x")

    assert str(excinfo.value).startswith("Expected value which is `empty string`, received value of type `string`.")
    assert excinfo.value.report.predicate == "empty_string"


def test_mismatch_is_a_type_error_and_a_library_error():
    with pytest.raises(TypeError):
        assert_.boolean(0)
    with pytest.raises(ValueKindError):
        assert_.boolean(0)


def test_report_carries_structured_details():
    with pytest.raises(TypeMismatchError) as excinfo:
        assert_.map([1])

    report = excinfo.value.report
    assert report.expected == ["Map"]
    assert report.received == ["Array"]
    assert report.rendered == ["[1]"]
    assert report.multiple_values is False


def test_unprintable_values_are_rendered_by_type():
    with pytest.raises(TypeMismatchError, match="<Unprintable object>"):
        assert_.string(Unprintable())


def test_show_values_can_be_disabled(monkeypatch):
    monkeypatch.setenv("VALUEKIND_SHOW_VALUES", "false")
    reset_settings()

    with pytest.raises(TypeMismatchError) as excinfo:
        assert_.string(42)

    assert str(excinfo.value) == "Expected value which is `string`, received value of type `number`."


def test_long_values_are_truncated_in_messages_not_in_reports(monkeypatch):
    monkeypatch.setenv("VALUEKIND_REPR_MAX_LENGTH", "10")
    reset_settings()
    long_value = "a" * 100

    with pytest.raises(TypeMismatchError) as excinfo:
        assert_.number(long_value)

    report = excinfo.value.report
    assert str(excinfo.value).endswith("Received: 'aaaaaaaaa...")
    assert report.rendered == [repr(long_value)]
    assert json.loads(repr(report))["rendered"] == ["'aaaaaaaaa..."]


def test_settings_are_validated(monkeypatch):
    monkeypatch.setenv("VALUEKIND_REPR_MAX_LENGTH", "3")
    reset_settings()
    with pytest.raises(ValidationError):
        get_settings()


def test_settings_are_cached_until_reset():
    assert get_settings() is get_settings()
    first = get_settings()
    reset_settings()
    assert get_settings() is not first


def test_truncate_with_explicit_length():
    assert truncate("abcdef", 3) == "abc..."
    assert truncate("abc", 3) == "abc"


def test_report_for_values_deduplicates_received_categories():
    report = MismatchReport.for_values(["string"], [1, 2, None], multiple_values=True)
    assert report.received == ["number", "null"]
    assert "predicate" not in json.loads(repr(report))


def test_assertion_wraps_unregistered_callables():
    def is_positive(value):
        return value > 0

    check = assertion(is_positive)
    assert check.__name__ == "assert_is_positive"
    check(1)
    with pytest.raises(TypeMismatchError, match="`is_positive`"):
        check(-1)


def test_assertion_forwards_auxiliary_arguments():
    assert_.direct_instance_of(ValueError(), ValueError)
    with pytest.raises(TypeMismatchError, match="`T`"):
        assert_.direct_instance_of(KeyError(), LookupError)


class TestRegistry:
    def test_namespaces_expose_every_registered_predicate(self):
        for name, func in PREDICATES.items():
            assert getattr(Is, name) is func
            assert callable(getattr(Assert, name))
            assert getattr(Assert, name).__name__ == f"assert_{name}"

    def test_every_predicate_is_annotated_as_returning_bool(self):
        for name, func in PREDICATES.items():
            assert func.__annotations__.get("return") is bool, name

    def test_describe_returns_spec(self):
        spec = describe(is_.string)
        assert spec == PredicateSpec(name="string", category=Category.STRING)
        assert spec.expected == "string"
        assert describe(is_.numeric_string).expected == TypeDescription.NUMERIC_STRING.value
        assert describe(len) is None

    def test_spec_requires_a_label(self):
        with pytest.raises(ValidationError):
            PredicateSpec(name="nothing")

    def test_duplicate_names_are_rejected(self):
        with pytest.raises(ValueError, match="already registered"):
            predicate("string", Category.STRING)(lambda value: True)
        assert PREDICATES["string"] is is_.string
