"""Tests for walking paths through decoded trees."""

import pytest

from jsonreader.errors import (
    ComponentStep,
    InvalidSubscriptError,
    MissingValueError,
    PathTraversalError,
    UnexpectedTypeError,
)
from jsonreader.path.components import SELF_REFERENCE, NumericComponent, TextComponent
from jsonreader.path.core import JSONPath
from jsonreader.reader.kinds import MISSING, TreeKind
from jsonreader.reader.navigator import absolute_index, resolve, value_at


def p(text: str) -> JSONPath:
    return JSONPath.parse(text)


def test_absolute_index_handles_relative_indices() -> None:
    assert absolute_index(0, 3) == 0
    assert absolute_index(2, 3) == 2
    assert absolute_index(-1, 3) == 2
    assert absolute_index(-3, 3) == 0
    assert absolute_index(3, 3) is None
    assert absolute_index(-4, 3) is None
    assert absolute_index(0, 0) is None


def test_nested_integer_lookup() -> None:
    assert value_at({"a": {"b": [10, 20]}}, p("a.b[0]"), int) == 10


def test_missing_key_is_invalid_subscript() -> None:
    with pytest.raises(InvalidSubscriptError) as excinfo:
        value_at({"a": {"b": {}}}, p("a['b']['c']"))

    error = excinfo.value
    assert error.reason == "invalidSubscript"
    assert error.failed_step == 2
    assert error.path == p("a.b.c")
    assert error.component_stack[-1] == ComponentStep(TextComponent(name="c"), {})


def test_self_reference_returns_root() -> None:
    assert value_at("hello", p("[self]"), str) == "hello"


def test_negative_index_counts_from_end() -> None:
    root = {"x": [1, 2, 3]}

    assert value_at(root, p("x[-1]"), int) == 3
    assert value_at(root, p("x[-1]"), int) == value_at(root, p("x[2]"), int)
    with pytest.raises(InvalidSubscriptError):
        value_at(root, p("x[-4]"), int)
    with pytest.raises(InvalidSubscriptError):
        value_at(root, p("x[3]"), int)


def test_null_substitution_replaces_resolved_null() -> None:
    root = {"a": {"b": None}}

    assert value_at(root, p("a.b"), int, null_substitution=0) == 0


def test_null_without_substitution_is_unexpected_type() -> None:
    with pytest.raises(UnexpectedTypeError) as excinfo:
        value_at({"a": None}, p("a"), int)

    assert excinfo.value.actual is TreeKind.NULL
    assert excinfo.value.expected is int
    assert excinfo.value.failed_step is None
    assert value_at({"a": None}, p("a")) is None


def test_substitution_only_applies_to_null() -> None:
    assert value_at({"a": 5}, p("a"), int, null_substitution=0) == 5


def test_text_component_against_array_is_unexpected_type() -> None:
    with pytest.raises(UnexpectedTypeError) as excinfo:
        value_at([1, 2], p("a"))

    assert excinfo.value.expected is TreeKind.MAP
    assert excinfo.value.actual is TreeKind.ARRAY
    assert excinfo.value.failed_step == 0


def test_numeric_component_against_map_is_unexpected_type() -> None:
    with pytest.raises(UnexpectedTypeError) as excinfo:
        value_at({"0": "zero"}, p("[0]"))

    assert excinfo.value.expected is TreeKind.ARRAY
    assert excinfo.value.actual is TreeKind.MAP


def test_numeric_component_against_string_is_unexpected_type() -> None:
    with pytest.raises(UnexpectedTypeError) as excinfo:
        value_at({"name": "abc"}, p("name[0]"))

    assert excinfo.value.actual is TreeKind.STRING
    assert excinfo.value.failed_step == 1


def test_final_type_mismatch() -> None:
    with pytest.raises(UnexpectedTypeError) as excinfo:
        value_at({"a": "1"}, p("a"), int)

    assert excinfo.value.actual is TreeKind.STRING
    assert len(excinfo.value.component_stack) == 1


def test_bool_is_not_a_number_but_int_is_a_float() -> None:
    with pytest.raises(UnexpectedTypeError):
        value_at({"flag": True}, p("flag"), int)
    assert value_at({"flag": True}, p("flag"), bool) is True

    result = value_at({"n": 3}, p("n"), float)
    assert result == 3.0
    assert isinstance(result, float)


def test_expected_type_tuple() -> None:
    assert value_at({"v": "s"}, p("v"), (int, str)) == "s"
    with pytest.raises(UnexpectedTypeError, match="expected int \\| str, got array"):
        value_at({"v": []}, p("v"), (int, str))


def test_tuples_are_arrays() -> None:
    assert value_at({"t": (1, 2)}, p("t[-1]"), int) == 2


def test_empty_path_against_absent_root_is_missing_value() -> None:
    with pytest.raises(MissingValueError) as excinfo:
        value_at(MISSING, JSONPath())

    assert excinfo.value.reason == "missingValue"
    assert excinfo.value.component_stack == ()
    with pytest.raises(MissingValueError):
        value_at(MISSING, p("[self][self]"))


def test_step_into_absent_root_is_unexpected_type() -> None:
    with pytest.raises(UnexpectedTypeError) as excinfo:
        value_at(MISSING, p("a"))

    assert excinfo.value.actual is TreeKind.MISSING


def test_empty_path_returns_root() -> None:
    root = {"a": 1}

    assert value_at(root, JSONPath(), dict) is root


def test_component_stack_records_value_before_each_step() -> None:
    inner = {"b": [True]}
    root = {"a": inner}

    _, stack = resolve(root, p("a[self].b[0]"))

    assert stack == (
        ComponentStep(TextComponent(name="a"), root),
        ComponentStep(SELF_REFERENCE, inner),
        ComponentStep(TextComponent(name="b"), inner),
        ComponentStep(NumericComponent(index=0), [True]),
    )


def test_traversal_error_message_lists_steps() -> None:
    with pytest.raises(PathTraversalError) as excinfo:
        value_at({"a": {"b": "text"}}, p("a.b[3]"))

    message = str(excinfo.value)
    assert "unexpected type at step 2: expected array, got string" in message
    assert "['a']['b'][3]" in message
    assert "  0: ['a'] on map" in message
    assert "  2: [3] on string" in message


def test_traversal_errors_are_lookup_errors() -> None:
    with pytest.raises(LookupError):
        value_at({}, p("missing"))


def test_navigation_does_not_mutate_tree() -> None:
    root = {"a": [{"b": None}]}

    value_at(root, p("a[-1].b"), int, null_substitution=7)

    assert root == {"a": [{"b": None}]}
