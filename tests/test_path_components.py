"""Tests for path component models."""

import pytest
from pydantic import TypeAdapter, ValidationError

from jsonreader.path.components import (
    INT64_MAX,
    INT64_MIN,
    SELF_REFERENCE,
    Component,
    NumericComponent,
    SelfReferenceComponent,
    TextComponent,
    encode_text_subscript,
    render_components,
)


def test_components_compare_by_kind_and_payload() -> None:
    assert TextComponent(name="a") == TextComponent(name="a")
    assert TextComponent(name="a") != TextComponent(name="b")
    assert NumericComponent(index=1) == NumericComponent(index=1)
    assert NumericComponent(index=1) != NumericComponent(index=-1)
    assert SelfReferenceComponent() == SELF_REFERENCE
    assert TextComponent(name="1") != NumericComponent(index=1)


def test_components_hash_by_kind_and_payload() -> None:
    seen = {
        TextComponent(name="a"),
        TextComponent(name="a"),
        NumericComponent(index=0),
        SelfReferenceComponent(),
        SELF_REFERENCE,
    }

    assert len(seen) == 3


def test_components_are_frozen() -> None:
    component = TextComponent(name="a")

    with pytest.raises(ValidationError):
        component.name = "b"  # type: ignore[misc]


def test_numeric_component_rejects_out_of_range_and_non_int() -> None:
    assert NumericComponent(index=INT64_MAX).index == INT64_MAX
    assert NumericComponent(index=INT64_MIN).index == INT64_MIN

    with pytest.raises(ValidationError):
        NumericComponent(index=INT64_MAX + 1)
    with pytest.raises(ValidationError):
        NumericComponent(index="3")  # type: ignore[arg-type]


def test_component_union_validates_by_kind() -> None:
    adapter = TypeAdapter(Component)

    assert adapter.validate_python({"kind": "text", "name": "a"}) == TextComponent(
        name="a"
    )
    assert adapter.validate_python({"kind": "numeric", "index": -2}) == (
        NumericComponent(index=-2)
    )
    assert adapter.validate_python({"kind": "self"}) == SELF_REFERENCE
    assert TextComponent(name="x").model_dump(mode="json") == {
        "kind": "text",
        "name": "x",
    }


def test_components_render_bracketed() -> None:
    assert TextComponent(name="name").render() == "['name']"
    assert str(NumericComponent(index=-3)) == "[-3]"
    assert str(SELF_REFERENCE) == "[self]"
    assert (
        render_components(
            [TextComponent(name="a"), NumericComponent(index=0), SELF_REFERENCE]
        )
        == "['a'][0][self]"
    )


def test_encode_text_subscript_escapes_backticks_before_quotes() -> None:
    assert encode_text_subscript("plain") == "['plain']"
    assert encode_text_subscript("it's") == "['it`'s']"
    assert encode_text_subscript("a`b") == "['a``b']"
    assert encode_text_subscript("`'") == "['```'']"
    assert encode_text_subscript("") == "['']"
