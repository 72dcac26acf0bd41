"""Path component models."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Annotated, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class _ComponentNode(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    def render(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.render()


class TextComponent(_ComponentNode):
    """A map key."""

    kind: Literal["text"] = "text"
    name: StrictStr

    def render(self) -> str:
        return encode_text_subscript(self.name)


class NumericComponent(_ComponentNode):
    """An array index; negative values count back from the end."""

    kind: Literal["numeric"] = "numeric"
    index: Annotated[StrictInt, Field(ge=INT64_MIN, le=INT64_MAX)]

    def render(self) -> str:
        return f"[{self.index}]"


class SelfReferenceComponent(_ComponentNode):
    """The current value, unchanged."""

    kind: Literal["self"] = "self"

    def render(self) -> str:
        return "[self]"


Component: TypeAlias = Annotated[
    TextComponent | NumericComponent | SelfReferenceComponent,
    Field(discriminator="kind"),
]

COMPONENT_TYPES = (TextComponent, NumericComponent, SelfReferenceComponent)

SELF_REFERENCE = SelfReferenceComponent()


def encode_text_subscript(text: str) -> str:
    """Return ``text`` as a quoted subscript, e.g. ``['it`'s']``.

    Backticks are doubled before quotes are escaped; the other order would
    escape the backticks introduced for the quotes.
    """

    escaped = text.replace("`", "``").replace("'", "`'")
    return f"['{escaped}']"


def render_components(components: Iterable[Component]) -> str:
    return "".join(component.render() for component in components)


__all__ = [
    "COMPONENT_TYPES",
    "Component",
    "INT64_MAX",
    "INT64_MIN",
    "NumericComponent",
    "SELF_REFERENCE",
    "SelfReferenceComponent",
    "TextComponent",
    "encode_text_subscript",
    "render_components",
]
