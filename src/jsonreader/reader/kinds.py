"""Classification of decoded tree values."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from typing import TypeAlias

JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = (
    JSONScalar | list["JSONValue"] | tuple["JSONValue", ...] | dict[str, "JSONValue"]
)


class _Missing:
    """Sentinel for an absent value, as opposed to JSON ``null``."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: _Missing = _Missing()


class TreeKind(str, enum.Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    MAP = "map"
    MISSING = "missing"
    OTHER = "other"


def is_array(value: object) -> bool:
    return isinstance(value, (list, tuple))


def is_map(value: object) -> bool:
    return isinstance(value, Mapping)


def kind_of(value: object) -> TreeKind:
    if value is MISSING:
        return TreeKind.MISSING
    if value is None:
        return TreeKind.NULL
    if isinstance(value, bool):
        return TreeKind.BOOLEAN
    if isinstance(value, (int, float)):
        return TreeKind.NUMBER
    if isinstance(value, str):
        return TreeKind.STRING
    if is_array(value):
        return TreeKind.ARRAY
    if is_map(value):
        return TreeKind.MAP
    return TreeKind.OTHER


__all__ = [
    "JSONScalar",
    "JSONValue",
    "MISSING",
    "TreeKind",
    "is_array",
    "is_map",
    "kind_of",
]
