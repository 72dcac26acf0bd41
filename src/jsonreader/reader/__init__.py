from .kinds import MISSING, JSONScalar, JSONValue, TreeKind, kind_of
from .navigator import absolute_index, resolve, value_at
from .reader import JSONReader

__all__ = [
    "JSONReader",
    "JSONScalar",
    "JSONValue",
    "MISSING",
    "TreeKind",
    "absolute_index",
    "kind_of",
    "resolve",
    "value_at",
]
