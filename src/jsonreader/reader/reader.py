from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar, cast, overload

from ..config import JSONREADER_CONFIG
from ..errors import (
    DocumentDecodeError,
    PathTraversalError,
    ReaderMissingValueError,
    ReaderUnexpectedTypeError,
)
from ..path.core import JSONPath, as_path
from . import navigator
from .kinds import MISSING, is_array, is_map, kind_of

T = TypeVar("T")


class JSONReader:
    """Read typed values out of a decoded JSON tree.

    ``root_value`` is never copied or mutated. A reader created without a
    root value (or by subscripting past the edge of the tree) is *empty*.
    """

    __slots__ = ("_root_value",)

    def __init__(self, root_value: object = MISSING) -> None:
        self._root_value = root_value

    @classmethod
    def from_json(
        cls,
        data: str | bytes | bytearray,
        *,
        allow_fragments: bool | None = None,
    ) -> JSONReader:
        """Decode ``data`` with :func:`json.loads` and wrap the result.

        Unless fragments are allowed the top level must be an array or an
        object.
        """

        if allow_fragments is None:
            allow_fragments = JSONREADER_CONFIG.allow_fragments
        try:
            root = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DocumentDecodeError(f"invalid JSON document: {exc}") from exc
        if not allow_fragments and not isinstance(root, (list, dict)):
            raise DocumentDecodeError(
                f"JSON document top level must be an array or object, "
                f"got {kind_of(root).value}"
            )
        return cls(root)

    @property
    def root_value(self) -> object:
        return self._root_value

    @property
    def is_empty(self) -> bool:
        return self._root_value is MISSING

    # Root value access

    @overload
    def value(self, expected_type: type[T]) -> T: ...

    @overload
    def value(self, expected_type: tuple[type, ...] = ...) -> Any: ...

    def value(self, expected_type: navigator.ExpectedType = object) -> Any:
        if self.is_empty:
            raise ReaderMissingValueError()
        matched, coerced = navigator.coerce_value(self._root_value, expected_type)
        if not matched:
            raise ReaderUnexpectedTypeError(expected_type, kind_of(self._root_value))
        return coerced

    # Element access

    def is_valid_index(self, relative_index: int) -> bool:
        if not is_array(self._root_value):
            return False
        array = cast(Sequence[object], self._root_value)
        return navigator.absolute_index(relative_index, len(array)) is not None

    def is_valid_key(self, key: str) -> bool:
        if not is_map(self._root_value):
            return False
        return key in cast(Mapping[str, object], self._root_value)

    def __getitem__(self, key: int | str) -> JSONReader:
        if isinstance(key, bool):
            raise TypeError("JSONReader indices must be int or str, not bool")
        if isinstance(key, int):
            if not self.is_valid_index(key):
                return JSONReader()
            array = cast(Sequence[object], self._root_value)
            index = navigator.absolute_index(key, len(array))
            return JSONReader(array[cast(int, index)])
        if isinstance(key, str):
            if not self.is_valid_key(key):
                return JSONReader()
            return JSONReader(cast(Mapping[str, object], self._root_value)[key])
        raise TypeError(
            f"JSONReader indices must be int or str, not {type(key).__name__}"
        )

    # Path access

    @overload
    def value_at(
        self,
        path: JSONPath | str,
        expected_type: type[T],
        *,
        null_substitution: Any = MISSING,
    ) -> T: ...

    @overload
    def value_at(
        self,
        path: JSONPath | str,
        expected_type: tuple[type, ...] = ...,
        *,
        null_substitution: Any = MISSING,
    ) -> Any: ...

    def value_at(
        self,
        path: JSONPath | str,
        expected_type: navigator.ExpectedType = object,
        *,
        null_substitution: Any = MISSING,
    ) -> Any:
        """Return the value at ``path`` as ``expected_type``.

        ``null_substitution`` replaces a resolved JSON ``null``. Raises a
        ``PathParsingError`` for a malformed path string and a
        ``PathTraversalError`` when the tree does not match the path.
        """

        return navigator.value_at(
            self._root_value,
            as_path(path),
            expected_type,
            null_substitution=null_substitution,
        )

    def reader_at(self, path: JSONPath | str) -> JSONReader:
        """Return a reader rooted at the value found at ``path``."""

        return JSONReader(self.value_at(path))

    def optional_value_at(
        self,
        path: JSONPath | str,
        expected_type: navigator.ExpectedType = object,
        *,
        substitute_null_with_none: bool = True,
    ) -> Any | None:
        """Like :meth:`value_at`, but return ``None`` instead of raising a
        traversal error. A resolved ``null`` is returned as ``None`` unless
        ``substitute_null_with_none`` is false, in which case it must match
        ``expected_type``.
        """

        try:
            value, _ = navigator.resolve(self._root_value, as_path(path))
        except PathTraversalError:
            return None
        if value is MISSING or (substitute_null_with_none and value is None):
            return None
        matched, coerced = navigator.coerce_value(value, expected_type)
        return coerced if matched else None

    def value_or_default(
        self,
        path: JSONPath | str,
        default: T,
        expected_type: navigator.ExpectedType = object,
    ) -> Any | T:
        try:
            return self.value_at(path, expected_type)
        except PathTraversalError:
            return default

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JSONReader):
            return NotImplemented
        if self.is_empty or other.is_empty:
            return self.is_empty and other.is_empty
        return bool(self._root_value == other._root_value)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"JSONReader({self._root_value!r})"


__all__ = ["JSONReader"]
