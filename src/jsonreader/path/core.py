from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import overload

from ..errors import InvalidPathConstant, PathParsingError
from .cache import PathCache, get_path_cache
from .components import COMPONENT_TYPES, Component, render_components
from .scanner import ComponentVisitor, enumerate_components


@dataclass(frozen=True, init=False)
class JSONPath:
    """An immutable route from a tree's root to a nested value."""

    components: tuple[Component, ...]

    def __init__(self, components: Iterable[Component] = ()) -> None:
        items = tuple(components)
        for index, item in enumerate(items):
            if not isinstance(item, COMPONENT_TYPES):
                raise TypeError(
                    f"JSONPath components must be path components, "
                    f"got {type(item).__name__} at index {index}"
                )
        object.__setattr__(self, "components", items)

    @classmethod
    def parse(cls, path: str, *, cache: PathCache | None = None) -> JSONPath:
        """Parse ``path``, reusing earlier results held by ``cache``.

        Raises a ``PathParsingError`` subclass when ``path`` is malformed.
        """

        if not isinstance(path, str):
            raise TypeError(f"path must be a str, got {type(path).__name__}")
        resolved_cache = get_path_cache() if cache is None else cache
        return cls(resolved_cache.get_or_parse(path))

    @classmethod
    def constant(cls, path: str) -> JSONPath:
        """Parse a path literal that is known to be valid.

        Meant for module-level constants. A malformed literal is a bug in the
        calling code, so it raises ``InvalidPathConstant`` rather than a
        recoverable ``PathParsingError``.
        """

        try:
            return cls.parse(path)
        except PathParsingError as exc:
            raise InvalidPathConstant(
                f"path literal {path!r} is not a valid path: {exc}"
            ) from exc

    @staticmethod
    def enumerate(path: str, visitor: ComponentVisitor) -> None:
        enumerate_components(path, visitor)

    @property
    def is_empty(self) -> bool:
        return not self.components

    def __iter__(self) -> Iterator[Component]:
        return iter(self.components)

    def __len__(self) -> int:
        return len(self.components)

    @overload
    def __getitem__(self, index: int) -> Component: ...

    @overload
    def __getitem__(self, index: slice) -> JSONPath: ...

    def __getitem__(self, index: int | slice) -> Component | JSONPath:
        if isinstance(index, slice):
            return JSONPath(self.components[index])
        return self.components[index]

    def __add__(self, other: object) -> JSONPath:
        if not isinstance(other, JSONPath):
            return NotImplemented
        return JSONPath(self.components + other.components)

    def __str__(self) -> str:
        return render_components(self.components)

    def __repr__(self) -> str:
        return f"JSONPath({str(self)!r})"


def as_path(path: JSONPath | str) -> JSONPath:
    if isinstance(path, JSONPath):
        return path
    return JSONPath.parse(path)


__all__ = ["JSONPath", "as_path"]
