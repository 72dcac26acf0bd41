"""Scanner for path strings such as ``users[0]['display name'].email``.

A path is a sequence of components. Each component is either a bare
identifier (``name``) or a bracketed subscript (``[3]``, ``[-1]``,
``[self]``, ``['any text']``), optionally followed by a run of dots::

    path          := component*
    component     := (subscript | identifier) '.'*
    subscript     := '[' (integer | 'self' | quotedString) ']'
    identifier    := [A-Za-z$_] [A-Za-z$_0-9]*
    quotedString  := "'" (char | "`'" | "``" | "`")* "'"

Inside a quoted string a backtick escapes the following quote or backtick.
A backtick followed by anything else is kept as a literal backtick.
"""

from __future__ import annotations

import re
import string
from collections.abc import Callable, Iterator

from ..errors import (
    ExpectedComponentError,
    ExpectedEndOfSubscriptError,
    InvalidSubscriptValueError,
    UnexpectedEndOfStringError,
)
from .components import (
    INT64_MAX,
    INT64_MIN,
    SELF_REFERENCE,
    Component,
    NumericComponent,
    TextComponent,
)

_HEAD_CHARACTERS = frozenset(string.ascii_letters + "$_")
_BODY_CHARACTERS = _HEAD_CHARACTERS | frozenset(string.digits)
_QUOTED_STRING_DELIMITERS = frozenset("`'")
_DOT = frozenset(".")
_INTEGER_PATTERN = re.compile(r"-?[0-9]+")

ComponentVisitor = Callable[[Component, int], bool | None]


class _PathScanner:
    """Cursor over a path string. Whitespace is never skipped."""

    def __init__(self, path: str) -> None:
        self.path = path
        self.position = 0

    @property
    def at_end(self) -> bool:
        return self.position >= len(self.path)

    def scan_component(self) -> Component:
        start = self.position
        component = self._scan_subscript()
        if component is None:
            component = self._scan_identifier()
        if component is None:
            raise ExpectedComponentError(self.path, start)
        self._scan_characters(_DOT)
        return component

    def _scan_string(self, literal: str) -> bool:
        if self.path.startswith(literal, self.position):
            self.position += len(literal)
            return True
        return False

    def _scan_characters(self, characters: frozenset[str]) -> str:
        start = self.position
        while not self.at_end and self.path[self.position] in characters:
            self.position += 1
        return self.path[start : self.position]

    def _scan_up_to_characters(self, characters: frozenset[str]) -> str:
        start = self.position
        while not self.at_end and self.path[self.position] not in characters:
            self.position += 1
        return self.path[start : self.position]

    def _scan_integer(self) -> int | None:
        match = _INTEGER_PATTERN.match(self.path, self.position)
        if match is None:
            return None
        value = int(match.group())
        if not INT64_MIN <= value <= INT64_MAX:
            raise InvalidSubscriptValueError(self.path, self.position)
        self.position = match.end()
        return value

    def _scan_subscript(self) -> Component | None:
        opening = self.position
        if not self._scan_string("["):
            return None

        body_start = self.position
        component: Component
        index = self._scan_integer()
        if index is not None:
            component = NumericComponent(index=index)
        elif self._scan_string("self"):
            component = SELF_REFERENCE
        else:
            text = self._scan_quoted_string()
            if text is None:
                if "]" not in self.path[body_start:]:
                    raise ExpectedEndOfSubscriptError(self.path, opening)
                raise InvalidSubscriptValueError(self.path, body_start)
            component = TextComponent(name=text)

        if not self._scan_string("]"):
            raise ExpectedEndOfSubscriptError(self.path, self.position)
        return component

    def _scan_identifier(self) -> Component | None:
        # Only ASCII identifiers; anything else can use the quoted form.
        if self.at_end or self.path[self.position] not in _HEAD_CHARACTERS:
            return None
        return TextComponent(name=self._scan_characters(_BODY_CHARACTERS))

    def _scan_quoted_string(self) -> str | None:
        opening = self.position
        if not self._scan_string("'"):
            return None

        fragments: list[str] = []
        while not self.at_end:
            fragments.append(self._scan_up_to_characters(_QUOTED_STRING_DELIMITERS))

            while True:
                if self._scan_string("`'"):
                    fragments.append("'")
                elif self._scan_string("``"):
                    fragments.append("`")
                elif self._scan_string("`"):
                    fragments.append("`")
                else:
                    break

            if self._scan_string("'"):
                return "".join(fragments)

        raise UnexpectedEndOfStringError(self.path, opening)


def iter_components(path: str) -> Iterator[Component]:
    """Lazily yield the components of ``path``.

    Scanning stops where the consumer stops iterating, so a malformed suffix
    is only reported if it is reached.
    """

    scanner = _PathScanner(path)
    while not scanner.at_end:
        yield scanner.scan_component()


def enumerate_components(path: str, visitor: ComponentVisitor) -> None:
    """Call ``visitor(component, index)`` for each component of ``path``.

    A truthy return value from ``visitor`` stops the enumeration; the rest of
    the string is not scanned.
    """

    for index, component in enumerate(iter_components(path)):
        if visitor(component, index):
            return


def parse_components(path: str) -> tuple[Component, ...]:
    """Parse ``path`` without consulting any cache."""

    return tuple(iter_components(path))


__all__ = [
    "ComponentVisitor",
    "enumerate_components",
    "iter_components",
    "parse_components",
]
