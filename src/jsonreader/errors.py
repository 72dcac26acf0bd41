"""Exception taxonomy for path parsing, tree traversal and root value access."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from typing import TYPE_CHECKING, ClassVar, NamedTuple

if TYPE_CHECKING:
    from .path.components import Component
    from .path.core import JSONPath
    from .reader.kinds import TreeKind


class JSONReaderError(Exception):
    """Base class for all jsonreader errors."""


class PathParsingError(JSONReaderError, ValueError):
    """A path string does not follow the path grammar."""

    reason: ClassVar[str] = "parsing"
    description: ClassVar[str] = "invalid path"

    def __init__(self, path: str, position: int) -> None:
        self.path = path
        self.position = position
        super().__init__(f"{self.description} at offset {position} in path {path!r}")


class ExpectedComponentError(PathParsingError):
    reason = "expectedComponent"
    description = "expected a subscript or identifier"


class InvalidSubscriptValueError(PathParsingError):
    reason = "invalidSubscriptValue"
    description = "subscript must be an integer, 'self' or a quoted string"


class ExpectedEndOfSubscriptError(PathParsingError):
    reason = "expectedEndOfSubscript"
    description = "expected ']'"


class UnexpectedEndOfStringError(PathParsingError):
    reason = "unexpectedEndOfString"
    description = "quoted string is not terminated"


class ComponentStep(NamedTuple):
    """A component together with the value it was applied to."""

    component: Component
    value: object


ComponentStack = tuple[ComponentStep, ...]


def _describe_expected(expected: object) -> str:
    if isinstance(expected, tuple):
        return " | ".join(_describe_expected(item) for item in expected)
    if isinstance(expected, enum.Enum):
        return str(expected.value)
    if isinstance(expected, type):
        return expected.__name__
    return str(expected)


class PathTraversalError(JSONReaderError, LookupError):
    """The tree does not have the shape a path expects."""

    reason: ClassVar[str] = "traversal"

    def __init__(
        self,
        path: JSONPath,
        component_stack: Sequence[ComponentStep] = (),
        *,
        failed_step: int | None = None,
    ) -> None:
        self.path = path
        self.component_stack: ComponentStack = tuple(component_stack)
        # None when the failure happened after the last component was applied.
        self.failed_step = failed_step
        super().__init__(self._format_message())

    def _summary(self) -> str:
        raise NotImplementedError

    def _format_message(self) -> str:
        from .reader.kinds import kind_of

        lines = [f"{self._summary()} while fetching value for path {str(self.path)!r}"]
        for index, step in enumerate(self.component_stack):
            lines.append(
                f"  {index}: {step.component.render()} on {kind_of(step.value).value}"
            )
        return "\n".join(lines)


class UnexpectedTypeError(PathTraversalError):
    reason = "unexpectedType"

    def __init__(
        self,
        path: JSONPath,
        component_stack: Sequence[ComponentStep],
        expected: TreeKind | type | tuple[type, ...],
        actual: TreeKind,
        *,
        failed_step: int | None = None,
    ) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(path, component_stack, failed_step=failed_step)

    def _summary(self) -> str:
        location = "at end of path"
        if self.failed_step is not None:
            location = f"at step {self.failed_step}"
        return (
            f"unexpected type {location}: expected "
            f"{_describe_expected(self.expected)}, got {self.actual.value}"
        )


class InvalidSubscriptError(PathTraversalError):
    reason = "invalidSubscript"

    def __init__(
        self,
        path: JSONPath,
        component_stack: Sequence[ComponentStep],
        *,
        failed_step: int,
    ) -> None:
        super().__init__(path, component_stack, failed_step=failed_step)

    def _summary(self) -> str:
        component = self.component_stack[self.failed_step].component
        return f"invalid subscript {component.render()} at step {self.failed_step}"


class MissingValueError(PathTraversalError):
    reason = "missingValue"

    def __init__(self, path: JSONPath) -> None:
        super().__init__(path)

    def _summary(self) -> str:
        return "missing value"


class ReaderValueError(JSONReaderError):
    """The root value of a reader cannot be returned as requested."""


class ReaderMissingValueError(ReaderValueError):
    def __init__(self) -> None:
        super().__init__("reader has no root value")


class ReaderUnexpectedTypeError(ReaderValueError, TypeError):
    def __init__(self, expected: type | tuple[type, ...], actual: TreeKind) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"root value has unexpected type: expected "
            f"{_describe_expected(expected)}, got {actual.value}"
        )


class DocumentDecodeError(JSONReaderError, ValueError):
    """Raw data could not be decoded into a tree."""


class InvalidPathConstant(RuntimeError):
    """A path literal declared as trusted does not parse."""


__all__ = [
    "ComponentStack",
    "ComponentStep",
    "DocumentDecodeError",
    "ExpectedComponentError",
    "ExpectedEndOfSubscriptError",
    "InvalidPathConstant",
    "InvalidSubscriptError",
    "InvalidSubscriptValueError",
    "JSONReaderError",
    "MissingValueError",
    "PathParsingError",
    "PathTraversalError",
    "ReaderMissingValueError",
    "ReaderUnexpectedTypeError",
    "ReaderValueError",
    "UnexpectedEndOfStringError",
    "UnexpectedTypeError",
]
