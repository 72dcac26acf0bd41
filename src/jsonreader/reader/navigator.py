"""Walk a path through a decoded tree."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar, cast, overload

from ..errors import (
    ComponentStep,
    InvalidSubscriptError,
    MissingValueError,
    PathTraversalError,
    UnexpectedTypeError,
)
from ..path.components import NumericComponent, SelfReferenceComponent, TextComponent
from ..path.core import JSONPath
from ..runtime.logging import get_logger
from .kinds import MISSING, TreeKind, is_array, is_map, kind_of

T = TypeVar("T")

ExpectedType = type | tuple[type, ...]


def absolute_index(relative_index: int, length: int) -> int | None:
    """Map ``relative_index`` onto ``[0, length)``; negative values count from the end."""

    index = length + relative_index if relative_index < 0 else relative_index
    if 0 <= index < length:
        return index
    return None


def _log_failure(error: PathTraversalError) -> PathTraversalError:
    logger = get_logger()
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "traverse %s failed: %s",
            error.path,
            error.reason,
            extra={"jsonreader_action_color": "yellow"},
        )
    return error


def resolve(root: object, path: JSONPath) -> tuple[object, tuple[ComponentStep, ...]]:
    """Return the value at ``path`` and the steps taken to reach it.

    ``root`` may be ``MISSING``; the result is then ``MISSING`` when every
    component is a self reference.
    """

    current: object = root
    stack: list[ComponentStep] = []

    for step, component in enumerate(path.components):
        stack.append(ComponentStep(component, current))

        if isinstance(component, SelfReferenceComponent):
            continue

        if isinstance(component, NumericComponent):
            if not is_array(current):
                raise _log_failure(
                    UnexpectedTypeError(
                        path, stack, TreeKind.ARRAY, kind_of(current), failed_step=step
                    )
                )
            array = cast(Sequence[object], current)
            index = absolute_index(component.index, len(array))
            if index is None:
                raise _log_failure(
                    InvalidSubscriptError(path, stack, failed_step=step)
                )
            current = array[index]
            continue

        if isinstance(component, TextComponent):
            if not is_map(current):
                raise _log_failure(
                    UnexpectedTypeError(
                        path, stack, TreeKind.MAP, kind_of(current), failed_step=step
                    )
                )
            mapping = cast(Mapping[str, object], current)
            if component.name not in mapping:
                raise _log_failure(
                    InvalidSubscriptError(path, stack, failed_step=step)
                )
            current = mapping[component.name]
            continue

        raise TypeError(f"unsupported path component {component!r}")

    return current, tuple(stack)


def coerce_value(value: object, expected_type: ExpectedType) -> tuple[bool, object]:
    """Check ``value`` against ``expected_type``.

    ``bool`` never satisfies ``int`` or ``float``. An ``int`` satisfies
    ``float`` and is converted.
    """

    candidates = expected_type if isinstance(expected_type, tuple) else (expected_type,)
    for candidate in candidates:
        if candidate is object:
            return True, value
        if isinstance(value, bool) and candidate in (int, float):
            continue
        if isinstance(value, candidate):
            return True, value
        if candidate is float and isinstance(value, int) and not isinstance(value, bool):
            return True, float(value)
    return False, value


@overload
def value_at(
    root: object,
    path: JSONPath,
    expected_type: type[T],
    *,
    null_substitution: Any = MISSING,
) -> T: ...


@overload
def value_at(
    root: object,
    path: JSONPath,
    expected_type: tuple[type, ...] = ...,
    *,
    null_substitution: Any = MISSING,
) -> Any: ...


def value_at(
    root: object,
    path: JSONPath,
    expected_type: ExpectedType = object,
    *,
    null_substitution: Any = MISSING,
) -> Any:
    """Fetch the value at ``path`` below ``root`` as ``expected_type``.

    A resolved ``None`` is replaced by ``null_substitution`` when one is
    given. Raises ``MissingValueError`` when ``root`` is absent and the path
    does not leave it, ``UnexpectedTypeError`` and ``InvalidSubscriptError``
    when the tree does not have the shape the path describes.
    """

    value, stack = resolve(root, path)

    if value is MISSING:
        raise _log_failure(MissingValueError(path))

    if value is None and null_substitution is not MISSING:
        value = null_substitution

    matched, coerced = coerce_value(value, expected_type)
    if not matched:
        raise _log_failure(
            UnexpectedTypeError(path, stack, expected_type, kind_of(value))
        )
    return coerced


__all__ = ["ExpectedType", "absolute_index", "coerce_value", "resolve", "value_at"]
