"""Memo of parsed path strings."""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass

from ..config import JSONREADER_CONFIG
from ..runtime.logging import get_logger
from .components import Component
from .scanner import parse_components


@dataclass(frozen=True)
class PathCacheInfo:
    hits: int
    misses: int
    size: int
    max_entries: int | None


class PathCache:
    """Thread-safe mapping of path strings to their parsed components.

    Keys are compared by string content. With ``max_entries=None`` entries
    live until :meth:`clear` is called; otherwise the least recently used
    entry is evicted once the cache is full.

    Parsing happens outside the lock. Two threads racing on the same new
    string both parse it and the last store wins; the results are identical.
    """

    def __init__(self, max_entries: int | None = None) -> None:
        if max_entries is not None and max_entries < 1:
            raise ValueError("max_entries must be >= 1 or None")
        self.max_entries = max_entries
        self._entries: OrderedDict[str, tuple[Component, ...]] = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get_or_parse(self, path: str) -> tuple[Component, ...]:
        with self._lock:
            cached = self._entries.get(path)
            if cached is not None:
                self._hits += 1
                if self.max_entries is not None:
                    self._entries.move_to_end(path)
                return cached
            self._misses += 1

        components = parse_components(path)

        logger = get_logger()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "parse %r (%d components)",
                path,
                len(components),
                extra={"jsonreader_action_color": "cyan"},
            )

        with self._lock:
            self._entries[path] = components
            self._entries.move_to_end(path)
            if self.max_entries is not None:
                while len(self._entries) > self.max_entries:
                    self._entries.popitem(last=False)
        return components

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def info(self) -> PathCacheInfo:
        with self._lock:
            return PathCacheInfo(
                hits=self._hits,
                misses=self._misses,
                size=len(self._entries),
                max_entries=self.max_entries,
            )

    def __contains__(self, path: object) -> bool:
        with self._lock:
            return path in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


_default_cache: PathCache | None = None
_default_cache_lock = threading.Lock()


def get_path_cache() -> PathCache:
    """Return the process-wide cache, creating it from the config on first use."""

    global _default_cache
    with _default_cache_lock:
        if _default_cache is None:
            _default_cache = PathCache(
                max_entries=JSONREADER_CONFIG.path_cache_max_entries
            )
        return _default_cache


def set_path_cache(cache: PathCache | None) -> None:
    """Replace the process-wide cache. ``None`` recreates it lazily."""

    global _default_cache
    with _default_cache_lock:
        _default_cache = cache


__all__ = ["PathCache", "PathCacheInfo", "get_path_cache", "set_path_cache"]
