from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass

import pytest

from .config import JSONREADER_CONFIG
from .path.cache import PathCache, get_path_cache, set_path_cache


@dataclass(frozen=True)
class _JSONReaderConfigSnapshot:
    path_cache_max_entries: int | None
    log_level: str
    allow_fragments: bool
    path_cache: PathCache

    @classmethod
    def capture(cls) -> "_JSONReaderConfigSnapshot":
        return cls(
            path_cache_max_entries=JSONREADER_CONFIG.path_cache_max_entries,
            log_level=JSONREADER_CONFIG.log_level,
            allow_fragments=JSONREADER_CONFIG.allow_fragments,
            path_cache=get_path_cache(),
        )

    def restore(self) -> None:
        JSONREADER_CONFIG.path_cache_max_entries = self.path_cache_max_entries
        JSONREADER_CONFIG.log_level = self.log_level
        JSONREADER_CONFIG.allow_fragments = self.allow_fragments
        set_path_cache(self.path_cache)


@contextmanager
def jsonreader_test_env(
    *, path_cache_max_entries: int | None = None
) -> Generator[PathCache, None, None]:
    """Run with a fresh default path cache, restoring config and cache on exit."""
    snapshot = _JSONReaderConfigSnapshot.capture()
    JSONREADER_CONFIG.path_cache_max_entries = path_cache_max_entries
    cache = PathCache(max_entries=path_cache_max_entries)
    set_path_cache(cache)
    try:
        yield cache
    finally:
        snapshot.restore()


@pytest.fixture()
def jsonreader_path_cache() -> Generator[PathCache, None, None]:
    """Install an isolated default path cache for the test."""
    with jsonreader_test_env() as cache:
        yield cache
