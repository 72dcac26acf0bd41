from __future__ import annotations

import logging
import os
from collections.abc import Mapping

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _parse_max_entries(name: str, raw: str) -> int | None:
    value = raw.strip()
    if not value or value.lower() == "none":
        return None
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be a positive integer, got {raw!r}") from exc
    if parsed < 1:
        raise ValueError(f"{name} must be >= 1, got {parsed}")
    return parsed


def _parse_log_level(name: str, raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{name} must be a logging level name, got {raw!r}")
    return level


class JSONReaderConfig:
    """Process-wide settings, read from ``JSONREADER_*`` environment variables.

    Attributes may be reassigned at runtime; the default path cache picks up
    ``path_cache_max_entries`` the next time it is created.
    """

    def __init__(
        self,
        *,
        path_cache_max_entries: int | None = None,
        log_level: str = "WARNING",
        allow_fragments: bool = False,
    ) -> None:
        self.path_cache_max_entries = path_cache_max_entries
        self.log_level = log_level
        self.allow_fragments = allow_fragments

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> JSONReaderConfig:
        env = os.environ if environ is None else environ
        config = cls()
        if (raw := env.get("JSONREADER_PATH_CACHE_MAX_ENTRIES")) is not None:
            config.path_cache_max_entries = _parse_max_entries(
                "JSONREADER_PATH_CACHE_MAX_ENTRIES", raw
            )
        if (raw := env.get("JSONREADER_LOG_LEVEL")) is not None:
            config.log_level = _parse_log_level("JSONREADER_LOG_LEVEL", raw)
        if (raw := env.get("JSONREADER_ALLOW_FRAGMENTS")) is not None:
            config.allow_fragments = _parse_bool("JSONREADER_ALLOW_FRAGMENTS", raw)
        return config

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(path_cache_max_entries={self.path_cache_max_entries!r}, "
            f"log_level={self.log_level!r}, allow_fragments={self.allow_fragments!r})"
        )


JSONREADER_CONFIG = JSONReaderConfig.from_env()


__all__ = ["JSONREADER_CONFIG", "JSONReaderConfig"]
