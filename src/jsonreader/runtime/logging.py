from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.text import Text

from ..config import JSONREADER_CONFIG

LOGGER_NAME = "jsonreader"

_LEVEL_STYLES = {
    "DEBUG": "dim",
    "INFO": "blue",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold red",
}


class _JSONReaderRichConsoleHandler(logging.Handler):
    """Console handler rendering records as ``HH:MM:SS LEVEL message [file:line]``."""

    def __init__(self, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.console = Console(stderr=True)

    @staticmethod
    def _format_location(record: logging.LogRecord) -> str:
        return f"[{Path(record.pathname).name}:{record.lineno}]"

    @staticmethod
    def _format_message_text(record: logging.LogRecord) -> Text:
        message = record.getMessage()
        text = Text(message)
        color = getattr(record, "jsonreader_action_color", None)
        if color:
            action = message.split(" ", 1)[0]
            text.stylize(color, 0, len(action))
        return text

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = Text()
            line.append(logging.Formatter().formatTime(record, "%H:%M:%S"), style="dim")
            line.append(" ")
            line.append(record.levelname, style=_LEVEL_STYLES.get(record.levelname, ""))
            line.append(" ")
            line.append_text(self._format_message_text(record))
            line.append(" ")
            line.append(self._format_location(record), style="dim")
            self.console.print(line, soft_wrap=True)
        except Exception:
            self.handleError(record)


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def configure_logging(level: int | str | None = None) -> logging.Logger:
    """Attach the rich console handler to the ``jsonreader`` logger.

    Calling this more than once only updates the level.
    """

    logger = get_logger()
    resolved = JSONREADER_CONFIG.log_level if level is None else level
    if isinstance(resolved, str):
        resolved = resolved.upper()
    logger.setLevel(resolved)
    if not any(
        isinstance(handler, _JSONReaderRichConsoleHandler) for handler in logger.handlers
    ):
        logger.addHandler(_JSONReaderRichConsoleHandler())
    return logger


__all__ = ["LOGGER_NAME", "configure_logging", "get_logger"]
