from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from cmdline_config.services.logger.interface import LoggingInterface, level_index


@dataclass
class LogEntry:
    level: str
    msg: str
    ctx: dict[str, Any]


class MemoryLogger(LoggingInterface):
    """Keeps entries in a list so tests can assert on what was logged."""

    def __init__(self, min_level: str = "DEBUG") -> None:
        self._threshold = level_index(min_level)
        self.entries: list[LogEntry] = []

    def info(self, msg: str, **ctx: Any) -> None:
        self._append("INFO", msg, ctx)

    def warn(self, msg: str, **ctx: Any) -> None:
        self._append("WARN", msg, ctx)

    def error(self, msg: str, **ctx: Any) -> None:
        self._append("ERROR", msg, ctx)

    def debug(self, msg: str, **ctx: Any) -> None:
        self._append("DEBUG", msg, ctx)

    def _append(self, level: str, msg: str, ctx: dict[str, Any]) -> None:
        if level_index(level) >= self._threshold:
            self.entries.append(LogEntry(level, msg, ctx))

    @property
    def messages(self) -> list[str]:
        """Convenience: return just the message strings."""
        return [e.msg for e in self.entries]

    def at_level(self, level: str) -> list[LogEntry]:
        return [e for e in self.entries if e.level == level]
