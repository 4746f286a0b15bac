from abc import ABC, abstractmethod
from typing import Any

LEVELS = ("DEBUG", "INFO", "WARN", "ERROR")


class LoggingInterface(ABC):
    """Structured logging: a message plus keyword context."""

    @abstractmethod
    def info(self, msg: str, **ctx: Any) -> None: ...

    @abstractmethod
    def warn(self, msg: str, **ctx: Any) -> None: ...

    @abstractmethod
    def error(self, msg: str, **ctx: Any) -> None: ...

    @abstractmethod
    def debug(self, msg: str, **ctx: Any) -> None: ...


def level_index(level: str) -> int:
    """Position of *level* in LEVELS, case-insensitive."""
    name = level.upper()
    if name not in LEVELS:
        raise ValueError(f"Unknown log level: '{level}' (available: {', '.join(LEVELS)})")
    return LEVELS.index(name)
