from __future__ import annotations

from cmdline_config.services.logger.interface import LoggingInterface
from cmdline_config.services.logger.memory_logger import MemoryLogger
from cmdline_config.services.logger.pretty_logger import PrettyLogger


class LoggerFactory:
    """Creates and caches logger instances by implementation name."""

    _registry: dict[str, type[LoggingInterface]] = {
        "pretty": PrettyLogger,
        "memory": MemoryLogger,
    }

    def __init__(self, default_impl: str = "pretty", min_level: str = "INFO") -> None:
        self._check(default_impl)
        self._default_impl = default_impl
        self._min_level = min_level
        self._instances: dict[str, LoggingInterface] = {}

    def create(self, impl_name: str | None = None) -> LoggingInterface:
        """Return a logger instance, creating one if not yet cached."""
        name = impl_name or self._default_impl
        if name not in self._instances:
            cls = self._check(name)
            self._instances[name] = cls(min_level=self._min_level)  # type: ignore[call-arg]
        return self._instances[name]

    def _check(self, name: str) -> type[LoggingInterface]:
        cls = self._registry.get(name)
        if cls is None:
            raise ValueError(
                f"Unknown logger implementation: '{name}' "
                f"(available: {', '.join(self._registry)})"
            )
        return cls
