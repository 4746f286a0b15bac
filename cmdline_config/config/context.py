from __future__ import annotations

import os
from pathlib import Path

from cmdline_config.config.env_loader import load_env_file
from cmdline_config.sources.interface import (
    COMMAND_LINE_PROPERTY_SOURCE_NAME,
    DEFAULT_NON_OPTION_ARGS_PROPERTY_NAME,
)

_TRUTHY = ("true", "1", "yes")


class SourceConfig:
    """Environment-based settings for building a command-line property source.

    Values come from ``os.environ`` captured at construction, with
    ``overrides`` taking precedence.
    """

    def __init__(self, overrides: dict[str, str] | None = None) -> None:
        self._env = dict(os.environ)
        if overrides:
            self._env.update(overrides)

    @classmethod
    def from_env_file(
        cls,
        env_name: str = "local",
        project_root: Path | None = None,
        overrides: dict[str, str] | None = None,
    ) -> SourceConfig:
        """File values sit above the process environment and below ``overrides``."""
        merged = load_env_file(env_name, project_root)
        if overrides:
            merged.update(overrides)
        return cls(merged)

    def get(self, key: str, default: str = "") -> str:
        return self._env.get(key, default)

    @property
    def source_name(self) -> str:
        return self.get("CMDLINE_SOURCE_NAME") or COMMAND_LINE_PROPERTY_SOURCE_NAME

    @property
    def non_option_args_property_name(self) -> str:
        return (
            self.get("CMDLINE_NON_OPTION_ARGS_PROPERTY_NAME")
            or DEFAULT_NON_OPTION_ARGS_PROPERTY_NAME
        )

    @property
    def trace(self) -> bool:
        return self.get("CMDLINE_TRACE").lower() in _TRUTHY

    @property
    def log_impl(self) -> str:
        return self.get("LOG_IMPL", "pretty")

    @property
    def log_level(self) -> str:
        # tracing only emits debug entries
        return self.get("LOG_LEVEL") or ("DEBUG" if self.trace else "INFO")

    def __repr__(self) -> str:
        return (
            f"SourceConfig(source_name={self.source_name!r}, "
            f"non_option_args_property_name={self.non_option_args_property_name!r}, "
            f"trace={self.trace})"
        )
