"""Logging wrapper around a CommandLinePropertySource.

Every lookup is delegated unchanged to the wrapped source and its outcome is
reported at debug level, so the wrapped source stays free of logging.
"""

from __future__ import annotations

from cmdline_config.services.logger.interface import LoggingInterface
from cmdline_config.sources.interface import CommandLinePropertySource, PropertySource


class LoggingPropertySource(CommandLinePropertySource):
    """Transparent wrapper that logs each option lookup and name enumeration."""

    def __init__(self, inner: CommandLinePropertySource, logger: LoggingInterface) -> None:
        # skips CommandLinePropertySource.__init__: the key lives on the inner source
        PropertySource.__init__(self, inner.name, inner.source)
        self._inner = inner
        self._logger = logger

    # -- Shared setting -------------------------------------------------------

    @property
    def non_option_args_property_name(self) -> str:  # type: ignore[override]
        return self._inner.non_option_args_property_name

    @non_option_args_property_name.setter
    def non_option_args_property_name(self, value: str) -> None:
        self._inner.non_option_args_property_name = value

    # -- Delegation -----------------------------------------------------------

    def contains_option(self, name: str) -> bool:
        present = self._inner.contains_option(name)
        self._logger.debug("Option lookup", source=self.name, option=name, present=present)
        return present

    def get_option_values(self, name: str) -> list[str] | None:
        values = self._inner.get_option_values(name)
        if values is None:
            self._logger.debug("No option with this name is present", source=self.name, option=name)
        elif not values:
            self._logger.debug("Option is present without arguments", source=self.name, option=name)
        else:
            self._logger.debug(
                "Option is present with arguments", source=self.name, option=name, values=values
            )
        return values

    def get_non_option_args(self) -> list[str]:
        args = self._inner.get_non_option_args()
        self._logger.debug("Non-option arguments", source=self.name, count=len(args))
        return args

    def get_property_names(self) -> list[str]:
        names = self._inner.get_property_names()
        self._logger.debug("Property names", source=self.name, names=names)
        return names
