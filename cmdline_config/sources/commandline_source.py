from __future__ import annotations

from cmdline_config.commandline.parsed import ParsedCommandLine
from cmdline_config.sources.interface import (
    COMMAND_LINE_PROPERTY_SOURCE_NAME,
    CommandLinePropertySource,
)


class ParsedCommandLinePropertySource(CommandLinePropertySource):
    """Read-through view of a ``ParsedCommandLine`` as a property source.

    The parse result is held by reference and never modified.
    """

    def __init__(
        self, command_line: ParsedCommandLine, name: str = COMMAND_LINE_PROPERTY_SOURCE_NAME
    ) -> None:
        super().__init__(command_line, name)
        self._command_line = command_line

    @property
    def source(self) -> ParsedCommandLine:
        return self._command_line

    def contains_option(self, name: str) -> bool:
        return self._command_line.has_option(name)

    def get_option_values(self, name: str) -> list[str] | None:
        if not self._command_line.has_option(name):
            return None
        return list(self._command_line.get_option_values(name))

    def get_non_option_args(self) -> list[str]:
        return list(self._command_line.args)

    def get_property_names(self) -> list[str]:
        names: list[str] = []
        for occurrence in self._command_line.options:
            long_opt = occurrence.long_opt
            if long_opt and long_opt.strip():
                names.append(long_opt)
            else:
                names.append(occurrence.opt)  # type: ignore[arg-type]
        return names
