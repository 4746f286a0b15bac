"""Immutable result of parsing raw arguments against an ``Options`` schema."""

from __future__ import annotations

from dataclasses import dataclass

from cmdline_config.commandline.options import Option, strip_hyphens


@dataclass(frozen=True)
class OptionOccurrence:
    """One appearance of an option on the command line, with the values it took."""

    option: Option
    values: tuple[str, ...] = ()

    @property
    def opt(self) -> str | None:
        return self.option.opt

    @property
    def long_opt(self) -> str | None:
        return self.option.long_opt


class ParsedCommandLine:
    """Recognized option occurrences (in parse order) plus leftover positional args.

    A repeated flag yields one occurrence per appearance; value lookups
    aggregate across all of them in order.
    """

    __slots__ = ("_occurrences", "_args")

    def __init__(
        self,
        occurrences: tuple[OptionOccurrence, ...] | list[OptionOccurrence] = (),
        args: tuple[str, ...] | list[str] = (),
    ) -> None:
        self._occurrences = tuple(occurrences)
        self._args = tuple(args)

    def _matching(self, name: str) -> list[OptionOccurrence]:
        key = strip_hyphens(name)
        return [o for o in self._occurrences if o.option.matches(key)]

    def has_option(self, name: str) -> bool:
        return bool(self._matching(name))

    def get_option_values(self, name: str) -> tuple[str, ...]:
        """All values collected for *name*, empty when absent or valueless."""
        values: list[str] = []
        for occurrence in self._matching(name):
            values.extend(occurrence.values)
        return tuple(values)

    def get_option_value(self, name: str, default: str | None = None) -> str | None:
        values = self.get_option_values(name)
        return values[0] if values else default

    @property
    def options(self) -> tuple[OptionOccurrence, ...]:
        return self._occurrences

    @property
    def args(self) -> tuple[str, ...]:
        return self._args

    def __repr__(self) -> str:
        names = [o.option.key for o in self._occurrences]
        return f"ParsedCommandLine(options={names}, args={list(self._args)})"
