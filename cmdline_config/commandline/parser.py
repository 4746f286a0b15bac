"""Tokenizer turning raw argument lists into a ``ParsedCommandLine``.

Supported forms:
- ``--name=value``, ``--name value``, ``-n value``, ``-nvalue``, ``-n=value``
- bundled flags (``-abc``), where an option taking a value ends the bundle
- ``--`` stops option processing; a lone ``-`` is a positional argument
- negative numbers are values, not options, unless declared as an option
"""

from __future__ import annotations

import re

from cmdline_config.commandline.errors import (
    MissingArgumentError,
    MissingOptionError,
    UnrecognizedOptionError,
)
from cmdline_config.commandline.options import UNLIMITED_VALUES, Option, Options
from cmdline_config.commandline.parsed import OptionOccurrence, ParsedCommandLine

_END_OF_OPTIONS = "--"
_NEGATIVE_NUMBER = re.compile(r"^-(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def _is_negative_number(token: str) -> bool:
    return _NEGATIVE_NUMBER.match(token) is not None


class _ParseState:
    def __init__(self) -> None:
        self.occurrences: list[OptionOccurrence] = []
        self.args: list[str] = []
        self.skip_parsing = False

    def add(self, option: Option, values: list[str]) -> None:
        if option.value_separator:
            split: list[str] = []
            for value in values:
                split.extend(value.split(option.value_separator))
            values = split
        self.occurrences.append(OptionOccurrence(option, tuple(values)))


class DefaultParser:
    """Parses arguments against declared ``Options``.

    With ``stop_at_non_option`` set, the first positional or unrecognized
    token ends option processing and everything from it on is kept as
    positional arguments. Otherwise unrecognized options raise.
    """

    def __init__(self, stop_at_non_option: bool = False) -> None:
        self.stop_at_non_option = stop_at_non_option

    def parse(self, options: Options, arguments: list[str]) -> ParsedCommandLine:
        state = _ParseState()
        i = 0
        while i < len(arguments):
            token = arguments[i]
            i += 1
            if state.skip_parsing:
                state.args.append(token)
            elif token == _END_OF_OPTIONS:
                state.skip_parsing = True
            elif token == "-" or not token.startswith("-") or (
                _is_negative_number(token) and not options.has(token)
            ):
                state.args.append(token)
                if self.stop_at_non_option:
                    state.skip_parsing = True
            elif token.startswith("--"):
                i = self._handle_long(options, state, token, arguments, i)
            else:
                i = self._handle_short(options, state, token, arguments, i)

        self._check_required(options, state)
        return ParsedCommandLine(state.occurrences, state.args)

    def _handle_long(
        self, options: Options, state: _ParseState, token: str, arguments: list[str], i: int
    ) -> int:
        name, sep, value = token[2:].partition("=")
        option = options.get(name)
        if option is None or (sep and not option.accepts_arg):
            self._unrecognized(state, token)
            return i
        if sep:
            state.add(option, [value])
            return i
        return self._consume_values(options, state, option, arguments, i)

    def _handle_short(
        self, options: Options, state: _ParseState, token: str, arguments: list[str], i: int
    ) -> int:
        body = token[1:]
        option = options.get(body)
        if option is not None:
            return self._consume_values(options, state, option, arguments, i)

        name, sep, value = body.partition("=")
        option = options.get(name) if sep else None
        if option is not None and option.accepts_arg:
            state.add(option, [value])
            return i

        # bundled short options; the first one taking a value swallows the rest
        bundle: list[Option] = []
        for pos, char in enumerate(body):
            option = options.get(char)
            if option is None:
                self._unrecognized(state, token)
                return i
            rest = body[pos + 1:]
            if option.accepts_arg:
                for flag in bundle:
                    state.add(flag, [])
                if rest:
                    state.add(option, [rest])
                    return i
                return self._consume_values(options, state, option, arguments, i)
            bundle.append(option)
        for flag in bundle:
            state.add(flag, [])
        return i

    def _consume_values(
        self, options: Options, state: _ParseState, option: Option, arguments: list[str], i: int
    ) -> int:
        values: list[str] = []
        if option.accepts_arg:
            limit = None if option.args == UNLIMITED_VALUES else option.args
            while i < len(arguments) and (limit is None or len(values) < limit):
                candidate = arguments[i]
                if candidate == _END_OF_OPTIONS or self._is_option(options, candidate):
                    break
                values.append(candidate)
                i += 1
            if not values and not option.optional_arg:
                raise MissingArgumentError(option)
        state.add(option, values)
        return i

    @staticmethod
    def _is_option(options: Options, token: str) -> bool:
        """Whether *token* names a declared option (and so cannot be a value)."""
        if not token.startswith("-") or token == "-":
            return False
        name = token.lstrip("-").partition("=")[0]
        if options.has(name):
            return True
        if _is_negative_number(token) or token.startswith("--"):
            return False
        return bool(name) and options.has(name[0])

    def _unrecognized(self, state: _ParseState, token: str) -> None:
        if not self.stop_at_non_option:
            raise UnrecognizedOptionError(token)
        state.args.append(token)
        state.skip_parsing = True

    @staticmethod
    def _check_required(options: Options, state: _ParseState) -> None:
        seen = {id(o.option) for o in state.occurrences}
        missing = [o for o in options.required() if id(o) not in seen]
        if missing:
            raise MissingOptionError(missing)
