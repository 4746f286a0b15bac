"""Declared option schema consumed by the parser.

An ``Option`` is identified by its short name (``opt``) and optionally a long
name (``long_opt``). Either name can be used to look it up, with or without
leading hyphens.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

UNLIMITED_VALUES = -2


def strip_hyphens(name: str) -> str:
    if name is None:
        raise TypeError("option name must not be None")
    if name.startswith("--"):
        return name[2:]
    if name.startswith("-"):
        return name[1:]
    return name


@dataclass(frozen=True)
class Option:
    opt: str | None
    long_opt: str | None = None
    args: int = 0
    optional_arg: bool = False
    required: bool = False
    value_separator: str | None = None
    description: str = ""

    def __post_init__(self) -> None:
        if not self.opt and not self.long_opt:
            raise ValueError("an option needs a short or a long name")
        for name in (self.opt, self.long_opt):
            if name and not all(c.isalnum() or c in "-_?@" for c in name):
                raise ValueError(f"Illegal option name '{name}'")
        if self.args < 0 and self.args != UNLIMITED_VALUES:
            raise ValueError(f"Invalid number of arguments for option '{self.key}': {self.args}")

    @property
    def key(self) -> str:
        """Short name if there is one, otherwise the long name."""
        return self.opt or self.long_opt  # type: ignore[return-value]

    @property
    def accepts_arg(self) -> bool:
        return self.args > 0 or self.args == UNLIMITED_VALUES

    @property
    def accepts_many(self) -> bool:
        return self.args > 1 or self.args == UNLIMITED_VALUES

    def matches(self, name: str) -> bool:
        return name in (self.opt, self.long_opt)

    def __str__(self) -> str:
        label = f"-{self.opt}" if self.opt else ""
        if self.long_opt:
            label = f"{label} --{self.long_opt}".strip()
        return f"[ option: {label} ]"


class Options:
    """Ordered collection of declared options."""

    def __init__(self) -> None:
        self._options: list[Option] = []
        self._by_name: dict[str, Option] = {}

    def add(self, option: Option) -> Options:
        for name in (option.opt, option.long_opt):
            if name and name in self._by_name:
                raise ValueError(f"Duplicate option name '{name}'")
        for name in (option.opt, option.long_opt):
            if name:
                self._by_name[name] = option
        self._options.append(option)
        return self

    def add_option(
        self,
        opt: str | None,
        long_opt: str | None = None,
        has_arg: bool = False,
        description: str = "",
    ) -> Options:
        """Shorthand for declaring a flag or a single-valued option."""
        return self.add(Option(opt, long_opt, args=1 if has_arg else 0, description=description))

    def get(self, name: str) -> Option | None:
        return self._by_name.get(strip_hyphens(name))

    def has(self, name: str) -> bool:
        return strip_hyphens(name) in self._by_name

    def required(self) -> list[Option]:
        return [o for o in self._options if o.required]

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __repr__(self) -> str:
        return f"Options({[str(o) for o in self._options]})"
