from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

COMMAND_LINE_PROPERTY_SOURCE_NAME = "commandLineArgs"
DEFAULT_NON_OPTION_ARGS_PROPERTY_NAME = "nonOptionArgs"

_LIST_SEPARATOR = ","


class PropertySource(ABC):
    """A named source of string properties, identified (and compared) by name."""

    def __init__(self, name: str, source: Any) -> None:
        if not name or not name.strip():
            raise ValueError("Property source name must contain text")
        self._name = name
        self._source = source

    @property
    def name(self) -> str:
        return self._name

    @property
    def source(self) -> Any:
        return self._source

    @abstractmethod
    def get_property(self, name: str) -> str | None:
        """Value for *name*, or None when this source does not define it."""
        ...

    def contains_property(self, name: str) -> bool:
        return self.get_property(name) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PropertySource):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"


class EnumerablePropertySource(PropertySource):
    """A property source that can list every property name it defines."""

    @abstractmethod
    def get_property_names(self) -> list[str]: ...

    def contains_property(self, name: str) -> bool:
        return name in self.get_property_names()


class CommandLinePropertySource(EnumerablePropertySource):
    """Property source backed by command-line arguments.

    Option values are exposed under the option's name; a flag without a value
    reads as the empty string and repeated values are comma-joined. All
    positional arguments are exposed together, comma-joined, under
    ``non_option_args_property_name`` when there is at least one of them.
    That key is synthesized here and is not part of ``get_property_names()``.
    """

    def __init__(self, source: Any, name: str = COMMAND_LINE_PROPERTY_SOURCE_NAME) -> None:
        super().__init__(name, source)
        self.non_option_args_property_name = DEFAULT_NON_OPTION_ARGS_PROPERTY_NAME

    def contains_property(self, name: str) -> bool:
        if name == self.non_option_args_property_name:
            return bool(self.get_non_option_args())
        return self.contains_option(name)

    def get_property(self, name: str) -> str | None:
        if name == self.non_option_args_property_name:
            args = self.get_non_option_args()
            return _LIST_SEPARATOR.join(args) if args else None
        values = self.get_option_values(name)
        if values is None:
            return None
        return _LIST_SEPARATOR.join(values)

    @abstractmethod
    def contains_option(self, name: str) -> bool: ...

    @abstractmethod
    def get_option_values(self, name: str) -> list[str] | None:
        """None when absent, [] for a valueless flag, else values in command-line order."""
        ...

    @abstractmethod
    def get_non_option_args(self) -> list[str]: ...
