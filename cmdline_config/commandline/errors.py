from __future__ import annotations

from cmdline_config.commandline.options import Option


class ParseError(ValueError):
    """Raised when raw arguments do not match the declared options."""


class UnrecognizedOptionError(ParseError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Unrecognized option: {token}")
        self.token = token


class MissingArgumentError(ParseError):
    def __init__(self, option: Option) -> None:
        super().__init__(f"Missing argument for option: {option.key}")
        self.option = option


class MissingOptionError(ParseError):
    def __init__(self, missing: list[Option]) -> None:
        names = ", ".join(o.key for o in missing)
        label = "option" if len(missing) == 1 else "options"
        super().__init__(f"Missing required {label}: {names}")
        self.missing = missing
