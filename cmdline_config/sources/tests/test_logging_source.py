"""Tests for the LoggingPropertySource wrapper."""

from cmdline_config.commandline.options import Options
from cmdline_config.commandline.parser import DefaultParser
from cmdline_config.services.logger.memory_logger import MemoryLogger
from cmdline_config.sources.commandline_source import ParsedCommandLinePropertySource
from cmdline_config.sources.logging_source import LoggingPropertySource


def _wrapped(args: list[str]) -> tuple[LoggingPropertySource, ParsedCommandLinePropertySource, MemoryLogger]:
    options = Options()
    options.add_option("1", "o1", has_arg=True)
    options.add_option("2", "o2")
    inner = ParsedCommandLinePropertySource(DefaultParser().parse(options, args), name="cli")
    logger = MemoryLogger()
    return LoggingPropertySource(inner, logger), inner, logger


def test_delegates_every_operation():
    ps, inner, _ = _wrapped(["--o1=v1", "--o2", "file"])

    assert ps.name == "cli"
    assert ps.source is inner.source
    assert ps.contains_option("o1")
    assert ps.get_option_values("o1") == ["v1"]
    assert ps.get_option_values("o2") == []
    assert ps.get_option_values("o3") is None
    assert ps.get_non_option_args() == ["file"]
    assert ps.get_property_names() == ["o1", "o2"]
    assert ps.get_property("o2") == ""
    assert ps.get_property("nonOptionArgs") == "file"


def test_logs_the_three_lookup_outcomes():
    ps, _, logger = _wrapped(["--o1=v1", "--o2"])

    ps.get_option_values("o1")
    ps.get_option_values("o2")
    ps.get_option_values("o3")

    assert logger.messages == [
        "Option is present with arguments",
        "Option is present without arguments",
        "No option with this name is present",
    ]
    assert all(e.level == "DEBUG" for e in logger.entries)
    assert logger.entries[0].ctx == {"source": "cli", "option": "o1", "values": ["v1"]}


def test_logs_property_names():
    ps, _, logger = _wrapped(["--o2"])
    ps.get_property_names()
    assert logger.entries[-1].ctx["names"] == ["o2"]


def test_renaming_key_reaches_inner_source():
    ps, inner, _ = _wrapped(["--o2", "a", "b"])
    ps.non_option_args_property_name = "files"

    assert inner.non_option_args_property_name == "files"
    assert ps.get_property("files") == "a,b"
    assert ps.get_property("nonOptionArgs") is None


def test_wrapping_keeps_custom_key_of_inner_source():
    options = Options()
    inner = ParsedCommandLinePropertySource(DefaultParser().parse(options, ["x"]))
    inner.non_option_args_property_name = "files"
    ps = LoggingPropertySource(inner, MemoryLogger())
    assert ps.non_option_args_property_name == "files"
    assert ps.get_property("files") == "x"
