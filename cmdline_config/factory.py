from __future__ import annotations

from cmdline_config.commandline.parsed import ParsedCommandLine
from cmdline_config.config.context import SourceConfig
from cmdline_config.services.logger.factory import LoggerFactory
from cmdline_config.sources.commandline_source import ParsedCommandLinePropertySource
from cmdline_config.sources.interface import CommandLinePropertySource
from cmdline_config.sources.logging_source import LoggingPropertySource


def create_property_source(
    command_line: ParsedCommandLine,
    config: SourceConfig | None = None,
    logger_factory: LoggerFactory | None = None,
) -> CommandLinePropertySource:
    """Build the property source for *command_line* according to *config*.

    The source is wrapped in a ``LoggingPropertySource`` when tracing is on.
    """
    cfg = config or SourceConfig()
    source: CommandLinePropertySource = ParsedCommandLinePropertySource(
        command_line, name=cfg.source_name
    )
    source.non_option_args_property_name = cfg.non_option_args_property_name

    if cfg.trace:
        factory = logger_factory or LoggerFactory(default_impl=cfg.log_impl, min_level=cfg.log_level)
        source = LoggingPropertySource(source, factory.create())
    return source
