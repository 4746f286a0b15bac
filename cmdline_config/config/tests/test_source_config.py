from pathlib import Path

import pytest

from cmdline_config.config.context import SourceConfig


def test_defaults():
    config = SourceConfig()
    assert config.source_name == "commandLineArgs"
    assert config.non_option_args_property_name == "nonOptionArgs"
    assert config.trace is False
    assert config.log_impl == "pretty"
    assert config.log_level == "INFO"


def test_overrides():
    config = SourceConfig(
        overrides={
            "CMDLINE_SOURCE_NAME": "cli",
            "CMDLINE_NON_OPTION_ARGS_PROPERTY_NAME": "files",
            "CMDLINE_TRACE": "YES",
            "LOG_IMPL": "memory",
        }
    )
    assert config.source_name == "cli"
    assert config.non_option_args_property_name == "files"
    assert config.trace is True
    assert config.log_impl == "memory"


def test_empty_values_fall_back_to_defaults():
    config = SourceConfig(overrides={"CMDLINE_SOURCE_NAME": "", "CMDLINE_NON_OPTION_ARGS_PROPERTY_NAME": ""})
    assert config.source_name == "commandLineArgs"
    assert config.non_option_args_property_name == "nonOptionArgs"


def test_reads_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("CMDLINE_TRACE", "1")
    assert SourceConfig().trace is True


def test_overrides_take_precedence(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("CMDLINE_SOURCE_NAME", "from_env")
    assert SourceConfig(overrides={"CMDLINE_SOURCE_NAME": "from_override"}).source_name == "from_override"


def test_environment_snapshot_at_construction(monkeypatch: pytest.MonkeyPatch):
    config = SourceConfig()
    monkeypatch.setenv("CMDLINE_SOURCE_NAME", "late")
    assert config.source_name == "commandLineArgs"


def test_from_env_file_layers(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    monkeypatch.setenv("CMDLINE_SOURCE_NAME", "from_env")
    env_dir = tmp_path / ".env"
    env_dir.mkdir()
    (env_dir / "dev.env").write_text("CMDLINE_SOURCE_NAME=from_file\nCMDLINE_TRACE=true\n")

    config = SourceConfig.from_env_file("dev", project_root=tmp_path, overrides={"CMDLINE_TRACE": "no"})

    assert config.source_name == "from_file"
    assert config.trace is False
    assert config.log_level == "ERROR"


def test_get_with_default():
    assert SourceConfig().get("CMDLINE_UNKNOWN_KEY_123", "x") == "x"


def test_trace_lowers_default_log_level_to_debug():
    assert SourceConfig(overrides={"CMDLINE_TRACE": "true"}).log_level == "DEBUG"


def test_explicit_log_level_wins_over_trace():
    config = SourceConfig(overrides={"CMDLINE_TRACE": "true", "LOG_LEVEL": "WARN"})
    assert config.log_level == "WARN"
