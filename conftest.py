"""Root-level pytest fixtures."""

from __future__ import annotations

import pytest

_SETTINGS = (
    "CMDLINE_SOURCE_NAME",
    "CMDLINE_NON_OPTION_ARGS_PROPERTY_NAME",
    "CMDLINE_TRACE",
    "LOG_IMPL",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch: pytest.MonkeyPatch):
    """Keep settings from the developer's shell out of every test."""
    for key in _SETTINGS:
        monkeypatch.delenv(key, raising=False)
