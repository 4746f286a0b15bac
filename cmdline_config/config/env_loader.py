"""Loads ``.env/<name>.env`` files in KEY=VALUE format.

Supports:
- Comments (lines starting with #) and blank lines
- An optional leading ``export`` keyword
- Quoted values (matching single or double quotes are stripped)
- Inline comments after values are NOT stripped
"""

from __future__ import annotations

from pathlib import Path

_EXPORT_PREFIX = "export "


def load_env_file(env_name: str = "local", project_root: Path | None = None) -> dict[str, str]:
    """Read ``<project_root>/.env/<env_name>.env``. A missing file yields an empty dict."""
    root = project_root or Path.cwd()
    env_file = root / ".env" / f"{env_name}.env"
    if not env_file.is_file():
        return {}
    return parse_env_lines(env_file.read_text().splitlines())


def parse_env_lines(lines: list[str]) -> dict[str, str]:
    result: dict[str, str] = {}
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith(_EXPORT_PREFIX):
            line = line[len(_EXPORT_PREFIX):].lstrip()
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key:
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
            value = value[1:-1]
        result[key] = value
    return result
