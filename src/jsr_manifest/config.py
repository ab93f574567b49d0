"""
Per-project defaults for jsr-manifest, read from `.jsr-manifest.toml` or
`jsr-manifest.toml` in the project root.

Only the root itself is searched, so a settings file in a parent directory
never applies. A value passed on the command line always beats the file.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib  # pyright: ignore[reportUnreachable]
else:
    import tomli as tomllib  # type: ignore[no-redef]  # pyright: ignore[reportUnreachable]

SETTINGS_FILENAMES = (".jsr-manifest.toml", "jsr-manifest.toml")


@dataclass
class ToolConfig:
    """
    Settings read from the project root. `None` means the key is absent.
    """

    name: str | None = None
    version: str | None = None
    exports: list[str] | None = None
    ignored: list[str] | None = None


_SETTING_NAMES = [f.name for f in fields(ToolConfig)]


def find_config_file(root: Path) -> Path | None:
    """Return the settings file in `root` (dotfile first), or `None`."""
    for filename in SETTINGS_FILENAMES:
        candidate = root / filename
        if candidate.is_file():
            return candidate
    return None


def _as_patterns(value: Any) -> list[str]:
    # Same comma-separated form as `--exports` and `--ignored`
    if isinstance(value, str):
        return value.split(",")
    return [str(item) for item in value]


def load_config(config_path: Path) -> ToolConfig:
    """
    Parse a settings file. Unknown keys are ignored; `exports` and `ignored`
    accept a TOML array or a comma-separated string.
    """
    data = tomllib.loads(config_path.read_text(encoding="utf-8"))

    return ToolConfig(
        name=str(data["name"]) if "name" in data else None,
        version=str(data["version"]) if "version" in data else None,
        exports=_as_patterns(data["exports"]) if "exports" in data else None,
        ignored=_as_patterns(data["ignored"]) if "ignored" in data else None,
    )


def apply_settings(options: Any, config: ToolConfig | None, explicit_flags: set[str]) -> Any:
    """
    Copy each setting from `config` onto `options` unless the same option was
    given on the command line.
    """
    if config is None:
        return options

    for setting in _SETTING_NAMES:
        value = getattr(config, setting)
        if value is not None and setting not in explicit_flags:
            setattr(options, setting, value)

    return options
