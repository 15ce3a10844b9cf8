from __future__ import annotations

from datetime import date, datetime, time
from pathlib import Path
from typing import Mapping, TypeAlias
import tomllib

from systemd_lsp.schema import ServerSettings

DEFAULT_CONFIG_NAME = "systemd-lsp.toml"

TomlScalar: TypeAlias = str | int | float | bool | None | date | datetime | time
TomlValue: TypeAlias = TomlScalar | list["TomlValue"] | dict[str, "TomlValue"]
TomlTable: TypeAlias = dict[str, TomlValue]

# settings field -> (config table, key)
_SETTING_SOURCES: Mapping[str, tuple[str, str]] = {
    "log_level": ("server", "log_level"),
    "log_file": ("server", "log_file"),
    "diagnostics_enabled": ("diagnostics", "enabled"),
}


def load_config(root: Path | None = None, config_path: Path | None = None) -> TomlTable:
    """Read the TOML config; a missing, unreadable or invalid file reads as empty."""
    path = config_path or (root or Path.cwd()) / DEFAULT_CONFIG_NAME
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def _file_settings(data: TomlTable) -> TomlTable:
    values: TomlTable = {}
    for field, (table_name, key) in _SETTING_SOURCES.items():
        table = data.get(table_name)
        if isinstance(table, dict) and table.get(key) is not None:
            values[field] = table[key]
    return values


def apply_overrides(base: TomlTable, overrides: Mapping[str, TomlValue]) -> TomlTable:
    """Return ``base`` updated with every override that is not None."""
    return {**base, **{key: value for key, value in overrides.items() if value is not None}}


def resolve_settings(
    overrides: Mapping[str, TomlValue] | None = None,
    *,
    root: Path | None = None,
    config_path: Path | None = None,
) -> ServerSettings:
    """Merge file values with non-None ``overrides`` and validate.

    Raises :class:`pydantic.ValidationError` for values of the wrong shape.
    """
    file_values = _file_settings(load_config(root=root, config_path=config_path))
    return ServerSettings.model_validate(apply_overrides(file_values, overrides or {}))
