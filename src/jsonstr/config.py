from __future__ import annotations

from datetime import date, datetime, time
from pathlib import Path
from typing import TypeAlias
import tomllib

from jsonstr.runtime.env_policy import config_path_from_env

DEFAULT_CONFIG_NAME = "json-to-string.toml"
FLAG_NAMES: tuple[str, ...] = ("compact", "pretty", "raw")

TomlScalar: TypeAlias = str | int | float | bool | None | date | datetime | time
TomlValue: TypeAlias = TomlScalar | list["TomlValue"] | dict[str, "TomlValue"]
TomlTable: TypeAlias = dict[str, TomlValue]


def _load_toml(path: Path) -> TomlTable:
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError:
        return {}
    except UnicodeError:
        return {}
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError:
        return {}
    return data if isinstance(data, dict) else {}


def load_config(root: Path | None = None, config_path: Path | None = None) -> TomlTable:
    if config_path is None:
        config_path = config_path_from_env()
    if config_path is None:
        base = root if root is not None else Path.cwd()
        config_path = base / DEFAULT_CONFIG_NAME
    return _load_toml(config_path)


def flag_defaults(
    root: Path | None = None, config_path: Path | None = None
) -> dict[str, bool]:
    """Boolean CLI flag defaults from the ``[defaults]`` table.

    Unknown keys are ignored; known keys are coerced with :func:`_as_bool`.
    """
    data = load_config(root=root, config_path=config_path)
    section = data.get("defaults", {})
    if not isinstance(section, dict):
        return {}
    return {
        name: _as_bool(section[name])
        for name in FLAG_NAMES
        if name in section
    }


def _as_bool(value: TomlValue) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return False


def merge_flags(explicit: dict[str, bool | None], defaults: dict[str, bool]) -> dict[str, bool]:
    merged = {name: False for name in FLAG_NAMES}
    merged.update(defaults)
    for key, value in explicit.items():
        if value is None:
            continue
        merged[key] = value
    return merged
