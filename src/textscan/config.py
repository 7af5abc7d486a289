"""Centralized configuration for textscan.

:func:`get_settings` returns the defaults used by the command line: the numeric
target type, the fallback base, the delimiter set and the optional log file.
Values can be customized via environment variables or by pointing
``TEXTSCAN_CONFIG_FILE`` to a TOML/YAML document with a ``scan`` section.
"""
from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .parsers.numbers import MAX_BASE, MIN_BASE
from .parsers.types import resolve_numeric_type

__all__ = ["ScanSettings", "get_settings", "reset_settings"]

_CONFIG_CACHE: Optional["ScanSettings"] = None
_CONFIG_SOURCE: Optional[Path] = None

_ENV_KEYS = {
    "default_base": "TEXTSCAN_DEFAULT_BASE",
    "default_type": "TEXTSCAN_DEFAULT_TYPE",
    "delimiters": "TEXTSCAN_DELIMITERS",
    "log_path": "TEXTSCAN_LOG_PATH",
}


class ScanSettings(BaseModel):
    """Resolved defaults for scanning and parsing commands."""

    default_base: int = Field(default=10, ge=MIN_BASE, le=MAX_BASE, description="Base used when none is given")
    default_type: str = Field(default="int64", description="numpy type name of parsed values")
    delimiters: str = Field(default=" \t\r\n", min_length=1, description="Characters treated as delimiters")
    log_path: Optional[Path] = Field(default=None, description="JSONL log destination")

    model_config = ConfigDict(frozen=True)

    @field_validator("default_type")
    @classmethod
    def _check_type(cls, value: str) -> str:
        try:
            return resolve_numeric_type(value).name
        except TypeError as exc:
            raise ValueError(str(exc)) from exc

    def as_dict(self) -> Dict[str, Any]:
        """Expose the settings as JSON-friendly values."""

        payload = self.model_dump()
        payload["log_path"] = str(self.log_path) if self.log_path else None
        return payload


def _load_config_file(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file '{path}' does not exist")
    suffix = path.suffix.lower()
    if suffix == ".toml":
        with path.open("rb") as handle:
            return tomllib.load(handle)
    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle)
            return loaded or {}
    raise ValueError(f"Unsupported config file format: '{suffix}'")


def _build_settings(config_file: Optional[Path]) -> ScanSettings:
    section: Mapping[str, Any] = {}
    config_dir: Optional[Path] = None
    if config_file is not None:
        config_file = config_file.expanduser().resolve()
        loaded = _load_config_file(config_file)
        scan_section = loaded.get("scan") if isinstance(loaded, Mapping) else None
        section = scan_section if isinstance(scan_section, Mapping) else {}
        config_dir = config_file.parent

    values: Dict[str, Any] = {key: section[key] for key in _ENV_KEYS if key in section}
    from_env = set()
    for key, env_name in _ENV_KEYS.items():
        env_value = os.environ.get(env_name)
        if env_value:
            values[key] = env_value
            from_env.add(key)

    log_path = values.get("log_path")
    if log_path:
        candidate = Path(log_path).expanduser()
        if not candidate.is_absolute() and config_dir is not None and "log_path" not in from_env:
            candidate = config_dir / candidate
        values["log_path"] = candidate

    return ScanSettings(**values)


def get_settings(*, refresh: bool = False, config_file: str | Path | None = None) -> ScanSettings:
    """Return the cached :class:`ScanSettings`.

    Parameters
    ----------
    refresh:
        When ``True`` the cached settings are discarded and recomputed.
    config_file:
        Optional explicit configuration document. The resulting instance is not
        cached, so callers can override settings temporarily.
    """

    global _CONFIG_CACHE, _CONFIG_SOURCE

    if config_file is not None:
        return _build_settings(Path(config_file))

    env_path = os.getenv("TEXTSCAN_CONFIG_FILE")
    source_path = Path(env_path).expanduser() if env_path else None

    if refresh or _CONFIG_CACHE is None or _CONFIG_SOURCE != source_path:
        _CONFIG_CACHE = _build_settings(source_path)
        _CONFIG_SOURCE = source_path

    return _CONFIG_CACHE


def reset_settings() -> None:
    """Clear the cached settings (mainly useful for tests)."""

    global _CONFIG_CACHE, _CONFIG_SOURCE
    _CONFIG_CACHE = None
    _CONFIG_SOURCE = None
