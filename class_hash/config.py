"""
class_hash configuration loader.

Layered config with clear precedence:
    1) Explicit overrides passed to `load()` (highest)
    2) Environment variables (CLASS_HASH_*)
    3) Config file (TOML), from `load(path=...)` or CLASS_HASH_CONFIG
    4) Built-in defaults (lowest)

Only tooling concerns live here (logging, CLI output). Hash constants are
fixed by the network and are never configurable.

Example TOML::

    [log]
    level = "DEBUG"
    format = "json"
    file = "~/.cache/class-hash/log.jsonl"

    [output]
    format = "json"
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .errors import ConfigError

ENV_PREFIX = "CLASS_HASH_"
ENV_CONFIG_PATH = "CLASS_HASH_CONFIG"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOG_FORMATS = ("text", "json")
OUTPUT_FORMATS = ("text", "json")


def _expand(p: str | Path) -> Path:
    return Path(p).expanduser().resolve()


@dataclass
class LogConfig:
    level: str = "WARNING"
    format: str = "text"
    file: Optional[Path] = None

    def validate(self) -> None:
        self.level = str(self.level).upper()
        if self.level not in LOG_LEVELS:
            raise ConfigError("unknown log level", key="log.level", value=self.level)
        self.format = str(self.format).lower()
        if self.format not in LOG_FORMATS:
            raise ConfigError("unknown log format", key="log.format", value=self.format)
        if self.file is not None and not isinstance(self.file, Path):
            self.file = _expand(self.file)


@dataclass
class OutputConfig:
    format: str = "text"

    def validate(self) -> None:
        self.format = str(self.format).lower()
        if self.format not in OUTPUT_FORMATS:
            raise ConfigError("unknown output format", key="output.format", value=self.format)


@dataclass
class Config:
    log: LogConfig = field(default_factory=LogConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    source: Optional[Path] = None

    def validate(self) -> "Config":
        self.log.validate()
        self.output.validate()
        return self

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["log"]["file"] = str(self.log.file) if self.log.file else None
        d["source"] = str(self.source) if self.source else None
        return d


# ------------------------------
# Layers
# ------------------------------


def _read_toml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except FileNotFoundError as e:
        raise ConfigError("config file not found", path=str(path)) from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"invalid TOML: {e}", path=str(path)) from e


def _from_env(env: Mapping[str, str]) -> Dict[str, Dict[str, Any]]:
    out: Dict[str, Dict[str, Any]] = {"log": {}, "output": {}}
    mapping = {
        "LOG_LEVEL": ("log", "level"),
        "LOG_FORMAT": ("log", "format"),
        "LOG_FILE": ("log", "file"),
        "OUTPUT": ("output", "format"),
    }
    for suffix, (section, key) in mapping.items():
        v = env.get(ENV_PREFIX + suffix)
        if v is not None and v.strip() != "":
            out[section][key] = v.strip()
    return out


def _merge(cfg: Config, layer: Mapping[str, Any]) -> None:
    for section_name in ("log", "output"):
        section = layer.get(section_name) or {}
        if not isinstance(section, Mapping):
            raise ConfigError("config section must be a table", section=section_name)
        target = getattr(cfg, section_name)
        known = {f.name for f in fields(target)}
        for k, v in section.items():
            if k not in known:
                raise ConfigError("unknown config key", key=f"{section_name}.{k}")
            setattr(target, k, v)


def load(
    path: Optional[str | Path] = None,
    *,
    overrides: Optional[Mapping[str, Any]] = None,
    env: Optional[Mapping[str, str]] = None,
) -> Config:
    """
    Build a validated Config.

    `overrides` uses the same nested shape as the TOML file, e.g.
    ``{"log": {"level": "DEBUG"}}``.
    """
    env = os.environ if env is None else env
    cfg = Config()

    file_path = path or env.get(ENV_CONFIG_PATH)
    if file_path:
        cfg.source = _expand(file_path)
        _merge(cfg, _read_toml(cfg.source))

    _merge(cfg, _from_env(env))
    if overrides:
        _merge(cfg, overrides)
    return cfg.validate()


__all__ = ["Config", "LogConfig", "OutputConfig", "load"]
