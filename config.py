"""
Run configuration, loaded from an optional YAML file.

    # abandoned_strings.yml
    workers: 8
    encoding: utf-8
    ignore_dirs: [Pods, Carthage]
    allowlist:
      - dynamic.key.built.at.runtime
"""
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

import yaml

from errors import ConfigError

DEFAULT_CONFIG_NAME = "abandoned_strings.yml"


@dataclass(frozen=True)
class Config:
    workers: Optional[int] = None
    encoding: str = "utf-8"
    ignore_dirs: tuple = field(default_factory=tuple)
    allowlist: frozenset = field(default_factory=frozenset)


def _string_list(data: dict, key: str) -> list:
    value = data.get(key) or []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' must be a list of strings")
    return value


def parse_config(data) -> Config:
    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise ConfigError("configuration must be a mapping")

    unknown = set(data) - {"workers", "encoding", "ignore_dirs", "allowlist"}
    if unknown:
        raise ConfigError(f"unknown configuration keys: {', '.join(sorted(unknown))}")

    workers = data.get("workers")
    if workers is not None and (isinstance(workers, bool) or not isinstance(workers, int) or workers < 1):
        raise ConfigError("'workers' must be a positive integer")

    encoding = data.get("encoding", "utf-8")
    if not isinstance(encoding, str):
        raise ConfigError("'encoding' must be a string")
    try:
        "".encode(encoding)
    except LookupError as e:
        raise ConfigError(f"unknown encoding: {encoding}") from e

    return Config(
        workers=workers,
        encoding=encoding,
        ignore_dirs=tuple(_string_list(data, "ignore_dirs")),
        allowlist=frozenset(_string_list(data, "allowlist")),
    )


def load_config(path=None, cwd=None) -> Config:
    """
    Load `path`, or abandoned_strings.yml from `cwd` when no path is given.

    A missing default file yields the defaults; a missing explicit file is
    an error.
    """
    if path is None:
        candidate = Path(cwd or ".") / DEFAULT_CONFIG_NAME
        if not candidate.exists():
            return Config()
    else:
        candidate = Path(path)
        if not candidate.exists():
            raise ConfigError(f"configuration file not found: {candidate}")

    try:
        with open(candidate, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"cannot load {candidate}: {e}") from e
    return parse_config(data)
