"""Configuration sources: files, environment variables and defaults."""

from __future__ import annotations

import json
import os
import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml


class SourceError(Exception):
    """Raised when a configuration source cannot be loaded."""


class Source(ABC):
    """Something that yields a mapping of configuration values."""

    @abstractmethod
    def load(self) -> dict[str, Any]:
        """Return the configuration values held by this source."""


def _as_mapping(data: Any, kind: str) -> dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SourceError(
            f"failed to parse {kind} config: expected a mapping at the top level, "
            f"got {type(data).__name__}"
        )
    return data


@dataclass
class FileSource(Source):
    """Loads configuration from a JSON or YAML file, chosen by extension.

    JSON numbers are all read as floats; YAML keeps integers as integers.
    """

    path: str | os.PathLike[str]

    def load(self) -> dict[str, Any]:
        path = Path(self.path)
        try:
            data = path.read_bytes()
        except OSError as err:
            raise SourceError(f"failed to read config file: {err}") from err

        ext = path.suffix.lower()
        if ext == ".json":
            try:
                parsed = json.loads(data, parse_int=float)
            except ValueError as err:
                raise SourceError(f"failed to parse JSON config: {err}") from err
            return _as_mapping(parsed, "JSON")
        if ext in (".yaml", ".yml"):
            try:
                parsed = yaml.safe_load(data)
            except yaml.YAMLError as err:
                raise SourceError(f"failed to parse YAML config: {err}") from err
            return _as_mapping(parsed, "YAML")
        raise SourceError(f"unsupported config file format: {ext}")


_INT_PREFIX = re.compile(r"[ \t\r]*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"[ \t\r]*([+-]?(?:nan|inf|\d*\.?\d*(?:[eE][+-]?\d+)?))", re.IGNORECASE
)


def _scan_int(text: str) -> int | None:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else None


def _scan_float(text: str) -> float | None:
    match = _FLOAT_PREFIX.match(text)
    if not match:
        return None
    try:
        return float(match.group(1))
    except ValueError:
        return None


def parse_env_value(value: str) -> bool | int | float | str:
    """Interpret an environment variable's text.

    "true" and "false" become booleans. Otherwise a leading integer is taken
    (so "3.5" reads as 3), then a leading float (".5", "inf"), and failing
    both the text is kept as it is.
    """
    if value in ("true", "false"):
        return value == "true"
    integer = _scan_int(value)
    if integer is not None:
        return integer
    number = _scan_float(value)
    if number is not None:
        return number
    return value


@dataclass
class EnvSource(Source):
    """Loads configuration from environment variables sharing a prefix.

    The prefix is removed, the rest is lower-cased and underscores become
    dots, so with prefix "APP_" the variable APP_DB_HOST gives "db.host".
    """

    prefix: str = ""
    environ: Mapping[str, str] | None = field(default=None, repr=False)

    def load(self) -> dict[str, Any]:
        environ = os.environ if self.environ is None else self.environ
        prefix = self.prefix.upper()
        values: dict[str, Any] = {}
        for key, value in environ.items():
            if not key.startswith(prefix):
                continue
            config_key = key[len(prefix):].lower().replace("_", ".")
            values[config_key] = parse_env_value(value)
        return values


@dataclass
class DefaultSource(Source):
    """Provides a fixed mapping of default values."""

    values: dict[str, Any] = field(default_factory=dict)

    def load(self) -> dict[str, Any]:
        return self.values