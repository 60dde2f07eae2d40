"""A thread-safe store of configuration values fed by sources."""

from __future__ import annotations

import math
import threading
from types import MappingProxyType
from typing import Any

from layeredconf.loader import Source
from layeredconf.validator import Validator


class ConfigLoadError(Exception):
    """Raised when a source fails to load into the configuration."""


def _is_number(value: Any, kind: type) -> bool:
    return isinstance(value, kind) and not isinstance(value, bool)


class ConfigManager:
    """Holds configuration values, merges sources and runs validators."""

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}
        self._validators: list[Validator] = []
        self._lock = threading.RLock()

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value for ``key``, or ``default`` if it is not set."""
        with self._lock:
            return self._values.get(key, default)

    def get_string(self, key: str) -> str | None:
        """Return the value if it is a string, else None."""
        value = self.get(key)
        return value if isinstance(value, str) else None

    def get_int(self, key: str) -> int | None:
        """Return the value as an int; floats are truncated. None otherwise."""
        value = self.get(key)
        if _is_number(value, int):
            return value
        if isinstance(value, float) and math.isfinite(value):
            return int(value)
        return None

    def get_bool(self, key: str) -> bool | None:
        """Return the value if it is a boolean, else None."""
        value = self.get(key)
        return value if isinstance(value, bool) else None

    def get_float(self, key: str) -> float | None:
        """Return the value as a float, converting ints. None otherwise."""
        value = self.get(key)
        if isinstance(value, float):
            return value
        if _is_number(value, int):
            return float(value)
        return None

    def get_string_slice(self, key: str) -> list[str] | None:
        """Return the value as a list of strings if every item is a string."""
        value = self.get(key)
        if isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
            return list(value)
        return None

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``."""
        with self._lock:
            self._values[key] = value

    def load(self, source: Source) -> None:
        """Merge the values of ``source`` in, overriding existing keys."""
        try:
            values = source.load()
        except Exception as err:
            raise ConfigLoadError(f"failed to load configuration: {err}") from err
        with self._lock:
            self._values.update(values or {})

    def validate(self) -> None:
        """Run every validator in order; the first failure propagates."""
        with self._lock:
            view = MappingProxyType(self._values)
            for validator in self._validators:
                validator.validate(view)

    def add_validator(self, validator: Validator) -> None:
        """Register a validator to be run by :meth:`validate`."""
        with self._lock:
            self._validators.append(validator)