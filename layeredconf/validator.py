"""Validators that check a configuration mapping."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


class ValidationError(Exception):
    """Raised when a configuration does not pass validation."""


class Validator(ABC):
    """Base class for configuration validators."""

    @abstractmethod
    def validate(self, values: Mapping[str, Any]) -> None:
        """Raise ValidationError if ``values`` is not acceptable."""


def _format_number(number: float) -> str:
    value = float(number)
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class RequiredValidator(Validator):
    """Ensures that every listed key is present."""

    keys: list[str] = field(default_factory=list)

    def validate(self, values: Mapping[str, Any]) -> None:
        for key in self.keys:
            if key not in values:
                raise ValidationError(f"required configuration key missing: {key}")


@dataclass
class TypeValidator(Validator):
    """Ensures that a key, when present, holds a value of exactly one type."""

    key: str
    expected: type

    def validate(self, values: Mapping[str, Any]) -> None:
        if self.key not in values:
            return
        actual = type(values[self.key])
        if actual is not self.expected:
            raise ValidationError(
                f"invalid type for key {self.key}: "
                f"expected {self.expected.__name__}, got {actual.__name__}"
            )


@dataclass
class RangeValidator(Validator):
    """Ensures that a numeric key, when present, lies within a closed range."""

    key: str
    minimum: float
    maximum: float
    is_int: bool = False

    def validate(self, values: Mapping[str, Any]) -> None:
        if self.key not in values:
            return
        value = values[self.key]
        if not _is_number(value):
            raise ValidationError(
                f"invalid type for range validation on key {self.key}: expected number"
            )
        number = float(value)
        if not (self.minimum <= number <= self.maximum):
            raise ValidationError(
                f"value for key {self.key} is out of range: expected between "
                f"{_format_number(self.minimum)} and {_format_number(self.maximum)}"
            )
        if self.is_int and not number.is_integer():
            raise ValidationError(f"value for key {self.key} must be an integer")