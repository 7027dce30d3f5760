from __future__ import annotations

import numbers
import re
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from ..errors import ParameterTypeError

BINARY_TYPES = (bytes, bytearray, memoryview)


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_integral(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Integral):
        return True
    return isinstance(value, float) and value.is_integer()


class ParamType:
    """Runtime validator for one command parameter."""

    def validate(self, value: Any) -> Optional[str]:
        """Return an error description, or None if the value is valid."""
        raise NotImplementedError


@dataclass(frozen=True)
class IntegerRange(ParamType):
    min: int
    max: int

    def __post_init__(self) -> None:
        if self.min > self.max:
            raise ParameterTypeError(f'"min" ({self.min}) should not be greater than "max" ({self.max})')

    def validate(self, value: Any) -> Optional[str]:
        if not _is_integral(value):
            return "should be an integer"
        if value < self.min or value > self.max:
            return f"should be a number between {self.min} and {self.max}"
        return None


@dataclass(frozen=True)
class Alphanumeric(ParamType):
    min_length: Optional[int] = None
    max_length: Optional[int] = None

    def __post_init__(self) -> None:
        if self.min_length is not None and self.max_length is not None and self.min_length > self.max_length:
            raise ParameterTypeError(
                f'"min_length" ({self.min_length}) should not be greater than "max_length" ({self.max_length})'
            )

    @classmethod
    def of_length(cls, length: int) -> "Alphanumeric":
        return cls(length, length)

    @property
    def regex(self) -> "re.Pattern[str]":
        if self.min_length is None and self.max_length is None:
            bounds = "+"
        else:
            low = self.min_length if self.min_length is not None else 1
            high = self.max_length if self.max_length is not None else ""
            bounds = f"{{{low},{high}}}"
        return re.compile(f"[A-Za-z0-9]{bounds}")

    def validate(self, value: Any) -> Optional[str]:
        if not isinstance(value, str):
            return "should be a string"
        if self.regex.fullmatch(value):
            return None
        if self.min_length is not None and self.max_length is not None:
            if self.min_length == self.max_length:
                requirement = f" of length {self.min_length}"
            else:
                requirement = f" with length between {self.min_length} and {self.max_length}"
        elif self.min_length is not None:
            requirement = f" with length of at least {self.min_length}"
        elif self.max_length is not None:
            requirement = f" with length of at most {self.max_length}"
        else:
            requirement = ""
        return "should be an alphanumeric string" + requirement


class OneOf(ParamType):
    def __init__(self, *values: str) -> None:
        if not values:
            raise ParameterTypeError("OneOf needs at least one value")
        self.values: Tuple[str, ...] = tuple(values)

    def validate(self, value: Any) -> Optional[str]:
        if not isinstance(value, str):
            return "should be a string"
        if value not in self.values:
            return "should be one of " + ", ".join(self.values)
        return None

    def __repr__(self) -> str:
        return f"OneOf{self.values!r}"


@dataclass(frozen=True)
class BooleanValue(ParamType):
    """Boolean rendered as one of two literal tokens (e.g. Y/N)."""

    true: str
    false: str = ""

    def validate(self, value: Any) -> Optional[str]:
        if not isinstance(value, bool):
            return "should be a boolean value"
        return None

    def token(self, value: bool) -> str:
        return self.true if value else self.false


class Binary(ParamType):
    def validate(self, value: Any) -> Optional[str]:
        if not isinstance(value, BINARY_TYPES):
            return "should be a byte sequence"
        return None

    def __repr__(self) -> str:
        return "Binary()"


class Text(ParamType):
    def validate(self, value: Any) -> Optional[str]:
        if not isinstance(value, str):
            return "should be a string"
        return None

    def __repr__(self) -> str:
        return "Text()"


class Number(ParamType):
    def validate(self, value: Any) -> Optional[str]:
        if not _is_number(value):
            return "should be a number"
        return None

    def __repr__(self) -> str:
        return "Number()"


class Pattern(ParamType):
    def __init__(self, regex: "str | re.Pattern[str]") -> None:
        self.regex = re.compile(regex) if isinstance(regex, str) else regex

    def validate(self, value: Any) -> Optional[str]:
        if not isinstance(value, str):
            return "should be a string"
        if not self.regex.fullmatch(value):
            return f"should match regular expression {self.regex.pattern}"
        return None

    def __repr__(self) -> str:
        return f"Pattern({self.regex.pattern!r})"


class AnyOf(ParamType):
    """Union: valid when at least one member type accepts the value."""

    def __init__(self, *types: Any) -> None:
        if not types:
            raise ParameterTypeError("AnyOf needs at least one type")
        self.types: Tuple[ParamType, ...] = tuple(as_param_type(t) for t in types)

    def validate(self, value: Any) -> Optional[str]:
        errors = []
        for member in self.types:
            error = member.validate(value)
            if error is None:
                return None
            errors.append(error)
        return ", or ".join(errors)

    def __repr__(self) -> str:
        return f"AnyOf{self.types!r}"


_NAMED_TYPES = {
    "string": Text,
    "number": Number,
    "binary": Binary,
}


def as_param_type(descriptor: Any) -> ParamType:
    """Normalize a type descriptor (type instance or shorthand) to a ParamType."""
    if isinstance(descriptor, ParamType):
        return descriptor
    if isinstance(descriptor, str) and descriptor in _NAMED_TYPES:
        return _NAMED_TYPES[descriptor]()
    if isinstance(descriptor, (set, frozenset)):
        return OneOf(*sorted(descriptor))
    if isinstance(descriptor, re.Pattern):
        return Pattern(descriptor)
    if isinstance(descriptor, (list, tuple)):
        return AnyOf(*descriptor)
    raise ParameterTypeError(f"Invalid parameter type {descriptor!r}")


def validate_value(descriptor: Any, value: Any) -> Optional[str]:
    return as_param_type(descriptor).validate(value)


# Shared types used across the command table
YES_NO = BooleanValue("Y", "N")
FIELD_ORIENTATIONS = OneOf("N", "R", "I", "B")
DRIVE_LOCATIONS = OneOf("R", "E", "B", "A")
LINE_COLORS = OneOf("B", "W")
OBJECT_NAME = Alphanumeric(1, 8)
