from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..errors import ValidationError
from .types import BINARY_TYPES, BooleanValue, ParamType, as_param_type

ParamValue = Any
ParamValues = Mapping[str, ParamValue]

DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True)
class Param:
    """Schema entry for one template parameter."""

    type: Any
    required: bool = False
    delimiter: str = ""
    description: str = ""
    param_type: ParamType = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "param_type", as_param_type(self.type))


class CommandTemplate:
    """Immutable ZPL command schema.

    The pattern is split once into alternating literal and parameter-key
    segments (even indices literal, odd indices keys); rendering walks that
    list and substitutes validated values.
    """

    def __init__(self, pattern: str, params: Optional[Mapping[str, Param]] = None) -> None:
        self.command = pattern
        self.params: Dict[str, Param] = dict(params or {})
        if not self.params:
            self._segments: Tuple[str, ...] = (pattern,)
            return
        # longest key first so "data" is not consumed as "d" + "ata"
        keys = sorted(self.params, key=len, reverse=True)
        splitter = re.compile("(" + "|".join(re.escape(key) for key in keys) + ")")
        self._segments = tuple(splitter.split(pattern))

    @property
    def segments(self) -> Tuple[str, ...]:
        return self._segments

    def validate_params(self, values: Optional[ParamValues] = None) -> None:
        """Check every value against its type; raise ValidationError with all failures."""
        values = values or {}
        errors: Dict[str, List[str]] = {}
        for key in values:
            if key not in self.params:
                errors.setdefault(key, []).append(f"is not a parameter of {self.command}")
        for key, param in self.params.items():
            value = values.get(key)
            if value is None:
                if param.required:
                    errors.setdefault(key, []).append("is required")
                continue
            error = param.param_type.validate(value)
            if error:
                errors.setdefault(key, []).append(error)
        if errors:
            raise ValidationError(errors, self.command)

    def render_string(self, values: Optional[ParamValues] = None) -> str:
        values = values or {}
        self.validate_params(values)
        parts: List[str] = []
        for index, segment in enumerate(self._segments):
            if index % 2 == 0:
                parts.append(segment)
                continue
            param = self.params[segment]
            value = values.get(segment)
            if isinstance(value, BINARY_TYPES):
                parts.append(bytes(value).decode("latin-1"))
            else:
                parts.append(self._format_value(param, value))
            parts.append(param.delimiter)
        return "".join(parts)

    def render_bytes(self, values: Optional[ParamValues] = None, encoding: str = DEFAULT_ENCODING) -> bytes:
        values = values or {}
        self.validate_params(values)
        out = bytearray()
        for index, segment in enumerate(self._segments):
            if index % 2 == 0:
                out += segment.encode(encoding)
                continue
            param = self.params[segment]
            value = values.get(segment)
            if isinstance(value, BINARY_TYPES):
                out += value
            else:
                out += self._format_value(param, value).encode(encoding)
            out += param.delimiter.encode(encoding)
        return bytes(out)

    @staticmethod
    def _format_value(param: Param, value: ParamValue) -> str:
        if value is None:
            return ""
        if isinstance(value, bool) and isinstance(param.param_type, BooleanValue):
            return param.param_type.token(value)
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)

    def __str__(self) -> str:
        return self.command

    def __repr__(self) -> str:
        return f"CommandTemplate({self.command!r})"
