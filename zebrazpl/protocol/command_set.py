from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

from .template import DEFAULT_ENCODING, CommandTemplate, ParamValues

Entry = Tuple[CommandTemplate, Dict[str, object]]


class CommandSet:
    """Ordered, append-only list of (template, values) pairs."""

    def __init__(self, entries: Optional[List[Entry]] = None) -> None:
        self._entries: List[Entry] = list(entries or [])

    def append(self, template: CommandTemplate, values: Optional[ParamValues] = None) -> "CommandSet":
        """Validate and add a command; returns self for chaining."""
        stored = dict(values or {})
        template.validate_params(stored)
        self._entries.append((template, stored))
        return self

    def extend(self, other: "CommandSet") -> "CommandSet":
        self._entries.extend(other)
        return self

    def copy(self) -> "CommandSet":
        return CommandSet(self._entries)

    def render_string(self) -> str:
        return "".join(template.render_string(values) for template, values in self._entries)

    def render_bytes(self, encoding: str = DEFAULT_ENCODING) -> bytes:
        parts = [template.render_bytes(values, encoding) for template, values in self._entries]
        buffer = bytearray(sum(len(part) for part in parts))
        offset = 0
        for part in parts:
            buffer[offset : offset + len(part)] = part
            offset += len(part)
        return bytes(buffer)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
