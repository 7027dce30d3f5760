from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

SGD_TYPES = ("setvar", "getvar", "do")
SGD_TERMINATOR = "\r\n"


@dataclass(frozen=True)
class SGDCommand:
    """Set-Get-Do command, e.g. ``! U1 setvar "device.languages" "zpl"``.

    The printer expects command, attribute and value in lower case.
    """

    command_type: str
    attribute: str
    value: Optional[str] = None

    def __post_init__(self) -> None:
        if self.command_type not in SGD_TYPES:
            raise ValueError(f"SGD command type must be one of {', '.join(SGD_TYPES)}")

    def __str__(self) -> str:
        text = f'! U1 {self.command_type} "{self.attribute}"'
        if self.command_type == "getvar":
            return text
        return text + f' "{self.value or ""}"'

    def to_bytes(self) -> bytes:
        return (str(self) + SGD_TERMINATOR).encode("ascii")


def setvar(attribute: str, value: str) -> SGDCommand:
    return SGDCommand("setvar", attribute, value)


def getvar(attribute: str) -> SGDCommand:
    return SGDCommand("getvar", attribute)


def do(attribute: str, value: str = "") -> SGDCommand:
    return SGDCommand("do", attribute, value)
