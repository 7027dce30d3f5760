"""Printer-resident download objects (images and fonts)."""
from __future__ import annotations

import os
import re
from abc import ABC, abstractmethod
from typing import Dict, Optional

from .codecs.encodings import hex_encode
from .codecs.png import find_chunk, parse_png
from .protocol import commands
from .protocol.command_set import CommandSet
from .protocol.types import DRIVE_LOCATIONS, OBJECT_NAME

DEFAULT_DRIVE = "R"
FONT_EXTENSIONS = {".ttf": "TTF", ".tte": "TTE"}


def printer_name(path: str) -> str:
    """First 8 upper-case alphanumerics of the file stem."""
    stem = os.path.splitext(os.path.basename(path))[0]
    name = re.sub(r"[^A-Z0-9]", "", stem.upper())[:8]
    if not name:
        raise ValueError(f"Cannot derive a printer object name from {path!r}")
    return name


def _read(path: str) -> bytes:
    with open(path, "rb") as handle:
        return handle.read()


class DownloadObject(ABC):
    extension = ""

    def __init__(self, data: bytes, name: str, drive: str = DEFAULT_DRIVE) -> None:
        error = OBJECT_NAME.validate(name)
        if error:
            raise ValueError(f"Object name {name!r} {error}")
        error = DRIVE_LOCATIONS.validate(drive)
        if error:
            raise ValueError(f"Drive {drive!r} {error}")
        self.data = bytes(data)
        self.name = name
        self.drive = drive

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def path(self) -> str:
        return f"{self.drive}:{self.name}.{self.extension}"

    def object_values(self) -> Dict[str, str]:
        return {"d": self.drive, "o": self.name, "x": self.extension}

    @abstractmethod
    def download_commands(self) -> CommandSet:
        ...

    def download_bytes(self) -> bytes:
        return self.download_commands().render_bytes()

    def delete_commands(self) -> CommandSet:
        return CommandSet().append(commands.OBJECT_DELETE, self.object_values())

    def delete_bytes(self) -> bytes:
        return self.delete_commands().render_bytes()

    def delete_string(self) -> str:
        return self.delete_commands().render_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.path!r}, {self.size} bytes)"


class PngObject(DownloadObject):
    extension = "PNG"

    def __init__(self, data: bytes, name: str, drive: str = DEFAULT_DRIVE) -> None:
        super().__init__(data, name, drive)
        # raises PngFormatError / PngCrcError on a bad stream
        header = find_chunk(parse_png(self.data, strict=True), "IHDR")
        if header is None or "width" not in header.details:
            raise ValueError("PNG data has no valid IHDR chunk")
        self.width: int = header.details["width"]
        self.height: int = header.details["height"]

    @classmethod
    def from_file(cls, path: str, name: Optional[str] = None, drive: str = DEFAULT_DRIVE) -> "PngObject":
        ext = os.path.splitext(path)[1]
        if ext.lower() != ".png":
            raise ValueError(f"File should be a PNG, got {ext or 'no extension'}")
        return cls(_read(path), name or printer_name(path), drive)

    def download_commands(self) -> CommandSet:
        """~DY with the PNG as ASCII hex, bracketed by ^XA/^XZ."""
        return (
            CommandSet()
            .append(commands.START_FORMAT)
            .append(
                commands.DOWNLOAD_OBJECTS,
                {
                    "d": self.drive,
                    "f": self.name,
                    "b": "P",
                    "x": "P",
                    "t": self.size,
                    "data": hex_encode(self.data),
                },
            )
            .append(commands.END_FORMAT)
        )

    def draw_commands(self) -> CommandSet:
        return CommandSet().append(commands.IMAGE_LOAD, self.object_values())

    def draw_bytes(self) -> bytes:
        return self.draw_commands().render_bytes()

    def draw_string(self) -> str:
        return self.draw_commands().render_string()


class FontObject(DownloadObject):
    def __init__(self, data: bytes, name: str, extension: str = "TTF", drive: str = DEFAULT_DRIVE) -> None:
        if extension not in FONT_EXTENSIONS.values():
            raise ValueError(f"Font extension should be TTF or TTE, got {extension}")
        super().__init__(data, name, drive)
        self.extension = extension

    @classmethod
    def from_file(cls, path: str, name: Optional[str] = None, drive: str = DEFAULT_DRIVE) -> "FontObject":
        ext = os.path.splitext(path)[1]
        extension = FONT_EXTENSIONS.get(ext.lower())
        if extension is None:
            raise ValueError(f"File should be a TTF or TTE, got {ext or 'no extension'}")
        return cls(_read(path), name or printer_name(path), extension, drive)

    def download_commands(self) -> CommandSet:
        """~DY with the raw font bytes, bracketed by ^XA/^XZ."""
        return (
            CommandSet()
            .append(commands.START_FORMAT)
            .append(
                commands.DOWNLOAD_OBJECTS,
                {
                    "d": self.drive,
                    "f": self.name,
                    "b": "B",
                    "x": "E" if self.extension == "TTE" else "T",
                    "t": self.size,
                    "data": self.data,
                },
            )
            .append(commands.END_FORMAT)
        )

    def font_values(
        self, orientation: str = "N", height: Optional[int] = None, width: Optional[int] = None
    ) -> Dict[str, object]:
        return {
            "o": orientation,
            "h": height,
            "w": width,
            "d": self.drive,
            "f": self.name,
            "x": self.extension,
        }

    def call_font(self, size_in_dots: int) -> CommandSet:
        return CommandSet().append(commands.USE_FONT_NAME, self.font_values("N", size_in_dots, size_in_dots))

    def call_font_bytes(self, size_in_dots: int) -> bytes:
        return self.call_font(size_in_dots).render_bytes()

    def call_font_string(self, size_in_dots: int) -> str:
        return self.call_font(size_in_dots).render_string()
