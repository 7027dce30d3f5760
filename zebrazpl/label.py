from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Union

from .objects import FontObject, PngObject
from .protocol import commands
from .protocol.command_set import CommandSet
from .protocol.template import DEFAULT_ENCODING, CommandTemplate, ParamValues
from .qr import QR_SIZES_BY_VERSION, data_input_mode, qr_version
from .units import UNITS, to_dots

ORIENTATIONS = {
    "normal": "N",
    "top-down": "R",
    "upside-down": "I",
    "bottom-up": "B",
}
COLORS = {
    "black": "B",
    "white": "W",
}
POSITIONING = ("center", "top-left")

QR_MAX_MAGNIFICATION = 10
# blank margin the printer leaves above a QR code
QR_Y_PADDING = 10


@dataclass(frozen=True)
class FontSpec:
    """Font with explicit size in label units; height defaults to width."""

    name: Union[str, FontObject]
    width: float
    height: Optional[float] = None


Font = Union[str, FontSpec, FontObject]


def _lookup(table: dict, key: str, what: str) -> str:
    try:
        return table[key]
    except KeyError:
        raise ValueError(f"Unknown {what} {key!r}, expected one of {', '.join(table)}") from None


class Label:
    """Builder for one ZPL label format.

    Coordinates and sizes are given in ``unit`` (dots, inches or CSS pixels)
    and converted to whole printer dots. Line and border thicknesses are
    always in dots.
    """

    def __init__(self, unit: str = "dots", dpi: Optional[float] = None) -> None:
        if unit not in UNITS:
            raise ValueError(f"Unknown unit {unit!r}, expected one of {', '.join(UNITS)}")
        if unit != "dots" and not dpi:
            raise ValueError(f"dpi is required to convert from unit {unit!r}")
        self.unit = unit
        self.dpi = dpi
        self._commands = CommandSet()
        self._last_orientation: Optional[str] = None

    @property
    def command_set(self) -> CommandSet:
        return self._commands

    def to_dots(self, value: float) -> int:
        return int(round(to_dots(value, self.unit, self.dpi)))

    def add(self, template: CommandTemplate, values: Optional[ParamValues] = None) -> "Label":
        self._commands.append(template, values)
        return self

    def _field_origin(self, x: float, y: float, invert_color: bool = False, y_offset: int = 0) -> None:
        self.add(commands.FIELD_ORIGIN, {"x": self.to_dots(x), "y": max(0, self.to_dots(y) - y_offset), "z": 0})
        if invert_color:
            self.add(commands.FIELD_REVERSE_PRINT)

    def comment(self, text: str) -> "Label":
        return self.add(commands.COMMENT, {"c": text})

    def text(
        self,
        x: float,
        y: float,
        text: str,
        orientation: str = "normal",
        invert_color: bool = False,
        font: Optional[Font] = None,
    ) -> "Label":
        code = _lookup(ORIENTATIONS, orientation, "orientation")
        self._field_origin(x, y, invert_color)
        if isinstance(font, str):
            self.add(commands.SCALABLE_FONT, {"f": font, "o": code})
        elif isinstance(font, FontObject):
            self.add(commands.USE_FONT_NAME, font.font_values(code))
        elif isinstance(font, FontSpec):
            width = self.to_dots(font.width)
            height = self.to_dots(font.height if font.height is not None else font.width)
            if isinstance(font.name, FontObject):
                self.add(commands.USE_FONT_NAME, font.name.font_values(code, height, width))
            else:
                self.add(commands.SCALABLE_FONT, {"f": font.name, "o": code, "h": height, "w": width})
        elif font is not None:
            raise TypeError(f"Unsupported font {font!r}")
        elif self._last_orientation != code:
            # ^FW is sticky for the rest of the format
            self.add(commands.FIELD_ORIENTATION, {"r": code, "z": 0})
            self._last_orientation = code
        self.add(commands.FIELD_DATA, {"a": text})
        return self.add(commands.FIELD_SEPARATOR)

    def line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        color: str = "black",
        invert_color: bool = False,
        thickness: int = 1,
    ) -> "Label":
        code = _lookup(COLORS, color, "color")
        self._field_origin(min(x1, x2), min(y1, y2), invert_color)
        width = x2 - x1
        height = y2 - y1
        if width == 0 or height == 0:
            self.add(
                commands.GRAPHIC_BOX,
                {
                    "w": max(self.to_dots(abs(width)), thickness),
                    "h": max(self.to_dots(abs(height)), thickness),
                    "t": thickness,
                    "c": code,
                    "r": 0,
                },
            )
        else:
            direction = "L" if (width > 0) == (height > 0) else "R"
            self.add(
                commands.GRAPHIC_DIAGONAL_LINE,
                {
                    "w": self.to_dots(abs(width)),
                    "h": self.to_dots(abs(height)),
                    "t": thickness,
                    "c": code,
                    "o": direction,
                },
            )
        return self.add(commands.FIELD_SEPARATOR)

    def box(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        filled: bool = False,
        color: str = "black",
        invert_color: bool = False,
        border_thickness: int = 1,
        border_radius: int = 0,
    ) -> "Label":
        code = _lookup(COLORS, color, "color")
        thickness = self.to_dots(min(width, height)) if filled else border_thickness
        self._field_origin(x, y, invert_color)
        self.add(
            commands.GRAPHIC_BOX,
            {
                "w": self.to_dots(width),
                "h": self.to_dots(height),
                "t": thickness,
                "c": code,
                "r": border_radius,
            },
        )
        return self.add(commands.FIELD_SEPARATOR)

    def ellipse(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        filled: bool = False,
        color: str = "black",
        invert_color: bool = False,
        positioning: str = "center",
        border_thickness: int = 1,
    ) -> "Label":
        code = _lookup(COLORS, color, "color")
        if positioning not in POSITIONING:
            raise ValueError(f"Unknown positioning {positioning!r}, expected one of {', '.join(POSITIONING)}")
        thickness = self.to_dots(min(width, height)) if filled else border_thickness
        if positioning == "center":
            x -= width / 2
            y -= height / 2
        self._field_origin(x, y, invert_color)
        if width == height:
            self.add(commands.GRAPHIC_CIRCLE, {"d": self.to_dots(width), "t": thickness, "c": code})
        else:
            self.add(
                commands.GRAPHIC_ELLIPSE,
                {"w": self.to_dots(width), "h": self.to_dots(height), "t": thickness, "c": code},
            )
        return self.add(commands.FIELD_SEPARATOR)

    def qrcode(
        self,
        x: float,
        y: float,
        text: str,
        max_size: Optional[float] = None,
        auto_mode: bool = False,
        error_correction: str = "Q",
        mask: Optional[int] = None,
    ) -> "Label":
        """QR code field; ``max_size`` picks the largest magnification that fits."""
        magnification = None
        if auto_mode:
            field_data = f"{error_correction}A,{text}"
        else:
            mode, size = data_input_mode(text)
            count = f"{size:04d}" if mode == "B" else ""
            field_data = f"{error_correction}M,{mode}{count}{text}"
            if max_size:
                modules = QR_SIZES_BY_VERSION[qr_version(mode, error_correction, size)]
                magnification = max(1, min(QR_MAX_MAGNIFICATION, math.floor(self.to_dots(max_size) / modules)))
        self._field_origin(x, y, y_offset=QR_Y_PADDING)
        self.add(
            commands.QR_CODE_BARCODE,
            {"b": 2, "c": magnification, "d": error_correction, "e": mask},
        )
        self.add(commands.FIELD_DATA, {"a": field_data})
        return self.add(commands.FIELD_SEPARATOR)

    def image(self, x: float, y: float, obj: PngObject) -> "Label":
        """Recall a downloaded image at (x, y)."""
        self._field_origin(x, y)
        self.add(commands.IMAGE_MOVE, obj.object_values())
        return self.add(commands.FIELD_SEPARATOR)

    def print_width(self, width: float) -> "Label":
        return self.add(commands.PRINT_WIDTH, {"a": self.to_dots(width)})

    def label_length(self, length: float) -> "Label":
        return self.add(commands.LABEL_LENGTH, {"y": self.to_dots(length)})

    def print_quantity(self, quantity: int) -> "Label":
        return self.add(commands.PRINT_QUANTITY, {"q": quantity})

    def _bracketed(self) -> CommandSet:
        return CommandSet().append(commands.START_FORMAT).extend(self._commands).append(commands.END_FORMAT)

    def render_string(self) -> str:
        return self._bracketed().render_string()

    def render_bytes(self, encoding: str = DEFAULT_ENCODING) -> bytes:
        return self._bracketed().render_bytes(encoding)

    def __str__(self) -> str:
        return self.render_string()
