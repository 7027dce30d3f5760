"""ZPL II command table.

Parameter grammar and ranges follow the ZPL II programming guide.
"""
from __future__ import annotations

from .template import CommandTemplate, Param
from .types import (
    DRIVE_LOCATIONS,
    FIELD_ORIENTATIONS,
    LINE_COLORS,
    OBJECT_NAME,
    YES_NO,
    Alphanumeric,
    AnyOf,
    Binary,
    BooleanValue,
    IntegerRange,
    OneOf,
    Text,
)

SPEEDS = OneOf("A", "B", "C", "D", "E")
DOWNLOAD_FORMATS = OneOf("A", "B", "C", "P")
DOWNLOAD_EXTENSIONS = OneOf("B", "E", "G", "P", "T", "X", "NRD", "PAC", "C", "F", "H")
IMAGE_EXTENSIONS = OneOf("GRF", "PNG")

# A: fonts
SCALABLE_FONT = CommandTemplate(
    "^Afo,h,w",
    {
        "f": Param(Alphanumeric.of_length(1), required=True, description="font name"),
        "o": Param(FIELD_ORIENTATIONS, description="field orientation"),
        "h": Param(IntegerRange(10, 32000), description="character height (in dots)"),
        "w": Param(IntegerRange(10, 32000), description="width (in dots)"),
    },
)
BITMAPPED_FONT = CommandTemplate(
    "^Afo,h,w",
    {
        "f": Param(Alphanumeric.of_length(1), required=True, description="font name"),
        "o": Param(FIELD_ORIENTATIONS, description="field orientation"),
        "h": Param(IntegerRange(1, 10), description="character height magnification"),
        "w": Param(IntegerRange(1, 10), description="width magnification"),
    },
)
USE_FONT_NAME = CommandTemplate(
    "^A@o,h,w,d:f.x",
    {
        "o": Param(FIELD_ORIENTATIONS, description="field orientation"),
        "h": Param(IntegerRange(10, 32000), description="character height (in dots)"),
        "w": Param(IntegerRange(10, 32000), description="width (in dots)"),
        "d": Param(DRIVE_LOCATIONS, description="drive location of font"),
        "f": Param(OBJECT_NAME, description="font name"),
        "x": Param(OneOf("FNT", "TTF", "TTE"), required=True, description="extension"),
    },
)

# B: barcodes
CODE128_BARCODE = CommandTemplate(
    "^BCo,h,f,g,e,m",
    {
        "o": Param(FIELD_ORIENTATIONS, description="orientation"),
        "h": Param(IntegerRange(1, 32000), description="bar code height (in dots)"),
        "f": Param(YES_NO, description="print interpretation line"),
        "g": Param(YES_NO, description="print interpretation line above code"),
        "e": Param(YES_NO, description="UCC check digit"),
        "m": Param(OneOf("N", "U", "A", "D"), description="mode"),
    },
)
QR_CODE_BARCODE = CommandTemplate(
    "^BQa,b,c,d,e",
    {
        "a": Param(OneOf("N"), description="field orientation"),
        "b": Param(IntegerRange(1, 2), description="model"),
        "c": Param(IntegerRange(1, 10), description="magnification factor"),
        "d": Param(OneOf("H", "Q", "M", "L"), description="error correction"),
        "e": Param(IntegerRange(0, 7), description="mask value"),
    },
)
BARCODE_FIELD_DEFAULT = CommandTemplate(
    "^BYw,r,h",
    {
        "w": Param(IntegerRange(1, 10), description="module width (in dots)"),
        "r": Param(IntegerRange(2, 3), description="wide bar to narrow bar width ratio"),
        "h": Param(IntegerRange(10, 32000), description="bar code height (in dots)"),
    },
)

# D: download
DOWNLOAD_OBJECTS = CommandTemplate(
    "~DYd:f,b,x,t,w,data",
    {
        "d": Param(DRIVE_LOCATIONS, required=True, description="file location"),
        "f": Param(OBJECT_NAME, required=True, description="file name"),
        "b": Param(DOWNLOAD_FORMATS, required=True, description="format downloaded in data field"),
        "x": Param(DOWNLOAD_EXTENSIONS, required=True, description="extension"),
        "t": Param(IntegerRange(0, 9999999), required=True, description="total number of bytes in file"),
        "w": Param(IntegerRange(0, 9999999), description="bytes per row (.GRF images only)"),
        "data": Param(AnyOf(Binary(), Text()), required=True, description="data"),
    },
)

# F: field
FIELD_BLOCK = CommandTemplate(
    "^FBa,b,c,d,e",
    {
        "a": Param(IntegerRange(0, 32000), description="width of text block line (in dots)"),
        "b": Param(IntegerRange(1, 9999), description="maximum number of lines in text block"),
        "c": Param(IntegerRange(-9999, 9999), description="add or delete space between lines (in dots)"),
        "d": Param(OneOf("L", "C", "R", "J"), description="text justification"),
        "e": Param(IntegerRange(0, 9999), description="hanging indent of the second and remaining lines"),
    },
)
FIELD_DATA = CommandTemplate("^FDa", {"a": Param(Text(), required=True, description="data to be printed")})
FIELD_ORIGIN = CommandTemplate(
    "^FOx,y,z",
    {
        "x": Param(IntegerRange(0, 32000), required=True, description="x-axis location (in dots)"),
        "y": Param(IntegerRange(0, 32000), required=True, description="y-axis location (in dots)"),
        "z": Param(IntegerRange(0, 2), description="justification"),
    },
)
FIELD_PARAMETER = CommandTemplate(
    "^FPd,g",
    {
        "d": Param(OneOf("H", "V", "R"), required=True, description="direction"),
        "g": Param(IntegerRange(0, 9999), description="additional inter-character gap (in dots)"),
    },
)
FIELD_REVERSE_PRINT = CommandTemplate("^FR")
FIELD_SEPARATOR = CommandTemplate("^FS")
FIELD_VARIABLE = CommandTemplate("^FVa", {"a": Param(Text(), required=True, description="variable field data")})
FIELD_ORIENTATION = CommandTemplate(
    "^FWr,z",
    {
        "r": Param(FIELD_ORIENTATIONS, required=True, description="rotate field"),
        "z": Param(IntegerRange(0, 2), description="justification"),
    },
)
COMMENT = CommandTemplate("^FXc", {"c": Param(Text(), required=True, description="non printing comment")})

# G: graphics
GRAPHIC_BOX = CommandTemplate(
    "^GBw,h,t,c,r",
    {
        "w": Param(IntegerRange(1, 32000), description="box width (in dots)"),
        "h": Param(IntegerRange(1, 32000), description="box height (in dots)"),
        "t": Param(IntegerRange(1, 32000), description="border thickness (in dots)"),
        "c": Param(LINE_COLORS, description="line color"),
        "r": Param(IntegerRange(0, 8), description="degree of corner-rounding"),
    },
)
GRAPHIC_CIRCLE = CommandTemplate(
    "^GCd,t,c",
    {
        "d": Param(IntegerRange(3, 4095), description="circle diameter (in dots)"),
        "t": Param(IntegerRange(1, 4095), description="border thickness (in dots)"),
        "c": Param(LINE_COLORS, description="line color"),
    },
)
GRAPHIC_DIAGONAL_LINE = CommandTemplate(
    "^GDw,h,t,c,o",
    {
        "w": Param(IntegerRange(3, 32000), description="box width (in dots)"),
        "h": Param(IntegerRange(3, 32000), description="box height (in dots)"),
        "t": Param(IntegerRange(1, 32000), description="border thickness (in dots)"),
        "c": Param(LINE_COLORS, description="line color"),
        "o": Param(OneOf("R", "L"), description="direction of the diagonal"),
    },
)
GRAPHIC_ELLIPSE = CommandTemplate(
    "^GEw,h,t,c",
    {
        "w": Param(IntegerRange(3, 4095), description="ellipse width (in dots)"),
        "h": Param(IntegerRange(3, 4095), description="ellipse height (in dots)"),
        "t": Param(IntegerRange(1, 4095), description="border thickness (in dots)"),
        "c": Param(LINE_COLORS, description="line color"),
    },
)

# I: images and stored objects
OBJECT_DELETE = CommandTemplate(
    "^IDd:o.x",
    {
        "d": Param(DRIVE_LOCATIONS, description="location of stored object"),
        "o": Param(AnyOf(OBJECT_NAME, OneOf("*")), description="object name"),
        "x": Param(AnyOf(Alphanumeric(1, 3), OneOf("*")), description="extension"),
    },
)
IMAGE_LOAD = CommandTemplate(
    "^ILd:o.x",
    {
        "d": Param(DRIVE_LOCATIONS, description="location of stored object"),
        "o": Param(OBJECT_NAME, description="object name"),
        "x": Param(IMAGE_EXTENSIONS, description="extension"),
    },
)
IMAGE_MOVE = CommandTemplate(
    "^IMd:o.x",
    {
        "d": Param(DRIVE_LOCATIONS, description="location of stored object"),
        "o": Param(OBJECT_NAME, description="object name"),
        "x": Param(IMAGE_EXTENSIONS, description="extension"),
    },
)
IMAGE_SAVE = CommandTemplate(
    "^ISd:o.x,p",
    {
        "d": Param(DRIVE_LOCATIONS, description="location of stored object"),
        "o": Param(OBJECT_NAME, description="object name"),
        "x": Param(IMAGE_EXTENSIONS, description="extension"),
        "p": Param(YES_NO, description="print image after storing"),
    },
)

# L: label
LIST_FONT_LINKS = CommandTemplate("^LF")
LABEL_HOME = CommandTemplate(
    "^LHx,y",
    {
        "x": Param(IntegerRange(0, 32000), required=True, description="x-axis location (in dots)"),
        "y": Param(IntegerRange(0, 32000), required=True, description="y-axis location (in dots)"),
    },
)
LABEL_LENGTH = CommandTemplate("^LLy", {"y": Param(IntegerRange(1, 32000), required=True, description="label length (in dots)")})
LABEL_REVERSE_PRINT = CommandTemplate("^LRa", {"a": Param(YES_NO, required=True, description="reverse print all fields")})
LABEL_SHIFT = CommandTemplate("^LSa", {"a": Param(IntegerRange(-9999, 9999), required=True, description="shift left value (in dots)")})
LABEL_TOP = CommandTemplate("^LTx", {"x": Param(IntegerRange(-120, 120), required=True, description="label top (in dot rows)")})

# P: printing
SLEW_TO_HOME = CommandTemplate("^PH")
PRINT_MIRROR_IMAGE = CommandTemplate("^PMa", {"a": Param(YES_NO, required=True, description="print mirror image of entire label")})
PRINT_ORIENTATION = CommandTemplate(
    "^POa", {"a": Param(BooleanValue("I", "N"), required=True, description="invert label 180 degrees")}
)
PROGRAMMABLE_PAUSE = CommandTemplate("^PP")
PRINT_QUANTITY = CommandTemplate(
    "^PQq,p,r,o,e",
    {
        "q": Param(IntegerRange(1, 99999999), required=True, description="total quantity of labels to print"),
        "p": Param(IntegerRange(0, 99999999), description="pause and cut value (labels between pauses)"),
        "r": Param(IntegerRange(0, 99999999), description="replicates of each serial number"),
        "o": Param(YES_NO, description="override pause count"),
        "e": Param(YES_NO, description="cut on error label"),
    },
)
PRINT_RATE = CommandTemplate(
    "^PRp,s,b",
    {
        "p": Param(AnyOf(IntegerRange(1, 14), SPEEDS), required=True, description="print speed"),
        "s": Param(AnyOf(IntegerRange(2, 14), SPEEDS), description="slew speed"),
        "b": Param(AnyOf(IntegerRange(2, 14), SPEEDS), description="backfeed speed"),
    },
)
PRINT_WIDTH = CommandTemplate("^PWa", {"a": Param(IntegerRange(2, 32000), required=True, description="label width (in dots)")})
PRINT_START = CommandTemplate("~PS")

# W: directory and configuration
PRINT_CONFIGURATION_LABEL = CommandTemplate("~WC")
PRINT_DIRECTORY_LABEL = CommandTemplate(
    "^WDd:o.x",
    {
        "d": Param(OneOf("R", "E", "B", "A", "Z"), description="source device"),
        "o": Param(AnyOf(OBJECT_NAME, OneOf("*", "?")), description="object name"),
        "x": Param(
            OneOf("FNT", "BAR", "ZPL", "GRF", "CO", "DAT", "BAS", "BAE", "STO", "PNG", "TTF", "TTE", "*", "?"),
            description="extension",
        ),
    },
)

# X: format
START_FORMAT = CommandTemplate("^XA")
RECALL_FORMAT = CommandTemplate(
    "^XFd:o.x",
    {
        "d": Param(DRIVE_LOCATIONS, required=True, description="source device of stored format"),
        "o": Param(OBJECT_NAME, required=True, description="name of stored format"),
        "x": Param(OneOf("ZPL"), required=True, description="extension"),
    },
)
RECALL_GRAPHIC = CommandTemplate(
    "^XGd:o.x,mx,my",
    {
        "d": Param(DRIVE_LOCATIONS, required=True, description="source device of stored image"),
        "o": Param(OBJECT_NAME, required=True, description="name of stored image"),
        "x": Param(OneOf("GRF"), required=True, description="extension"),
        "mx": Param(IntegerRange(1, 10), description="magnification factor on the x-axis"),
        "my": Param(IntegerRange(1, 10), description="magnification factor on the y-axis"),
    },
)
END_FORMAT = CommandTemplate("^XZ")
