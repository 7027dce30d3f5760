from .config import PrinterSettings
from .errors import (
    FTPBusyError,
    FTPConnectionError,
    FTPError,
    FTPResponseError,
    FTPTimeoutError,
    ParameterTypeError,
    PngCrcError,
    PngFormatError,
    ValidationError,
    ZebraError,
)
from .label import FontSpec, Label
from .objects import FontObject, PngObject
from .protocol import CommandSet, CommandTemplate, Param
from .transport import FTPReply, ZebraFTPClient

__all__ = [
    "CommandSet",
    "CommandTemplate",
    "FontObject",
    "FontSpec",
    "FTPBusyError",
    "FTPConnectionError",
    "FTPError",
    "FTPReply",
    "FTPResponseError",
    "FTPTimeoutError",
    "Label",
    "Param",
    "ParameterTypeError",
    "PngCrcError",
    "PngFormatError",
    "PngObject",
    "PrinterSettings",
    "ValidationError",
    "ZebraError",
    "ZebraFTPClient",
]
