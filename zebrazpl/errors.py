from __future__ import annotations

from typing import Dict, List, Optional


class ZebraError(Exception):
    """Base class for every error raised by zebrazpl."""


class ParameterTypeError(ZebraError, TypeError):
    """Raised for an invalid parameter type descriptor or invalid type bounds."""


class ValidationError(ZebraError, ValueError):
    """Parameter values failed validation against a command template."""

    def __init__(self, errors: Dict[str, List[str]], command: Optional[str] = None) -> None:
        self.errors = errors
        self.command = command
        super().__init__(self._format())

    def _format(self) -> str:
        plural = "s" if len(self.errors) > 1 else ""
        where = f" for {self.command}" if self.command else ""
        lines = [f'"{key}" ({", ".join(messages)})' for key, messages in self.errors.items()]
        return f"Invalid parameter{plural}{where}: " + "; ".join(lines)


class PngFormatError(ZebraError, ValueError):
    """Input is not a well-formed PNG byte stream."""


class PngCrcError(PngFormatError):
    def __init__(self, chunk_type: str, expected: int, actual: int) -> None:
        self.chunk_type = chunk_type
        self.expected = expected
        self.actual = actual
        super().__init__(f"CRC mismatch in {chunk_type} chunk (expected {expected:08x}, got {actual:08x})")


class FTPError(ZebraError, RuntimeError):
    """Base class for FTP session failures."""


class FTPResponseError(FTPError):
    """The printer answered with a 4xx/5xx status."""

    def __init__(self, status: int, message: str, command: Optional[str] = None) -> None:
        self.status = status
        self.message = message
        self.command = command
        text = f"{status} {message}"
        if command:
            text += f" (in reply to {command})"
        super().__init__(text)


class FTPTimeoutError(FTPError, TimeoutError):
    pass


class FTPConnectionError(FTPError, ConnectionError):
    pass


class FTPBusyError(FTPError):
    pass
