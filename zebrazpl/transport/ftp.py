"""Active-mode FTP client for Zebra printers.

Replies are matched to commands strictly in order: every command queues one
pending entry, and every terminal (non-1xx) reply completes the oldest one.
"""
from __future__ import annotations

import asyncio
import logging
import os
import re
import time
from collections import deque
from dataclasses import dataclass
from typing import Any, AsyncIterable, Callable, Deque, Iterable, Optional, Union

from ..config import DEFAULT_CONNECTION_TIMEOUT, DEFAULT_FTP_PORT, DEFAULT_HOST, DEFAULT_KEEP_ALIVE
from ..errors import FTPBusyError, FTPConnectionError, FTPError, FTPResponseError, FTPTimeoutError
from .network import find_local_address, port_argument

logger = logging.getLogger(__name__)

READ_CHUNK_SIZE = 64 * 1024
GREETING = "<greeting>"

_REPLY_LINE = re.compile(r"(\d{3})([ -]?)(.*)")

Payload = Union[str, bytes, bytearray, memoryview, Any, Iterable[bytes], AsyncIterable[bytes]]
IntermediateCallback = Callable[["FTPReply"], Any]


@dataclass(frozen=True)
class FTPReply:
    status: int
    message: str

    @property
    def intermediate(self) -> bool:
        return 100 <= self.status < 200

    @property
    def failed(self) -> bool:
        return self.status >= 400

    def __str__(self) -> str:
        return f"{self.status} {self.message}"


@dataclass
class _Pending:
    command: str
    future: "asyncio.Future[FTPReply]"
    on_intermediate: Optional[IntermediateCallback] = None
    # raised by on_intermediate, delivered with the terminal reply
    error: Optional[BaseException] = None


async def _write_payload(writer: asyncio.StreamWriter, data: Payload) -> None:
    if isinstance(data, str):
        writer.write(data.encode("utf-8"))
    elif isinstance(data, (bytes, bytearray, memoryview)):
        writer.write(bytes(data))
    elif hasattr(data, "read"):
        loop = asyncio.get_running_loop()
        while True:
            chunk = await loop.run_in_executor(None, data.read, READ_CHUNK_SIZE)
            if not chunk:
                break
            writer.write(chunk)
            await writer.drain()
    elif hasattr(data, "__aiter__"):
        async for chunk in data:
            writer.write(chunk)
            await writer.drain()
    else:
        for chunk in data:
            writer.write(chunk)
            await writer.drain()
    await writer.drain()


def _check_payload(data: Payload) -> None:
    if isinstance(data, (str, bytes, bytearray, memoryview)):
        return
    if hasattr(data, "read") or hasattr(data, "__aiter__") or hasattr(data, "__iter__"):
        return
    raise TypeError(f"Unsupported payload type {type(data).__name__}")


class ZebraFTPClient:
    def __init__(
        self,
        keep_alive: float = DEFAULT_KEEP_ALIVE,
        connection_timeout: float = DEFAULT_CONNECTION_TIMEOUT,
    ) -> None:
        self.keep_alive = keep_alive
        self.connection_timeout = connection_timeout
        self.host: Optional[str] = None
        self.port: Optional[int] = None
        self._reader: Optional[asyncio.StreamReader] = None
        self._writer: Optional[asyncio.StreamWriter] = None
        self._pending: Deque[_Pending] = deque()
        self._reader_task: Optional[asyncio.Task] = None
        self._keep_alive_task: Optional[asyncio.Task] = None
        self._busy = False

    @property
    def connected(self) -> bool:
        return self._writer is not None

    @property
    def busy(self) -> bool:
        return self._busy

    async def __aenter__(self) -> "ZebraFTPClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.disconnect()

    async def connect(
        self, host: str = DEFAULT_HOST, port: int = DEFAULT_FTP_PORT, username: Optional[str] = None
    ) -> FTPReply:
        if self.connected:
            raise FTPError("FTP already connected")
        self.host = host
        self.port = port
        try:
            greeting = await asyncio.wait_for(self._open(host, port), self.connection_timeout)
        except asyncio.TimeoutError:
            self._reset()
            raise FTPTimeoutError(
                f"Exceeded {self.connection_timeout}s timeout while connecting to {host}:{port}"
            ) from None
        except FTPError:
            self._reset()
            raise
        except OSError as exc:
            self._reset()
            raise FTPConnectionError(f"Unable to connect to {host}:{port}: {exc}") from exc
        if username:
            try:
                await self.send(f"USER {username}")
            except FTPError:
                self._reset()
                raise
        if self.keep_alive:
            self._keep_alive_task = asyncio.ensure_future(self._keep_alive_loop())
        return greeting

    async def _open(self, host: str, port: int) -> FTPReply:
        self._reader, self._writer = await asyncio.open_connection(host, port)
        greeting = self._enqueue(GREETING)
        self._reader_task = asyncio.ensure_future(self._read_replies())
        return await greeting

    async def disconnect(self) -> None:
        if self.connected:
            try:
                await self.send("QUIT")
            except FTPError as exc:
                logger.warning("ERR QUIT failed: %s", exc)
        self._reset()

    async def send(self, command: str, on_intermediate: Optional[IntermediateCallback] = None) -> FTPReply:
        """Send one command and wait for its terminal reply.

        1xx replies are passed to ``on_intermediate`` and do not complete the call.
        """
        if not self.connected:
            raise FTPError("FTP not connected")
        command = command.rstrip()
        future = self._enqueue(command, on_intermediate)
        logger.debug("CMD %s", command)
        try:
            self._writer.write(command.encode("utf-8") + b"\r\n")
            await self._writer.drain()
        except OSError as exc:
            self._reset()
            raise FTPConnectionError(f"Failed to send {command}: {exc}") from exc
        return await future

    async def put_data(self, data: Payload, filename: Optional[str] = None) -> FTPReply:
        """Upload data over an active-mode data connection; returns the STOR reply."""
        if not self.connected:
            raise FTPError("FTP not connected")
        if self._busy:
            raise FTPBusyError("An upload is already in progress")
        _check_payload(data)
        self._busy = True
        loop = asyncio.get_running_loop()
        transferred: "asyncio.Future[None]" = loop.create_future()

        async def on_data_connection(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
            if transferred.done():
                writer.close()
                return
            try:
                await _write_payload(writer, data)
                writer.close()
                await writer.wait_closed()
            except (OSError, TypeError) as exc:
                writer.close()
                if not transferred.done():
                    transferred.set_exception(FTPConnectionError(f"Data transfer failed: {exc}"))
                return
            logger.debug("Data connection closed")
            if not transferred.done():
                transferred.set_result(None)

        server: Optional[asyncio.AbstractServer] = None
        stor: Optional[asyncio.Future] = None
        try:
            address = find_local_address(self._peer_address())
            server = await asyncio.start_server(on_data_connection, host=address, port=0)
            data_port = server.sockets[0].getsockname()[1]
            await self.send(f"PORT {port_argument(address, data_port)}")
            await self.send("TYPE I")
            name = filename or f"{int(time.time() * 1000)}.zpl"
            stor = asyncio.ensure_future(self.send(f"STOR {name}"))
            _, reply = await asyncio.gather(transferred, stor)
            return reply
        finally:
            for pending in (transferred, stor):
                if pending is not None and not pending.done():
                    pending.cancel()
            if server is not None:
                server.close()
                await server.wait_closed()
            self._busy = False

    async def put_file(self, path: str) -> FTPReply:
        if not os.path.isfile(path):
            raise FileNotFoundError(f"File not found: {path}")
        with open(path, "rb") as handle:
            return await self.put_data(handle, os.path.basename(path))

    def _peer_address(self) -> str:
        peer = self._writer.get_extra_info("peername") if self._writer else None
        if not peer:
            raise FTPConnectionError("Control connection has no peer address")
        return peer[0]

    def _enqueue(self, command: str, on_intermediate: Optional[IntermediateCallback] = None) -> "asyncio.Future[FTPReply]":
        future = asyncio.get_running_loop().create_future()
        self._pending.append(_Pending(command, future, on_intermediate))
        return future

    async def _read_reply(self) -> Optional[FTPReply]:
        line = await self._reader.readline()
        if not line:
            return None
        text = line.decode("utf-8", errors="replace").rstrip("\r\n")
        match = _REPLY_LINE.match(text)
        if not match:
            raise FTPError(f"Malformed reply: {text!r}")
        code, separator, message = match.groups()
        if separator == "-":
            lines = [message]
            while True:
                line = await self._reader.readline()
                if not line:
                    return None
                text = line.decode("utf-8", errors="replace").rstrip("\r\n")
                if text.startswith(code + " "):
                    lines.append(text[4:])
                    break
                lines.append(text)
            message = "\n".join(lines)
        return FTPReply(int(code), message)

    async def _read_replies(self) -> None:
        try:
            while True:
                reply = await self._read_reply()
                if reply is None:
                    logger.debug("Control connection closed by printer")
                    break
                self._dispatch(reply)
        except (OSError, FTPError) as exc:
            logger.warning("ERR %s", exc)
            if self._pending:
                entry = self._pending.popleft()
                if not entry.future.done():
                    entry.future.set_exception(exc if isinstance(exc, FTPError) else FTPConnectionError(str(exc)))
        self._reset()

    def _dispatch(self, reply: FTPReply) -> None:
        logger.debug("RES > %s", reply)
        if not self._pending:
            logger.warning("Unsolicited reply: %s", reply)
            return
        entry = self._pending[0]
        if reply.intermediate:
            if entry.on_intermediate is None or entry.error is not None:
                return
            try:
                entry.on_intermediate(reply)
            except Exception as exc:
                logger.warning("ERR intermediate reply handler for %s failed: %s", entry.command, exc)
                entry.error = exc
            return
        self._pending.popleft()
        if entry.future.done():
            return
        if entry.error is not None:
            entry.future.set_exception(entry.error)
        elif reply.failed:
            command = None if entry.command == GREETING else entry.command
            entry.future.set_exception(FTPResponseError(reply.status, reply.message, command))
        else:
            entry.future.set_result(reply)

    async def _keep_alive_loop(self) -> None:
        while True:
            await asyncio.sleep(self.keep_alive)
            if self._pending or self._busy:
                continue
            try:
                await self.send("NOOP")
            except FTPError as exc:
                logger.warning("ERR keep-alive failed: %s", exc)
                self._reset()
                return

    def _reset(self) -> None:
        current = asyncio.current_task()
        for task in (self._reader_task, self._keep_alive_task):
            if task is not None and task is not current and not task.done():
                task.cancel()
        if self._writer is not None:
            self._writer.close()
        while self._pending:
            entry = self._pending.popleft()
            if not entry.future.done():
                entry.future.set_exception(FTPConnectionError("FTP connection closed"))
        self._reader = None
        self._writer = None
        self._reader_task = None
        self._keep_alive_task = None
