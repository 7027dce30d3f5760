from __future__ import annotations

import argparse
import asyncio
import dataclasses
import logging
import os
import sys
from typing import List, Optional

from ..config import PrinterSettings
from ..label import FontSpec, Label
from ..objects import PngObject, printer_name
from ..protocol import commands
from ..protocol.command_set import CommandSet
from ..rendering.fit import fit_image_to_label
from ..transport.ftp import ZebraFTPClient

TEXT_MARGIN_IN = 0.1
TEXT_FONT = FontSpec("0", 0.25)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Send a label to a Zebra printer over active-mode FTP."
    )
    parser.add_argument("--host", help="Printer address (default: $ZEBRA_HOST or 127.0.0.1)")
    parser.add_argument("--port", type=int, help="Printer FTP port (default: $ZEBRA_PORT or 21)")
    parser.add_argument("--user", help="FTP user name (default: $ZEBRA_USER)")
    parser.add_argument("--dpi", type=int, help="Printer resolution in dots per inch (default: $ZEBRA_DPI or 203)")
    parser.add_argument("--width", type=float, help="Label width in inches (default: $ZEBRA_LABEL_WIDTH)")
    parser.add_argument("--height", type=float, help="Label height in inches (default: $ZEBRA_LABEL_HEIGHT)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log FTP traffic")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--image", metavar="PATH", help="Image to fit to the label and print")
    source.add_argument("--zpl", metavar="PATH", help="ZPL file to send as is")
    source.add_argument("--text", metavar="TEXT", help="Print one line of text")
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace, base: Optional[PrinterSettings] = None) -> PrinterSettings:
    settings = base if base is not None else PrinterSettings.from_env()
    overrides = {
        "host": args.host,
        "port": args.port,
        "username": args.user,
        "dpi": args.dpi,
        "label_width_in": args.width,
        "label_height_in": args.height,
    }
    return dataclasses.replace(settings, **{key: value for key, value in overrides.items() if value is not None})


def _bracketed(command_set: CommandSet) -> bytes:
    return CommandSet().append(commands.START_FORMAT).extend(command_set).append(commands.END_FORMAT).render_bytes()


def build_image_jobs(settings: PrinterSettings, path: str) -> List[bytes]:
    """Set print width, download the fitted image, draw it, then delete it."""
    if not os.path.isfile(path):
        raise FileNotFoundError(f"File not found: {path}")
    width = Label(unit="in", dpi=settings.dpi).print_width(settings.label_width_in)
    png = PngObject(
        fit_image_to_label(path, settings.dpi, settings.label_width_in, settings.label_height_in),
        printer_name(path),
    )
    return [
        width.render_bytes(),
        png.download_bytes(),
        _bracketed(png.draw_commands()),
        png.delete_bytes(),
    ]


def build_text_job(settings: PrinterSettings, text: str) -> bytes:
    label = Label(unit="in", dpi=settings.dpi)
    label.print_width(settings.label_width_in)
    label.text(TEXT_MARGIN_IN, TEXT_MARGIN_IN, text, font=TEXT_FONT)
    return label.render_bytes()


async def send_jobs(settings: PrinterSettings, jobs: List[bytes]) -> None:
    client = ZebraFTPClient(keep_alive=settings.keep_alive, connection_timeout=settings.connection_timeout)
    async with client:
        await client.connect(settings.host, settings.port, settings.username)
        for job in jobs:
            await client.put_data(job)


async def send_file(settings: PrinterSettings, path: str) -> None:
    client = ZebraFTPClient(keep_alive=settings.keep_alive, connection_timeout=settings.connection_timeout)
    async with client:
        await client.connect(settings.host, settings.port, settings.username)
        await client.put_file(path)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        settings = resolve_settings(args)
        if args.zpl:
            asyncio.run(send_file(settings, args.zpl))
        elif args.image:
            asyncio.run(send_jobs(settings, build_image_jobs(settings, args.image)))
        else:
            asyncio.run(send_jobs(settings, [build_text_job(settings, args.text)]))
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
