from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, TypeVar

DEFAULT_HOST = "127.0.0.1"
DEFAULT_FTP_PORT = 21
DEFAULT_DPI = 203
DEFAULT_CONNECTION_TIMEOUT = 5.0
DEFAULT_KEEP_ALIVE = 60.0
DEFAULT_LABEL_WIDTH_IN = 2.25
DEFAULT_LABEL_HEIGHT_IN = 1.25

ENV_HOST = "ZEBRA_HOST"
ENV_PORT = "ZEBRA_PORT"
ENV_USER = "ZEBRA_USER"
ENV_DPI = "ZEBRA_DPI"
ENV_LABEL_WIDTH = "ZEBRA_LABEL_WIDTH"
ENV_LABEL_HEIGHT = "ZEBRA_LABEL_HEIGHT"

T = TypeVar("T")


def _parse(env: Mapping[str, str], name: str, convert: Callable[[str], T], default: T) -> T:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return convert(raw.strip())
    except ValueError:
        raise ValueError(f"Invalid value for {name}: {raw!r}") from None


@dataclass(frozen=True)
class PrinterSettings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_FTP_PORT
    username: Optional[str] = None
    dpi: int = DEFAULT_DPI
    label_width_in: float = DEFAULT_LABEL_WIDTH_IN
    label_height_in: float = DEFAULT_LABEL_HEIGHT_IN
    connection_timeout: float = DEFAULT_CONNECTION_TIMEOUT
    keep_alive: float = DEFAULT_KEEP_ALIVE

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "PrinterSettings":
        env = os.environ if env is None else env
        return cls(
            host=env.get(ENV_HOST) or DEFAULT_HOST,
            port=_parse(env, ENV_PORT, int, DEFAULT_FTP_PORT),
            username=env.get(ENV_USER) or None,
            dpi=_parse(env, ENV_DPI, int, DEFAULT_DPI),
            label_width_in=_parse(env, ENV_LABEL_WIDTH, float, DEFAULT_LABEL_WIDTH_IN),
            label_height_in=_parse(env, ENV_LABEL_HEIGHT, float, DEFAULT_LABEL_HEIGHT_IN),
        )
