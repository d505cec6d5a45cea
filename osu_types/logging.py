from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from enum import IntEnum

import osu_types.settings

logger = logging.getLogger("osu_types")

ANSI_ESCAPE_REGEX = re.compile(r"(\x9B|\x1B\[)[0-?]*[ -\/]*[@-~]")


class Ansi(IntEnum):
    # default colours
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37

    # light colours
    GRAY = 90
    LRED = 91
    LGREEN = 92
    LYELLOW = 93
    LBLUE = 94
    LMAGENTA = 95
    LCYAN = 96
    LWHITE = 97

    RESET = 0

    def __repr__(self) -> str:
        return f"\x1b[{self.value}m"


def log(
    msg: str,
    start_color: Ansi | None = None,
    extra: Mapping[str, object] | None = None,
) -> None:
    """\
    Log a message through the package logger, colourised by severity.

    LYELLOW maps to WARNING, LRED to ERROR and anything else to INFO.
    """
    if start_color is Ansi.LYELLOW:
        log_level = logging.WARNING
    elif start_color is Ansi.LRED:
        log_level = logging.ERROR
    else:
        log_level = logging.INFO

    if osu_types.settings.LOG_WITH_COLORS:
        color_prefix = f"{start_color!r}" if start_color is not None else ""
        color_suffix = f"{Ansi.RESET!r}" if start_color is not None else ""
    else:
        msg = ANSI_ESCAPE_REGEX.sub("", msg)
        color_prefix = color_suffix = ""

    logger.log(log_level, f"{color_prefix}{msg}{color_suffix}", extra=extra)
