from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()


def read_bool(value: str) -> bool:
    return value.lower() in ("true", "1", "yes")


DECODE_LENIENT = read_bool(os.getenv("DECODE_LENIENT", "false"))
DECODE_COLLECT_ERRORS = read_bool(os.getenv("DECODE_COLLECT_ERRORS", "false"))

LOG_WITH_COLORS = read_bool(os.getenv("LOG_WITH_COLORS", "false"))
