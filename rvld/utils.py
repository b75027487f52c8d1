"""Shared helpers: fatal errors and little-endian binary reads."""

from __future__ import annotations

import struct
from typing import Any

_BYTE_ORDER_CHARS = "@=<>!"


class FatalError(Exception):
    """Raised when linking cannot continue."""


def read_to(fmt: str, data: bytes | bytearray | memoryview, offset: int = 0) -> Any:
    """Unpack ``fmt`` from ``data`` at ``offset``.

    Formats without an explicit byte order are read little-endian. A single
    field comes back as a plain value, several fields as a tuple.
    """
    if not fmt or fmt[0] not in _BYTE_ORDER_CHARS:
        fmt = "<" + fmt
    size = struct.calcsize(fmt)
    available = max(0, len(data) - offset)
    if available < size:
        raise FatalError(
            f"Not enough data to read type: need {size} bytes, got {available}"
        )
    values = struct.unpack_from(fmt, data, offset)
    return values[0] if len(values) == 1 else values