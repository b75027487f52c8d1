"""ELF magic number check."""

from __future__ import annotations

ELF_MAGIC = b"\x7fELF"


def check_magic(contents: bytes | bytearray | memoryview) -> bool:
    """Return True when ``contents`` starts with the ELF magic."""
    return bytes(contents[: len(ELF_MAGIC)]) == ELF_MAGIC