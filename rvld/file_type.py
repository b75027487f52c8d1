"""Classification of input files by their contents."""

from __future__ import annotations

from enum import IntEnum

from rvld.magic import check_magic
from rvld.utils import read_to

ET_REL = 1
ARCHIVE_MAGIC = b"!<arch>\n"


class FileType(IntEnum):
    """Kinds of input file the linker recognises."""

    UNKNOWN = 0
    EMPTY = 1
    OBJECT = 2
    ARCHIVE = 3


def get_file_type(contents: bytes | bytearray | memoryview) -> FileType:
    """Work out what kind of file ``contents`` holds."""
    if len(contents) == 0:
        return FileType.EMPTY

    if check_magic(contents):
        elf_type = read_to("H", contents, 16)
        if elf_type == ET_REL:
            return FileType.OBJECT

    if bytes(contents[: len(ARCHIVE_MAGIC)]) == ARCHIVE_MAGIC:
        return FileType.ARCHIVE
    return FileType.UNKNOWN