"""ELF64 header, section header and symbol records."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from rvld.utils import FatalError, read_to

_ELF_HDR_FORMAT = "<16sHHIQQQIHHHHHH"
_SECTION_HDR_FORMAT = "<IIQQQQIIQQ"
_SYM_FORMAT = "<IBBHQQ"

ELF_HDR_SIZE = struct.calcsize(_ELF_HDR_FORMAT)
SECTION_HDR_SIZE = struct.calcsize(_SECTION_HDR_FORMAT)
SYM_SIZE = struct.calcsize(_SYM_FORMAT)


@dataclass(frozen=True)
class ElfHeader:
    """The ELF file header."""

    ident: bytes
    type_: int
    machine: int
    version: int
    entry: int
    phoff: int
    shoff: int
    flags: int
    ehsize: int
    phentsize: int
    phnum: int
    shentsize: int
    shnum: int
    shstrndx: int

    @classmethod
    def parse(cls, data: bytes | bytearray | memoryview) -> "ElfHeader":
        """Read a header from the start of ``data``."""
        return cls(*read_to(_ELF_HDR_FORMAT, data))


@dataclass(frozen=True)
class SectionHeader:
    """One entry of the section header table."""

    name: int
    type_: int
    flags: int
    addr: int
    offset: int
    size: int
    link: int
    info: int
    addralign: int
    entsize: int

    @classmethod
    def parse(cls, data: bytes | bytearray | memoryview) -> "SectionHeader":
        """Read a section header from the start of ``data``."""
        return cls(*read_to(_SECTION_HDR_FORMAT, data))


@dataclass(frozen=True)
class Sym:
    """One entry of a symbol table."""

    name: int
    info: int
    other: int
    shndx: int
    val: int
    size: int

    @classmethod
    def parse(cls, data: bytes | bytearray | memoryview) -> "Sym":
        """Read a symbol from the start of ``data``."""
        return cls(*read_to(_SYM_FORMAT, data))


def elf_get_name(str_tab: bytes | bytearray | memoryview, offset: int) -> str:
    """Return the NUL-terminated string at ``offset`` in a string table."""
    table = bytes(str_tab)
    end = table.find(b"\x00", offset)
    if end < 0:
        raise FatalError(f"unterminated string at offset {offset} in string table")
    return table[offset:end].decode("utf-8")