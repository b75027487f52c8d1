"""Parsed view of an ELF input file: section headers, string tables, symbols."""

from __future__ import annotations

from rvld.elf_file import ElfFile
from rvld.elf_structures import (
    ELF_HDR_SIZE,
    SECTION_HDR_SIZE,
    SYM_SIZE,
    ElfHeader,
    SectionHeader,
    Sym,
)
from rvld.magic import check_magic
from rvld.utils import FatalError

_SHN_XINDEX = 0xFFFF


class InputFile:
    """An ELF file whose section header table has been read."""

    def __init__(self, file: ElfFile) -> None:
        self.file = file
        self.elf_section_hdrs: list[SectionHeader] = []
        self.elf_syms: list[Sym] = []
        self.first_global: int | None = None
        self.sh_strtab: bytes = b""
        self.symbol_strtab: bytes = b""

        contents = file.contents
        if len(contents) < ELF_HDR_SIZE:
            raise FatalError("File is too small to be a valid ELF file")
        if not check_magic(contents):
            raise FatalError("File is not a valid ELF file")

        ehdr = ElfHeader.parse(contents)
        table = memoryview(contents)[ehdr.shoff:]
        if len(table) < SECTION_HDR_SIZE:
            raise FatalError("File too small for section headers")

        first = SectionHeader.parse(table)
        # With more than 0xff00 sections, e_shnum is 0 and the real count
        # lives in the size field of the first section header.
        num_sections = ehdr.shnum or first.size

        self.elf_section_hdrs.append(first)
        self.elf_section_hdrs.extend(
            SectionHeader.parse(table[i * SECTION_HDR_SIZE:])
            for i in range(1, num_sections)
        )

        shstrndx = first.link if ehdr.shstrndx == _SHN_XINDEX else ehdr.shstrndx
        self.sh_strtab = self.get_bytes_from_id(shstrndx)

    def get_bytes_from_section_hdr(self, section_header: SectionHeader) -> bytes:
        """Return the bytes a section header describes."""
        start = section_header.offset
        end = start + section_header.size
        contents = self.file.contents
        if end > len(contents):
            raise FatalError(f"section header out of range: {end} > {len(contents)}")
        return bytes(contents[start:end])

    def get_bytes_from_id(self, index: int) -> bytes:
        """Return the bytes of the section at ``index``."""
        if not 0 <= index < len(self.elf_section_hdrs):
            raise FatalError(f"section index out of range: {index}")
        return self.get_bytes_from_section_hdr(self.elf_section_hdrs[index])

    def find_section_hdr_from_type(self, type_: int) -> SectionHeader | None:
        """Return the first section header of the given type, if any."""
        return next((h for h in self.elf_section_hdrs if h.type_ == type_), None)

    def fillup_elf_syms(self, section_header: SectionHeader) -> None:
        """Append every symbol held in the given section to ``elf_syms``."""
        data = memoryview(self.get_bytes_from_section_hdr(section_header))
        count = len(data) // SYM_SIZE
        self.elf_syms.extend(Sym.parse(data[i * SYM_SIZE:]) for i in range(count))