"""Relocatable object files."""

from __future__ import annotations

from rvld.elf_file import ElfFile
from rvld.elf_structures import SectionHeader
from rvld.input_file import InputFile

SHT_SYMTAB = 2


class ObjectFile:
    """A relocatable object file and its symbol table."""

    def __init__(self, file: ElfFile) -> None:
        self.input_file = InputFile(file)
        self.symtab_sec_hdr: SectionHeader | None = None

    def parse(self) -> None:
        """Locate the symbol table and load its symbols and names."""
        self.symtab_sec_hdr = self.input_file.find_section_hdr_from_type(SHT_SYMTAB)
        if self.symtab_sec_hdr is None:
            return
        hdr = self.symtab_sec_hdr
        # sh_info of a symbol table is the index of its first global symbol;
        # sh_link is the index of the string table holding symbol names.
        self.input_file.first_global = hdr.info
        self.input_file.fillup_elf_syms(hdr)
        self.input_file.symbol_strtab = self.input_file.get_bytes_from_id(hdr.link)

    def describe(self) -> str:
        """Return a readable dump of the parsed object file."""
        inp = self.input_file
        lines = ["section headers:"]
        lines.extend(f"  {hdr!r}" for hdr in inp.elf_section_hdrs)
        lines.append(f"first global: {inp.first_global}")
        lines.append("symbols:")
        lines.extend(f"  {sym!r}" for sym in inp.elf_syms)
        lines.append(f"symtab section header: {self.symtab_sec_hdr!r}")
        return "\n".join(lines)