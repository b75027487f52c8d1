"""Target machine detection."""

from __future__ import annotations

from enum import IntEnum

from rvld.file_type import FileType, get_file_type
from rvld.utils import read_to

EM_RISCV = 243
ELFCLASS64 = 2


class MachineType(IntEnum):
    """Target machines the linker supports."""

    NONE = 0
    RV64 = 1

    def __str__(self) -> str:
        return "riscv64" if self is MachineType.RV64 else "none"


def get_machine_type_from_contents(contents: bytes | bytearray | memoryview) -> MachineType:
    """Return the machine an object file targets, or NONE."""
    if get_file_type(contents) is FileType.OBJECT:
        machine = read_to("H", contents, 18)
        if machine == EM_RISCV and contents[4] == ELFCLASS64:
            return MachineType.RV64
    return MachineType.NONE