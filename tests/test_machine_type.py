import struct

from rvld.machine_type import EM_RISCV, ELFCLASS64, MachineType, get_machine_type_from_contents


def _object(elf_class=ELFCLASS64, machine=EM_RISCV, elf_type=1):
    ident = b"\x7fELF" + bytes([elf_class, 1, 1]) + b"\x00" * 9
    return ident + struct.pack("<HH", elf_type, machine) + b"\x00" * 44


def test_riscv64_object_detected():
    assert get_machine_type_from_contents(_object()) is MachineType.RV64


def test_32bit_class_is_none():
    assert get_machine_type_from_contents(_object(elf_class=1)) is MachineType.NONE


def test_other_machine_is_none():
    assert get_machine_type_from_contents(_object(machine=62)) is MachineType.NONE


def test_non_relocatable_is_none():
    assert get_machine_type_from_contents(_object(elf_type=2)) is MachineType.NONE


def test_archive_is_none():
    assert get_machine_type_from_contents(b"!<arch>\n") is MachineType.NONE


def test_empty_is_none():
    assert get_machine_type_from_contents(b"") is MachineType.NONE


def test_string_forms():
    assert str(get_machine_type_from_contents(_object())) == "riscv64"
    assert str(get_machine_type_from_contents(b"")) == "none"