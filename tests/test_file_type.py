import struct

import pytest

from rvld.file_type import ET_REL, FileType, get_file_type
from rvld.utils import FatalError


def _elf(elf_type):
    ident = b"\x7fELF\x02\x01\x01" + b"\x00" * 9
    return ident + struct.pack("<HH", elf_type, 243) + b"\x00" * 44


def test_empty_file():
    assert get_file_type(b"") is FileType.EMPTY


def test_relocatable_object():
    assert get_file_type(_elf(ET_REL)) is FileType.OBJECT


def test_executable_elf_is_unknown():
    assert get_file_type(_elf(2)) is FileType.UNKNOWN


def test_archive():
    assert get_file_type(b"!<arch>\nmember data") is FileType.ARCHIVE


def test_plain_text_is_unknown():
    assert get_file_type(b"hello world") is FileType.UNKNOWN


def test_elf_magic_without_type_field_is_fatal():
    with pytest.raises(FatalError):
        get_file_type(b"\x7fELF\x02\x01")


def test_detected_types_carry_source_numbering():
    samples = [b"plain", b"", _elf(ET_REL), b"!<arch>\n"]
    assert [get_file_type(s).value for s in samples] == [0, 1, 2, 3]