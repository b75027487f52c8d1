import pytest

from rvld.elf_file import ElfFile
from rvld.utils import FatalError


def test_open_reads_contents(tmp_path):
    path = tmp_path / "a.o"
    payload = b"\x7fELF\x02\x01\x01" + bytes(range(50))
    path.write_bytes(payload)
    elf = ElfFile.open(str(path))
    assert elf.contents == payload
    assert elf.name == str(path)


def test_open_accepts_path_objects(tmp_path):
    path = tmp_path / "b.o"
    path.write_bytes(b"abc")
    elf = ElfFile.open(path)
    assert elf.name == str(path)
    assert elf.contents == b"abc"


def test_open_empty_file(tmp_path):
    path = tmp_path / "empty.o"
    path.write_bytes(b"")
    assert ElfFile.open(path).contents == b""


def test_missing_file_is_fatal(tmp_path):
    missing = tmp_path / "nope.o"
    with pytest.raises(FatalError, match="Failed to read file"):
        ElfFile.open(missing)