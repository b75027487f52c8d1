# rvld

`rvld` is the front end of a linker for RISC-V 64-bit ELF programs. It accepts
the command line that a GCC cross toolchain passes to its linker, works out the
target machine, and can read relocatable ELF object files: their section
headers, symbol tables and string tables.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
rvld [options] file...
```

The command first prints the argument list it was given, then the list of
inputs left after option processing.

Supported options:

- `-o FILE`, `-oFILE`, `--output FILE`, `--output=FILE`: output file name
  (default `a.out`)
- `-m elf64lriscv`: select the RISC-V 64-bit emulation; any other value is a
  fatal error
- `-L DIR`, `-LDIR`: add a library search directory
- `-l NAME`, `-lNAME`: record library `NAME` as an input (kept as `-lNAME`)
- `-v`, `--version`: print the version and exit
- `--help`: print usage and exit

Options with names longer than one letter may be written with one dash or two.

These options are accepted and ignored: `--sysroot`, `-static`, `-plugin`,
`-plugin-opt`, `--as-needed`, `--start-group`, `--end-group`, `--hash-style`,
`--build-id`, `-s`, `--no-relax`, `-z`.

Any other argument starting with `-` is a fatal error. If `-m` is not given,
the emulation is taken from the first input file (in order, skipping `-l`
entries) that is a RISC-V 64-bit relocatable ELF object; an input file that
cannot be read is a fatal error. If the emulation is not RISC-V 64-bit at the
end, the command fails with `unknown emulation type`.

Fatal errors are printed to standard error prefixed with `fatal:` and the
command exits with status 1; otherwise it exits with status 0.

## What it does not do

The command stops once the target machine is known. It does not read the
contents of object files beyond their header, does not search library
directories, does not open archives, does not resolve symbols or apply
relocations, and does not write an output file.

## Library use

```python
from rvld.elf_file import ElfFile
from rvld.object_file import ObjectFile
from rvld.elf_structures import elf_get_name

obj = ObjectFile(ElfFile.open("hello.o"))
obj.parse()
for sym in obj.input_file.elf_syms:
    print(elf_get_name(obj.input_file.symbol_strtab, sym.name))
print(obj.describe())
```

Modules:

- `rvld.elf_file.ElfFile` holds a file's name and its whole contents;
  `ElfFile.open(filename)` reads a file from disk.
- `rvld.input_file.InputFile` reads the ELF header and section header table,
  including the extended section count and section-name index, and gives the
  bytes of sections by header or index.
- `rvld.object_file.ObjectFile` wraps an `InputFile`; `parse()` finds the
  symbol table, loads its symbols, the index of the first global symbol and the
  symbol string table; `describe()` returns a readable dump.
- `rvld.elf_structures` has the `ElfHeader`, `SectionHeader` and `Sym`
  records, each with a `parse(data)` class method, and `elf_get_name(str_tab,
  offset)` for reading NUL-terminated names.
- `rvld.file_type.get_file_type(contents)` classifies bytes as `EMPTY`,
  `OBJECT` (ELF relocatable), `ARCHIVE` or `UNKNOWN`.
- `rvld.machine_type.get_machine_type_from_contents(contents)` returns
  `MachineType.RV64` for RISC-V 64-bit object files, `MachineType.NONE`
  otherwise.
- `rvld.magic.check_magic(contents)` tests for the ELF magic number.
- `rvld.context.Context` holds the options parsed by
  `rvld.cli.parse_args(ctx, argv)`.
- `rvld.utils.read_to(fmt, data, offset)` unpacks little-endian values, and
  `rvld.utils.FatalError` is raised for every fatal condition.