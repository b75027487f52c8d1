"""Command-line entry point of the linker."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from rvld.context import Context
from rvld.elf_file import ElfFile
from rvld.machine_type import MachineType, get_machine_type_from_contents
from rvld.utils import FatalError

_VERSION = "0.1.0"

_IGNORED_ARGS = ("sysroot", "plugin", "plugin-opt", "hash-style", "build-id", "z")
_IGNORED_FLAGS = ("static", "as-needed", "start-group", "end-group", "s", "no-relax")


def _spellings(name: str) -> list[str]:
    if len(name) == 1:
        return ["-" + name]
    return ["-" + name, "--" + name]


class _ArgReader:
    """Consumes options from the front of an argument list."""

    def __init__(self, args: Sequence[str]) -> None:
        self.args = list(args)
        self.value = ""

    def __bool__(self) -> bool:
        return bool(self.args)

    def flag(self, name: str) -> bool:
        if self.args[0] in _spellings(name):
            del self.args[0]
            return True
        return False

    def arg(self, name: str) -> bool:
        for opt in _spellings(name):
            if self.args[0] == opt:
                if len(self.args) == 1:
                    raise FatalError(f"option -{name}: argument missing")
                self.value = self.args[1]
                del self.args[:2]
                return True
            prefix = opt + "=" if len(name) > 1 else opt
            if self.args[0].startswith(prefix):
                self.value = self.args[0][len(prefix):]
                del self.args[0]
                return True
        return False

    def pop(self) -> str:
        return self.args.pop(0)


def parse_args(ctx: Context, argv: Sequence[str] | None = None) -> list[str]:
    """Apply command-line options to ``ctx``; return the remaining inputs."""
    if argv is None:
        argv = sys.argv[1:]
    print(list(argv))

    reader = _ArgReader(argv)
    remaining: list[str] = []

    while reader:
        if reader.flag("help"):
            prog = sys.argv[0] if sys.argv and sys.argv[0] else "rvld"
            print(f"usage: {prog} [options] file...")
            raise SystemExit(0)
        if reader.arg("o") or reader.arg("output"):
            ctx.args.output = reader.value
        elif reader.flag("v") or reader.flag("version"):
            print(f"rvld {_VERSION}")
            raise SystemExit(0)
        elif reader.arg("m"):
            if reader.value != "elf64lriscv":
                raise FatalError(f"unknown -m argument: {reader.value}")
            ctx.args.emulation = MachineType.RV64
        elif reader.arg("L"):
            ctx.args.library_paths.append(reader.value)
        elif reader.arg("l"):
            remaining.append(f"-l{reader.value}")
        elif any(reader.arg(n) for n in _IGNORED_ARGS[:1]) or _ignored(reader):
            pass
        else:
            if reader.args[0].startswith("-"):
                raise FatalError(f"unknown command line option: {reader.args[0]}")
            remaining.append(reader.pop())
    return remaining


def _ignored(reader: _ArgReader) -> bool:
    return (
        reader.flag("static")
        or reader.arg("plugin")
        or reader.arg("plugin-opt")
        or reader.flag("as-needed")
        or reader.flag("start-group")
        or reader.flag("end-group")
        or reader.arg("hash-style")
        or reader.arg("build-id")
        or reader.flag("s")
        or reader.flag("no-relax")
        or reader.arg("z")
    )


def _detect_emulation(filenames: Sequence[str]) -> MachineType:
    for filename in filenames:
        if filename.startswith("-"):
            continue
        machine = get_machine_type_from_contents(ElfFile.open(filename).contents)
        if machine is not MachineType.NONE:
            return machine
    return MachineType.NONE


def main(argv: Sequence[str] | None = None) -> int:
    """Run the linker; return the process exit status."""
    ctx = Context()
    try:
        remaining = parse_args(ctx, argv)
        print(remaining)
        if ctx.args.emulation is MachineType.NONE:
            ctx.args.emulation = _detect_emulation(remaining)
        if ctx.args.emulation is not MachineType.RV64:
            raise FatalError("unknown emulation type")
    except FatalError as exc:
        print(f"\x1b[0;1;31mfatal:\x1b[0m {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())