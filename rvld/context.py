"""Linker state shared across the run."""

from __future__ import annotations

from dataclasses import dataclass, field

from rvld.machine_type import MachineType


@dataclass
class ContextArgs:
    """Options taken from the command line."""

    output: str = "a.out"
    emulation: MachineType = MachineType.NONE
    library_paths: list[str] = field(default_factory=list)


@dataclass
class Context:
    """Top-level linker context."""

    args: ContextArgs = field(default_factory=ContextArgs)