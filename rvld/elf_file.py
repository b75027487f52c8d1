"""An input file loaded into memory."""

from __future__ import annotations

import os
from dataclasses import dataclass

from rvld.utils import FatalError


@dataclass(frozen=True)
class ElfFile:
    """A file's name together with its full contents."""

    name: str
    contents: bytes

    @classmethod
    def open(cls, filename: str | os.PathLike[str]) -> "ElfFile":
        """Read ``filename`` whole; raise FatalError if it cannot be read."""
        name = os.fspath(filename)
        try:
            with open(name, "rb") as handle:
                contents = handle.read()
        except OSError as exc:
            raise FatalError(f"Failed to read file: {name}") from exc
        return cls(name=name, contents=contents)