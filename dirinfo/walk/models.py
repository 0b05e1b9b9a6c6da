from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from dirinfo.util.path import is_hidden_name


EntryKind = Literal["directory", "file", "symlink"]

DIRECTORY: EntryKind = "directory"
FILE: EntryKind = "file"
SYMLINK: EntryKind = "symlink"

ENTRY_KINDS: tuple[EntryKind, ...] = (DIRECTORY, FILE, SYMLINK)


class InvalidRootError(ValueError):
    def __init__(self, root: str, cause: Optional[BaseException] = None) -> None:
        detail = f": {cause}" if cause else ""
        super().__init__(f"root is not a readable directory: {root}{detail}")
        self.root = root
        self.cause = cause


@dataclass(frozen=True)
class Entry:
    kind: EntryKind
    name: str
    depth: int
    path: str
    # Bytes on disk for files; None for other kinds or when the size could not be read.
    size: Optional[int] = None

    def __post_init__(self) -> None:
        if self.kind not in ENTRY_KINDS:
            raise ValueError(f"unknown entry kind: {self.kind!r}")
        if self.depth < 0:
            raise ValueError(f"depth must be >= 0, got {self.depth}")

    @property
    def hidden(self) -> bool:
        return is_hidden_name(self.name)

    def has_ext(self, ext: str) -> bool:
        return self.name.endswith(ext)


@dataclass(frozen=True)
class WalkError:
    path: str
    depth: int
    cause: BaseException

    @property
    def message(self) -> str:
        return f"{self.path} (depth {self.depth}): {self.cause}"
