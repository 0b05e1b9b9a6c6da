from .classify import classify
from .models import (
    DIRECTORY,
    ENTRY_KINDS,
    FILE,
    SYMLINK,
    Entry,
    EntryKind,
    InvalidRootError,
    WalkError,
)
from .walker import WalkOptions, default_walk_options, walk_tree

__all__ = [
    "classify",
    "DIRECTORY",
    "ENTRY_KINDS",
    "FILE",
    "SYMLINK",
    "Entry",
    "EntryKind",
    "InvalidRootError",
    "WalkError",
    "WalkOptions",
    "default_walk_options",
    "walk_tree",
]
