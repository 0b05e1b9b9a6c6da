from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from dirinfo.stats import queries
from dirinfo.stats.histogram import BucketWidth, size_distribution, size_distribution_by_depth
from dirinfo.walk.classify import classify
from dirinfo.walk.models import DIRECTORY, FILE, SYMLINK, Entry, EntryKind, WalkError
from dirinfo.walk.walker import WalkOptions, walk_tree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """Immutable result of one walk: the classified entries and the errors met on the way.

    Build it with :func:`walk` (or :meth:`finalize` for entries gathered elsewhere). All
    query methods are pure and safe to call from several threads at once.
    """

    root: str
    entries: Tuple[Entry, ...]
    errors: Tuple[WalkError, ...]
    directories: Tuple[Entry, ...]
    files: Tuple[Entry, ...]
    symlinks: Tuple[Entry, ...]

    @classmethod
    def finalize(cls, root: str, entries: Iterable[Entry], errors: Iterable[WalkError]) -> "Snapshot":
        entries = tuple(entries)
        directories, files, symlinks = classify(entries)
        return cls(
            root=root,
            entries=entries,
            errors=tuple(errors),
            directories=tuple(directories),
            files=tuple(files),
            symlinks=tuple(symlinks),
        )

    def of_kind(self, kind: EntryKind) -> Tuple[Entry, ...]:
        if kind == DIRECTORY:
            return self.directories
        if kind == FILE:
            return self.files
        if kind == SYMLINK:
            return self.symlinks
        return ()

    # sizes

    def total_files_size(self) -> int:
        return queries.total_size(self.files)

    def files_size_by_ext(self, ext: str) -> int:
        return queries.total_size(self.files, ext=ext)

    def hidden_files_size(self) -> int:
        return queries.total_size(self.files, hidden=True)

    # counts

    def num_files(self) -> int:
        return len(self.files)

    def num_files_by_ext(self, ext: str) -> int:
        return queries.count(self.files, ext=ext)

    def num_hidden_files(self) -> int:
        return queries.count(self.files, hidden=True)

    def num_directories(self) -> int:
        return len(self.directories)

    def num_hidden_directories(self) -> int:
        return queries.count(self.directories, hidden=True)

    def num_symlinks(self) -> int:
        return len(self.symlinks)

    def num_hidden_symlinks(self) -> int:
        return queries.count(self.symlinks, hidden=True)

    # depth

    def deepest_depth(self) -> int:
        return queries.deepest_depth(self.files)

    def deepest_depth_of(self, kind: EntryKind) -> int:
        return queries.deepest_depth(self.of_kind(kind))

    def num_files_by_depth(self, ext: Optional[str] = None, hidden: Optional[bool] = None) -> List[int]:
        return queries.count_by_depth(self.files, ext=ext, hidden=hidden)

    def num_directories_by_depth(self, hidden: Optional[bool] = None) -> List[int]:
        return queries.count_by_depth(self.directories, hidden=hidden)

    def num_symlinks_by_depth(self, hidden: Optional[bool] = None) -> List[int]:
        return queries.count_by_depth(self.symlinks, hidden=hidden)

    def files_size_by_depth(self, ext: Optional[str] = None, hidden: Optional[bool] = None) -> List[int]:
        return queries.size_by_depth(self.files, ext=ext, hidden=hidden)

    # histograms

    def file_size_distribution(self, width: BucketWidth) -> List[int]:
        return size_distribution(self.files, width)

    def file_size_distribution_by_depth(self, width: BucketWidth) -> List[List[int]]:
        return size_distribution_by_depth(self.files, width)

    def summary(self) -> Dict[str, object]:
        return {
            "root": self.root,
            "entries": len(self.entries),
            "errors": len(self.errors),
            "files": self.num_files(),
            "hidden_files": self.num_hidden_files(),
            "directories": self.num_directories(),
            "hidden_directories": self.num_hidden_directories(),
            "symlinks": self.num_symlinks(),
            "total_files_size": self.total_files_size(),
            "hidden_files_size": self.hidden_files_size(),
            "deepest_depth": self.deepest_depth(),
        }


def walk(root: str, opts: WalkOptions | None = None) -> Snapshot:
    entries, errors = walk_tree(root, opts)
    snapshot = Snapshot.finalize(root, entries, errors)
    logger.debug(
        "snapshot of %s: %d directories, %d files, %d symlinks",
        root,
        snapshot.num_directories(),
        snapshot.num_files(),
        snapshot.num_symlinks(),
    )
    return snapshot
