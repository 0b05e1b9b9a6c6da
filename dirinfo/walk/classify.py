from __future__ import annotations

from typing import Iterable, List, Tuple

from .models import DIRECTORY, FILE, SYMLINK, Entry


def classify(entries: Iterable[Entry]) -> Tuple[List[Entry], List[Entry], List[Entry]]:
    """Split entries into (directories, files, symlinks), keeping input order in each."""
    directories: List[Entry] = []
    files: List[Entry] = []
    symlinks: List[Entry] = []
    buckets = {DIRECTORY: directories, FILE: files, SYMLINK: symlinks}
    for entry in entries:
        buckets[entry.kind].append(entry)
    return directories, files, symlinks
