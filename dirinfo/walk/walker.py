from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass, field
from typing import FrozenSet, Iterator, List, Optional, Tuple

from dirinfo.util.cancel import CancelToken, CanceledError
from dirinfo.util.path import expand_home
from .models import DIRECTORY, FILE, SYMLINK, Entry, EntryKind, InvalidRootError, WalkError

logger = logging.getLogger(__name__)


@dataclass
class WalkOptions:
    max_depth: Optional[int] = None
    skip_dir_names: FrozenSet[str] = field(default_factory=frozenset)
    signal: Optional[CancelToken] = None


def default_walk_options() -> WalkOptions:
    return WalkOptions()


def walk_tree(root: str, opts: WalkOptions | None = None) -> Tuple[List[Entry], List[WalkError]]:
    """Walk ``root`` depth-first and return every visited entry plus per-entry failures.

    The root itself is not an entry: its children sit at depth 0. Directories reached
    through a symlink are recorded as symlinks and never descended into. Only a root
    that is missing, not a directory, or unlistable raises (``InvalidRootError``).
    """
    if opts is None:
        opts = default_walk_options()
    if opts.max_depth is not None and opts.max_depth < 0:
        raise ValueError("max_depth must be >= 0")

    base = expand_home(root)
    if not base:
        raise InvalidRootError(root)
    try:
        st = os.stat(base)
    except OSError as err:
        raise InvalidRootError(root, err) from err
    if not stat.S_ISDIR(st.st_mode):
        raise InvalidRootError(root)
    try:
        children = _scan(base)
    except OSError as err:
        raise InvalidRootError(root, err) from err

    entries: List[Entry] = []
    errors: List[WalkError] = []
    signal = opts.signal
    # Each frame: remaining children of one directory, their depth, and the directory path.
    stack: List[Tuple[Iterator[os.DirEntry], int, str]] = [(iter(children), 0, base)]

    while stack:
        pending, depth, dir_path = stack[-1]
        if signal is not None and signal.is_cancelled():
            cause = signal.reason or CanceledError("canceled")
            # Frames hold the depth of the children; the error belongs to the directory itself.
            errors.append(WalkError(path=dir_path, depth=max(depth - 1, 0), cause=cause))
            logger.warning("walk canceled at %s: %s", dir_path, cause)
            break

        item = next(pending, None)
        if item is None:
            stack.pop()
            continue

        entry = _visit(item, depth, errors)
        if entry is None:
            continue
        entries.append(entry)
        if entry.kind != DIRECTORY:
            continue
        if entry.name in opts.skip_dir_names:
            continue
        if opts.max_depth is not None and depth >= opts.max_depth:
            continue

        try:
            grandchildren = _scan(entry.path)
        except OSError as err:
            _record(errors, entry.path, depth, err)
            continue
        stack.append((iter(grandchildren), depth + 1, entry.path))

    logger.info("walked %s: %d entries, %d errors", base, len(entries), len(errors))
    return entries, errors


def _scan(path: str) -> List[os.DirEntry]:
    with os.scandir(path) as it:
        return list(it)


def _visit(item: os.DirEntry, depth: int, errors: List[WalkError]) -> Optional[Entry]:
    try:
        kind = _kind_of(item)
    except OSError as err:
        _record(errors, item.path, depth, err)
        return None
    if kind is None:
        try:
            os.lstat(item.path)
        except OSError as err:
            _record(errors, item.path, depth, err)
            return None
        logger.debug("skipping special file %s", item.path)
        return None

    size: Optional[int] = None
    if kind == FILE:
        try:
            size = item.stat(follow_symlinks=False).st_size
        except OSError as err:
            # Still a file entry; size-based queries skip it.
            _record(errors, item.path, depth, err)
    return Entry(kind=kind, name=item.name, depth=depth, path=item.path, size=size)


def _kind_of(item: os.DirEntry) -> Optional[EntryKind]:
    if item.is_symlink():
        return SYMLINK
    if item.is_dir(follow_symlinks=False):
        return DIRECTORY
    if item.is_file(follow_symlinks=False):
        return FILE
    return None


def _record(errors: List[WalkError], path: str, depth: int, err: BaseException) -> None:
    errors.append(WalkError(path=path, depth=depth, cause=err))
    logger.warning("cannot read %s: %s", path, err)
