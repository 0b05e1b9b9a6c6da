"""Read-only statistics over classified entries.

Every function here is total: an entry whose size could not be read is left out of
size-based results and nothing raises.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from dirinfo.walk.models import Entry


def select(entries: Iterable[Entry], ext: Optional[str] = None, hidden: Optional[bool] = None) -> List[Entry]:
    out: List[Entry] = []
    for entry in entries:
        if ext is not None and not entry.has_ext(ext):
            continue
        if hidden is not None and entry.hidden != hidden:
            continue
        out.append(entry)
    return out


def readable_sizes(files: Iterable[Entry]) -> List[int]:
    return [entry.size for entry in files if entry.size is not None]


def count(entries: Iterable[Entry], ext: Optional[str] = None, hidden: Optional[bool] = None) -> int:
    return len(select(entries, ext=ext, hidden=hidden))


def total_size(files: Iterable[Entry], ext: Optional[str] = None, hidden: Optional[bool] = None) -> int:
    return sum(readable_sizes(select(files, ext=ext, hidden=hidden)))


def deepest_depth(entries: Iterable[Entry]) -> int:
    return max((entry.depth for entry in entries), default=0)


def count_by_depth(
    entries: Iterable[Entry], ext: Optional[str] = None, hidden: Optional[bool] = None
) -> List[int]:
    """Entries per depth, index ``depth - 1``; depth 0 is not part of the array.

    The array is sized by the deepest of all ``entries`` before filtering, so results for
    different ``ext``/``hidden`` filters over the same kind line up index for index.
    """
    entries = list(entries)
    selected = select(entries, ext=ext, hidden=hidden)
    counts = [0] * deepest_depth(entries)
    for entry in selected:
        if entry.depth >= 1:
            counts[entry.depth - 1] += 1
    return counts


def size_by_depth(
    files: Iterable[Entry], ext: Optional[str] = None, hidden: Optional[bool] = None
) -> List[int]:
    """Byte totals per depth, indexed and sized like :func:`count_by_depth`."""
    files = list(files)
    selected = select(files, ext=ext, hidden=hidden)
    totals = [0] * deepest_depth(files)
    for entry in selected:
        if entry.depth >= 1 and entry.size is not None:
            totals[entry.depth - 1] += entry.size
    return totals
