from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List

from dirinfo.walk.models import Entry
from .queries import deepest_depth, readable_sizes

KB = 1024
MB = 1024 * KB

_BUCKET_RE = re.compile(r"^\s*(\d+)\s*(kb|mb)\s*$", re.IGNORECASE)


@dataclass(frozen=True)
class BucketWidth:
    """Byte span of one histogram bin: 100 KB, 500 KB or a whole number of megabytes."""

    size: int
    label: str

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError("bucket width must be > 0")

    @classmethod
    def kb100(cls) -> "BucketWidth":
        return cls(size=100 * KB, label="100kb")

    @classmethod
    def kb500(cls) -> "BucketWidth":
        return cls(size=500 * KB, label="500kb")

    @classmethod
    def mb(cls, count: int) -> "BucketWidth":
        if count <= 0:
            raise ValueError("megabyte bucket count must be > 0")
        return cls(size=count * MB, label=f"{count}mb")


def parse_bucket_width(value: str) -> BucketWidth:
    match = _BUCKET_RE.match(value or "")
    if not match:
        raise ValueError(f"invalid bucket width: {value!r} (want 100kb, 500kb or <n>mb)")
    amount, unit = int(match.group(1)), match.group(2).lower()
    if unit == "mb":
        return BucketWidth.mb(amount)
    if amount == 100:
        return BucketWidth.kb100()
    if amount == 500:
        return BucketWidth.kb500()
    raise ValueError(f"invalid bucket width: {value!r} (kilobyte buckets are 100kb or 500kb)")


def size_distribution(files: Iterable[Entry], width: BucketWidth) -> List[int]:
    """Count files per half-open size bucket ``[i*width, (i+1)*width)``.

    The result always has ``max_size // width + 1`` slots, so an empty set yields ``[0]``.
    """
    sizes = readable_sizes(files)
    buckets = [0] * (max(sizes, default=0) // width.size + 1)
    for size in sizes:
        buckets[size // width.size] += 1
    return buckets


def size_distribution_by_depth(files: Iterable[Entry], width: BucketWidth) -> List[List[int]]:
    """One size histogram per depth 1..deepest; every row has the same length."""
    files = list(files)
    slots = max(readable_sizes(files), default=0) // width.size + 1
    rows = [[0] * slots for _ in range(deepest_depth(files))]
    for entry in files:
        if entry.depth < 1 or entry.size is None:
            continue
        rows[entry.depth - 1][entry.size // width.size] += 1
    return rows
