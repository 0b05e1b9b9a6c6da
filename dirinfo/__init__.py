from .snapshot import Snapshot, walk
from .stats.histogram import BucketWidth, parse_bucket_width
from .util.cancel import CancelToken, CanceledError
from .walk.models import DIRECTORY, FILE, SYMLINK, Entry, EntryKind, InvalidRootError, WalkError
from .walk.walker import WalkOptions, default_walk_options

__all__ = [
    "Snapshot",
    "walk",
    "BucketWidth",
    "parse_bucket_width",
    "CancelToken",
    "CanceledError",
    "DIRECTORY",
    "FILE",
    "SYMLINK",
    "Entry",
    "EntryKind",
    "InvalidRootError",
    "WalkError",
    "WalkOptions",
    "default_walk_options",
]
