from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from dirinfo import BucketWidth, InvalidRootError, Snapshot, walk
from dirinfo.walk.models import DIRECTORY, FILE, SYMLINK, Entry


def _write(path: Path, size: int) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)


def _sample_tree(root: Path) -> None:
    _write(root / "a.txt", 10)
    _write(root / ".b", 5)
    _write(root / "sub" / "c.log", 20)


def test_sample_tree_statistics(tmp_path) -> None:
    _sample_tree(tmp_path)
    snap = walk(str(tmp_path))

    assert snap.errors == ()
    assert snap.num_files() == 3
    assert snap.total_files_size() == 35
    assert snap.hidden_files_size() == 5
    assert snap.num_hidden_files() == 1
    assert snap.num_directories() == 1
    assert snap.num_hidden_directories() == 0
    assert snap.num_symlinks() == 0
    assert snap.deepest_depth() == 1
    assert snap.files_size_by_ext(".txt") == 10
    assert snap.num_files_by_ext(".txt") == 1
    assert snap.num_files_by_depth() == [1]
    assert snap.files_size_by_depth() == [20]
    assert snap.num_directories_by_depth() == []


def test_partition_counts_match_entries(tmp_path) -> None:
    _sample_tree(tmp_path)
    _write(tmp_path / ".hidden_dir" / "x" / "y.bin", 1)
    if hasattr(os, "symlink"):
        os.symlink(tmp_path / "sub", tmp_path / "sub_link")
    snap = walk(str(tmp_path))

    assert snap.num_files() + snap.num_directories() + snap.num_symlinks() == len(snap.entries)
    assert set(snap.files) | set(snap.directories) | set(snap.symlinks) == set(snap.entries)
    assert snap.num_hidden_directories() == 1


def test_total_size_matches_independent_walk(tmp_path) -> None:
    _sample_tree(tmp_path)
    _write(tmp_path / "deep" / "er" / "est.dat", 1234)
    _write(tmp_path / "deep" / "side.dat", 77)

    expected = 0
    for dirpath, _dirnames, filenames in os.walk(tmp_path):
        for filename in filenames:
            expected += os.lstat(os.path.join(dirpath, filename)).st_size

    assert walk(str(tmp_path)).total_files_size() == expected


def test_extension_is_exact_suffix_match(tmp_path) -> None:
    _write(tmp_path / "archive.tar.gz", 8)
    _write(tmp_path / "notes.TXT", 3)
    snap = walk(str(tmp_path))

    assert snap.num_files_by_ext(".gz") == 1
    assert snap.num_files_by_ext(".tar.gz") == 1
    assert snap.num_files_by_ext(".tar") == 0
    assert snap.files_size_by_ext(".gz") == 8
    assert snap.num_files_by_ext(".txt") == 0


def test_deepest_depth(tmp_path) -> None:
    _write(tmp_path / "top.txt", 1)
    assert walk(str(tmp_path)).deepest_depth() == 0

    _write(tmp_path / "a" / "b" / "file.txt", 1)
    snap = walk(str(tmp_path))
    assert snap.deepest_depth() == 2
    assert snap.deepest_depth_of(DIRECTORY) == 1
    assert snap.deepest_depth_of(SYMLINK) == 0


def test_depth_distributions_are_sized_per_kind(tmp_path) -> None:
    _write(tmp_path / "a" / "b" / "c" / "d.txt", 1)
    _write(tmp_path / "a" / "e.txt", 1)
    _write(tmp_path / "a" / ".h.txt", 1)
    snap = walk(str(tmp_path))

    files = snap.num_files_by_depth()
    dirs = snap.num_directories_by_depth()
    assert len(files) == snap.deepest_depth_of(FILE) == 3
    assert len(dirs) == snap.deepest_depth_of(DIRECTORY) == 2
    assert files == [2, 0, 1]
    assert dirs == [1, 1]
    assert sum(files) == len([f for f in snap.files if f.depth >= 1])
    assert snap.num_symlinks_by_depth() == []


def test_depth_distribution_with_filters(tmp_path) -> None:
    _write(tmp_path / "a" / "x.log", 4)
    _write(tmp_path / "a" / ".y.log", 6)
    _write(tmp_path / "a" / "b" / "z.txt", 9)
    snap = walk(str(tmp_path))

    assert snap.num_files_by_depth(ext=".log") == [2, 0]
    assert snap.files_size_by_depth(ext=".log") == [10, 0]
    assert snap.num_files_by_depth(hidden=True) == [1, 0]
    assert snap.num_files_by_depth(ext=".md") == [0, 0]
    assert snap.files_size_by_depth(hidden=False) == [4, 9]
    assert snap.num_files_by_depth(ext=".txt") == [0, 1]


def test_size_histogram_from_walk(tmp_path) -> None:
    width = BucketWidth.kb100()
    _write(tmp_path / "small", 1)
    _write(tmp_path / "edge", width.size)
    snap = walk(str(tmp_path))
    assert snap.file_size_distribution(width) == [1, 1]
    assert snap.file_size_distribution_by_depth(width) == []


def test_size_histogram_empty_tree(tmp_path) -> None:
    assert walk(str(tmp_path)).file_size_distribution(BucketWidth.mb(1)) == [0]


def test_rewalk_is_idempotent(tmp_path) -> None:
    _sample_tree(tmp_path)
    assert walk(str(tmp_path)).summary() == walk(str(tmp_path)).summary()


def test_queries_skip_unreadable_sizes() -> None:
    entries = [
        Entry(kind=FILE, name="ok.txt", depth=1, path="/r/d/ok.txt", size=10),
        Entry(kind=FILE, name=".gone.txt", depth=1, path="/r/d/.gone.txt", size=None),
        Entry(kind=DIRECTORY, name="d", depth=0, path="/r/d"),
    ]
    snap = Snapshot.finalize("/r", entries, [])

    assert snap.num_files() == 2
    assert snap.total_files_size() == 10
    assert snap.hidden_files_size() == 0
    assert snap.num_hidden_files() == 1
    assert snap.files_size_by_depth() == [10]
    assert snap.file_size_distribution(BucketWidth.kb100()) == [1]


def test_snapshot_is_frozen(tmp_path) -> None:
    snap = walk(str(tmp_path))
    with pytest.raises(FrozenInstanceError):
        snap.root = "/elsewhere"  # type: ignore[misc]
    assert isinstance(snap.entries, tuple)


def test_concurrent_queries_agree(tmp_path) -> None:
    _sample_tree(tmp_path)
    snap = walk(str(tmp_path))
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: snap.summary(), range(32)))
    assert all(result == results[0] for result in results)


def test_walk_invalid_root(tmp_path) -> None:
    with pytest.raises(InvalidRootError):
        walk(str(tmp_path / "missing"))


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_hidden_symlinks(tmp_path) -> None:
    _write(tmp_path / "target.txt", 1)
    os.symlink(tmp_path / "target.txt", tmp_path / ".dotlink")
    os.symlink(tmp_path / "target.txt", tmp_path / "plainlink")
    snap = walk(str(tmp_path))

    assert snap.num_symlinks() == 2
    assert snap.num_hidden_symlinks() == 1


def test_size_histogram_by_depth_with_larger_buckets(tmp_path) -> None:
    _write(tmp_path / "d" / "small.bin", 10)
    _write(tmp_path / "d" / "e" / "mid.bin", 600 * 1024)
    snap = walk(str(tmp_path))

    assert snap.file_size_distribution_by_depth(BucketWidth.kb500()) == [[1, 0], [0, 1]]
    assert snap.file_size_distribution_by_depth(BucketWidth.mb(1)) == [[1], [1]]
