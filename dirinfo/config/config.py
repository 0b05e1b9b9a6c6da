from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from dirinfo.stats.histogram import BucketWidth, parse_bucket_width
from dirinfo.util.path import expand_home
from dirinfo.walk.walker import WalkOptions


@dataclass
class Config:
    root: str = "."
    bucket: BucketWidth = field(default_factory=BucketWidth.kb100)
    walk: WalkOptions = field(default_factory=WalkOptions)


def default_config() -> Config:
    return Config()


def load_from_file(file_path: str) -> Config:
    if not file_path:
        raise ValueError("path is empty")
    raw = Path(file_path).read_text(encoding="utf-8")
    data = json.loads(raw)
    return Config(
        root=str(data.get("root", ".")),
        bucket=parse_bucket_width(str(data.get("bucket", "100kb"))),
        walk=WalkOptions(
            max_depth=_optional_int(data.get("max_depth")),
            skip_dir_names=frozenset(str(name) for name in data.get("skip_dir_names", [])),
        ),
    )


def apply_env_overrides(cfg: Config, environ: Mapping[str, str] | None = None) -> Config:
    if environ is None:
        environ = os.environ
    if environ.get("DIRINFO_ROOT"):
        cfg.root = environ["DIRINFO_ROOT"]
    if environ.get("DIRINFO_BUCKET"):
        cfg.bucket = parse_bucket_width(environ["DIRINFO_BUCKET"])
    if environ.get("DIRINFO_MAX_DEPTH"):
        cfg.walk.max_depth = _optional_int(environ["DIRINFO_MAX_DEPTH"])
    return cfg


def expand_config_home(cfg: Config) -> Config:
    cfg.root = expand_home(cfg.root)
    return cfg


def _optional_int(value: object) -> Optional[int]:
    if value is None or value == "":
        return None
    depth = int(value)
    if depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {depth}")
    return depth
