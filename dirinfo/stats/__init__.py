from .histogram import KB, MB, BucketWidth, parse_bucket_width, size_distribution, size_distribution_by_depth
from .queries import count, count_by_depth, deepest_depth, readable_sizes, select, size_by_depth, total_size

__all__ = [
    "KB",
    "MB",
    "BucketWidth",
    "parse_bucket_width",
    "size_distribution",
    "size_distribution_by_depth",
    "count",
    "count_by_depth",
    "deepest_depth",
    "readable_sizes",
    "select",
    "size_by_depth",
    "total_size",
]
