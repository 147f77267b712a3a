"""
I/O modules for fuzzion.
"""

from .output import (
    Hit,
    ScanStats,
    write_hits,
    write_summary_tsv,
)
from .reads import (
    ReadFormat,
    ReadSourceError,
    detect_read_format,
    iter_reads,
)
from .targets import (
    load_target_pairs,
    parse_target_line,
    read_target_pairs,
)

__all__ = [
    'Hit',
    'ScanStats',
    'write_hits',
    'write_summary_tsv',
    'ReadFormat',
    'ReadSourceError',
    'detect_read_format',
    'iter_reads',
    'parse_target_line',
    'read_target_pairs',
    'load_target_pairs',
]
