"""
fuzzion - fuzzy matching of target sequence pairs in sequencing reads.

Finds the reads containing two target sequences, or containing one target
sequence and not a second, allowing a limited number of substitutions in
each.
"""

__version__ = "2.0.0"

from .config import ScanConfig
from .core.target import Target, TargetMatch, TargetSpecError
from .core.target_pair import PairMatch, TargetPair
from .engine import MatchEngine, scan_reads
from .io.output import Hit

__all__ = [
    "Target",
    "TargetMatch",
    "TargetSpecError",
    "TargetPair",
    "PairMatch",
    "MatchEngine",
    "scan_reads",
    "ScanConfig",
    "Hit",
    "__version__",
]
