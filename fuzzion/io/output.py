"""
Output generation for fuzzion results.
"""

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, TextIO

import logging
import pandas as pd

logger = logging.getLogger(__name__)

FIELD_DELIMITER = '\t'


@dataclass(frozen=True)
class Hit:
    """A read matching one target pair."""
    read_name: str
    annotated: str  # read sequence with matches highlighted
    label: str

    def to_line(self) -> str:
        return FIELD_DELIMITER.join([self.read_name, self.annotated, self.label])


@dataclass
class ScanStats:
    """Counts collected while scanning reads."""
    reads: int = 0
    hits_by_label: Counter = field(default_factory=Counter)

    @property
    def total_hits(self) -> int:
        return sum(self.hits_by_label.values())

    def add_hits(self, hits: Iterable[Hit]) -> None:
        for hit in hits:
            self.hits_by_label[hit.label] += 1

    def to_dict(self) -> Dict[str, int]:
        return dict(self.hits_by_label)


def write_hits(hits: Iterable[Hit], handle: TextIO) -> int:
    """
    Write hits, one tab-delimited line each.

    Returns:
        Number of hits written
    """
    count = 0
    for hit in hits:
        handle.write(hit.to_line() + '\n')
        count += 1
    return count


def write_summary_tsv(stats: ScanStats, output_path: Path) -> Path:
    """
    Write per-label hit counts to TSV.

    Labels are sorted by descending hit count, then by name.

    Args:
        stats: Counts from a completed scan
        output_path: Path for output TSV

    Returns:
        Path to written file
    """
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)

    rows = [
        {'label': label, 'hits': hits}
        for label, hits in sorted(stats.hits_by_label.items(), key=lambda x: (-x[1], x[0]))
    ]

    df = pd.DataFrame(rows, columns=['label', 'hits'])
    df.to_csv(output_path, sep='\t', index=False)

    logger.info(f"Wrote hit counts for {len(rows)} labels to {output_path}")

    return output_path
