"""
Read scanning.

The MatchEngine holds the complete, immutable list of target pairs (each
pair followed by its reverse complement) and evaluates every read against
every pair, producing one Hit per matching pair.
"""

import logging
from concurrent.futures import ProcessPoolExecutor
from itertools import islice
from typing import Iterable, Iterator, List, Sequence, Tuple

from .config import DEFAULT_BATCH_SIZE, DEFAULT_MAX_SUBSTITUTIONS
from .core.target_pair import TargetPair
from .io.output import Hit, ScanStats

logger = logging.getLogger(__name__)

Read = Tuple[str, str]


def _match_batch_worker(batch_data) -> List[Hit]:
    """
    Worker function for parallel scanning.

    This is a module-level function (not a method) so it can be pickled by
    ProcessPoolExecutor.

    Args:
        batch_data: Tuple of (engine, reads)

    Returns:
        Hits for the batch, in read order
    """
    engine, reads = batch_data
    hits = []
    for name, sequence in reads:
        hits.extend(engine.match_read(name, sequence))
    return hits


def _batched(reads: Iterable[Read], batch_size: int) -> Iterator[List[Read]]:
    iterator = iter(reads)
    while True:
        batch = list(islice(iterator, batch_size))
        if not batch:
            return
        yield batch


class MatchEngine:
    """Evaluate reads against a fixed set of target pairs."""

    def __init__(
        self,
        target_pairs: Sequence[TargetPair],
        max_substitutions: int = DEFAULT_MAX_SUBSTITUTIONS,
    ):
        if max_substitutions < 0:
            raise ValueError(f"max_substitutions must be non-negative, got {max_substitutions}")
        self.target_pairs: Tuple[TargetPair, ...] = tuple(target_pairs)
        self.max_substitutions = max_substitutions
        self.stats = ScanStats()

    def __getstate__(self):
        # Workers only need the targets; stats stay in the parent process
        return {
            'target_pairs': self.target_pairs,
            'max_substitutions': self.max_substitutions,
        }

    def __setstate__(self, state):
        self.target_pairs = state['target_pairs']
        self.max_substitutions = state['max_substitutions']
        self.stats = ScanStats()

    def match_read(self, name: str, sequence: str) -> List[Hit]:
        """
        Evaluate one read against every target pair.

        Returns:
            One Hit per matching target pair, in target pair order
        """
        hits = []
        for pair in self.target_pairs:
            match = pair.find_match(sequence, self.max_substitutions)
            if match is not None:
                hits.append(Hit(
                    read_name=name,
                    annotated=pair.render(sequence, match),
                    label=pair.label,
                ))
        return hits

    def scan(self, reads: Iterable[Read]) -> Iterator[Hit]:
        """
        Scan reads in the current process.

        Hits are yielded in read order. Counts are accumulated in
        ``self.stats``.
        """
        for name, sequence in reads:
            hits = self.match_read(name, sequence)
            self.stats.reads += 1
            self.stats.add_hits(hits)
            yield from hits

        self._log_summary()

    def scan_parallel(
        self,
        reads: Iterable[Read],
        threads: int,
        batch_size: int = DEFAULT_BATCH_SIZE,
    ) -> Iterator[Hit]:
        """
        Scan reads using a pool of worker processes.

        Reads are split into batches; results are yielded in submission
        order, so the output matches that of scan(). At most ``threads * 2``
        batches are in flight at a time.
        """
        if threads <= 1:
            yield from self.scan(reads)
            return

        logger.info(f"Scanning with {threads} workers, {batch_size} reads per batch")

        with ProcessPoolExecutor(max_workers=threads) as executor:
            pending = []
            for batch in _batched(reads, batch_size):
                pending.append((len(batch), executor.submit(_match_batch_worker, (self, batch))))
                if len(pending) >= threads * 2:
                    yield from self._collect(*pending.pop(0))

            while pending:
                yield from self._collect(*pending.pop(0))

        self._log_summary()

    def _collect(self, n_reads: int, future) -> List[Hit]:
        hits = future.result()
        self.stats.reads += n_reads
        self.stats.add_hits(hits)
        return hits

    def _log_summary(self) -> None:
        logger.info(f"Processed {self.stats.reads:,} reads")
        logger.info(f"Found {self.stats.total_hits:,} hits for {len(self.stats.hits_by_label)} labels")


def scan_reads(
    target_pairs: Sequence[TargetPair],
    reads: Iterable[Read],
    max_substitutions: int = DEFAULT_MAX_SUBSTITUTIONS,
    threads: int = 1,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> Iterator[Hit]:
    """Convenience wrapper: build a MatchEngine and scan reads with it."""
    engine = MatchEngine(target_pairs, max_substitutions=max_substitutions)
    return engine.scan_parallel(reads, threads=threads, batch_size=batch_size)
