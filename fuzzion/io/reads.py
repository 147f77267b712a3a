"""
Read sources.

Yields (read name, read sequence) pairs from alignment files (BAM, SAM,
CRAM) or sequence files (FASTQ, FASTA), using pysam for all formats.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Iterator, Tuple, Union

import pysam

logger = logging.getLogger(__name__)

Read = Tuple[str, str]


class ReadFormat(Enum):
    """Supported read file formats."""
    BAM = 'bam'
    SAM = 'sam'
    CRAM = 'cram'
    FASTX = 'fastx'


ALIGNMENT_MODES = {
    ReadFormat.BAM: 'rb',
    ReadFormat.SAM: 'r',
    ReadFormat.CRAM: 'rc',
}

FASTX_SUFFIXES = ('.fastq', '.fq', '.fasta', '.fa', '.fna')


class ReadSourceError(OSError):
    """Raised when a read file cannot be opened or read."""


def detect_read_format(path: Union[str, Path]) -> ReadFormat:
    """
    Determine the read file format from its name.

    Gzipped FASTQ/FASTA files (``.fastq.gz`` etc.) are recognised; anything
    unrecognised is treated as BAM.
    """
    name = Path(path).name.lower()
    if name.endswith('.gz'):
        name = name[:-3]

    if name.endswith('.sam'):
        return ReadFormat.SAM
    if name.endswith('.cram'):
        return ReadFormat.CRAM
    if name.endswith(FASTX_SUFFIXES):
        return ReadFormat.FASTX
    return ReadFormat.BAM


def _iter_alignment_reads(path: Path, mode: str) -> Iterator[Read]:
    try:
        bam = pysam.AlignmentFile(str(path), mode, check_sq=False)
    except (OSError, ValueError) as e:
        raise ReadSourceError(f"unable to open {path}: {e}") from e

    # Every record is reported, whatever its flags
    with bam:
        try:
            for read in bam.fetch(until_eof=True):
                yield read.query_name, read.query_sequence or ''
        except (OSError, ValueError) as e:
            raise ReadSourceError(f"error reading {path}: {e}") from e


def _iter_fastx_reads(path: Path) -> Iterator[Read]:
    try:
        fastx = pysam.FastxFile(str(path))
    except (OSError, ValueError) as e:
        raise ReadSourceError(f"unable to open {path}: {e}") from e

    with fastx:
        try:
            for entry in fastx:
                yield entry.name, entry.sequence or ''
        except (OSError, ValueError) as e:
            raise ReadSourceError(f"error reading {path}: {e}") from e


def iter_reads(path: Union[str, Path]) -> Iterator[Read]:
    """
    Iterate over the reads in a file.

    Args:
        path: Path to a BAM, SAM, CRAM, FASTQ or FASTA file

    Yields:
        Tuples of (read name, read sequence)

    Raises:
        ReadSourceError: If the file cannot be opened or a record is malformed
    """
    path = Path(path)
    if not path.exists():
        raise ReadSourceError(f"unable to open {path}")

    read_format = detect_read_format(path)
    logger.info(f"Reading {read_format.value.upper()} reads from {path}")

    if read_format is ReadFormat.FASTX:
        yield from _iter_fastx_reads(path)
    else:
        yield from _iter_alignment_reads(path, ALIGNMENT_MODES[read_format])
