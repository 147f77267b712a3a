"""
Target pair file parsing.

Each line of a target file holds three tab-separated columns: label, left
target specification and right target specification. There is no header.
"""

import logging
import sys
from pathlib import Path
from typing import Iterable, List, Union

from ..core.target import TargetSpecError
from ..core.target_pair import TargetPair

logger = logging.getLogger(__name__)

COLUMN_DELIMITER = '\t'
STDIN_PATH = '-'


def parse_target_line(line: str) -> TargetPair:
    """
    Parse one line of a target file.

    Empty columns are kept, so a missing label is reported as such rather
    than shifting the remaining columns.

    Raises:
        TargetSpecError: If the line does not have exactly three columns or
            the target pair is invalid
    """
    line = line.rstrip('\n').rstrip('\r')
    columns = line.split(COLUMN_DELIMITER)

    if len(columns) != 3:
        raise TargetSpecError(f"unexpected #columns in {line}")

    label, left_spec, right_spec = columns
    return TargetPair.from_strings(label, left_spec, right_spec)


def read_target_pairs(lines: Iterable[str]) -> List[TargetPair]:
    """
    Read target pairs, adding the reverse complement of each.

    The returned list holds every pair immediately followed by its reverse
    complement, in file order.

    Args:
        lines: Lines of a target file (e.g. an open text handle)

    Returns:
        List of TargetPair objects

    Raises:
        TargetSpecError: On the first invalid line, or if there are no lines
    """
    target_pairs = []

    for line in lines:
        pair = parse_target_line(line)
        target_pairs.append(pair)
        target_pairs.append(pair.reverse_complement())

    if not target_pairs:
        raise TargetSpecError("no input targets")

    logger.debug(f"Read {len(target_pairs) // 2} target pairs")

    return target_pairs


def load_target_pairs(path: Union[str, Path]) -> List[TargetPair]:
    """Load target pairs from a file, or from stdin when path is '-'."""
    if str(path) == STDIN_PATH:
        logger.info("Reading target pairs from stdin")
        return read_target_pairs(sys.stdin)

    logger.info(f"Reading target pairs from {path}")
    with open(path) as f:
        return read_target_pairs(f)
