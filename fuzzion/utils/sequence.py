"""
Sequence manipulation utilities.

Provides the nucleotide alphabet checks, strand transforms and the
substitution-bounded comparison used by the target matchers.
"""

from typing import Dict

VALID_BASES = frozenset('ACGT')

COMPLEMENT: Dict[str, str] = {
    'A': 'T', 'T': 'A', 'C': 'G', 'G': 'C',
    'a': 't', 't': 'a', 'c': 'g', 'g': 'c',
}


def is_acgt(ch: str) -> bool:
    """Return True if the character is A, C, G or T (any case)."""
    return ch.upper() in VALID_BASES


def is_all_acgt(seq: str) -> bool:
    """Return True if every character of the sequence is A, C, G or T."""
    return all(is_acgt(ch) for ch in seq)


def uppercase(seq: str) -> str:
    return seq.upper()


def reverse_sequence(seq: str) -> str:
    return seq[::-1]


def complement(seq: str) -> str:
    """Swap A/T and C/G, preserving case; other characters are unchanged."""
    return ''.join(COMPLEMENT.get(base, base) for base in seq)


def reverse_complement(seq: str) -> str:
    """Return reverse complement of DNA sequence."""
    return complement(reverse_sequence(seq))


def is_fuzzy_match(read: str, start: int, target: str, max_substitutions: int) -> bool:
    """Compare a read window against a target allowing limited substitutions.

    The window is ``read[start:start + len(target)]``; the caller guarantees
    it lies inside the read. Characters are compared exactly, so a lowercase
    read base never equals an uppercase target base.

    Args:
        read: Read sequence
        start: Offset of the window within the read
        target: Target sequence (uppercase)
        max_substitutions: Number of mismatching positions tolerated

    Returns:
        True if at most ``max_substitutions`` positions differ
    """
    substitutions = 0
    for i, base in enumerate(target):
        if read[start + i] != base:
            substitutions += 1
            if substitutions > max_substitutions:
                return False
    return True

