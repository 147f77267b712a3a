"""
Utility modules for fuzzion.
"""

from .sequence import (
    complement,
    is_acgt,
    is_all_acgt,
    is_fuzzy_match,
    reverse_complement,
    reverse_sequence,
    uppercase,
)

__all__ = [
    'is_acgt',
    'is_all_acgt',
    'uppercase',
    'reverse_sequence',
    'complement',
    'reverse_complement',
    'is_fuzzy_match',
]
