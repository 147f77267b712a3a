"""
Core matching modules for fuzzion.
"""

from .target import (
    MIN_TARGET_LENGTH,
    Target,
    TargetMatch,
    TargetSpecError,
)
from .target_pair import (
    PairMatch,
    TargetPair,
    highlight,
)

__all__ = [
    # Targets
    'MIN_TARGET_LENGTH',
    'Target',
    'TargetMatch',
    'TargetSpecError',
    # Target pairs
    'PairMatch',
    'TargetPair',
    'highlight',
]
