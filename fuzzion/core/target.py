"""
Target sequence groups.

A Target holds one or more alternative target sequences joined by logical
OR, together with a flag saying whether a read must contain one of them
(``want=True``) or must contain none of them (``want=False``) in the region
being searched.

Specification strings look like ``ACGTACGTAC|GGTTAACCGG`` or, for an
exclusion, ``-ACGTACGTAC``.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..utils.sequence import is_all_acgt, is_fuzzy_match, reverse_complement, uppercase

MIN_TARGET_LENGTH = 8  # a target sequence must be at least this long

EXCLUDE_MARKER = '-'
ALTERNATIVE_DELIMITER = '|'


class TargetSpecError(ValueError):
    """Raised when a target specification cannot be parsed."""


def _check_sequences(sequences: Tuple[str, ...], spec: str) -> None:
    """Raise TargetSpecError unless every alternative is uppercase ACGT of a usable length."""
    if not sequences or min(len(s) for s in sequences) < MIN_TARGET_LENGTH:
        raise TargetSpecError(f"invalid sequence length in {spec}")

    for seq in sequences:
        if seq != uppercase(seq) or not is_all_acgt(seq):
            raise TargetSpecError(f"invalid character in {seq}")


@dataclass(frozen=True)
class TargetMatch:
    """Location of a target sequence within a read.

    Attributes:
        index: Position of the matching alternative in the Target
        start: 0-based start of the match in the read
        sequence: The target sequence that matched
    """
    index: int
    start: int
    sequence: str

    @property
    def length(self) -> int:
        return len(self.sequence)

    @property
    def end(self) -> int:
        """Exclusive end of the match in the read."""
        return self.start + len(self.sequence)


@dataclass(frozen=True)
class Target:
    """One or more target sequences sharing an inclusion/exclusion flag."""
    want: bool
    sequences: Tuple[str, ...]

    def __post_init__(self):
        _check_sequences(self.sequences, self.to_spec())

    @classmethod
    def parse(cls, spec: str) -> 'Target':
        """
        Parse a target specification string.

        The string is uppercased, an optional leading ``-`` marks an
        exclusion, and the remainder is split on ``|``. Empty alternatives
        are kept so that they fail the length check.

        Raises:
            TargetSpecError: If an alternative is too short or contains a
                character other than A, C, G or T
        """
        text = uppercase(spec)

        want = True
        if text.startswith(EXCLUDE_MARKER):
            want = False
            text = text[1:]

        sequences = tuple(text.split(ALTERNATIVE_DELIMITER))
        _check_sequences(sequences, spec)

        return cls(want=want, sequences=sequences)

    @property
    def lengths(self) -> Tuple[int, ...]:
        return tuple(len(s) for s in self.sequences)

    @property
    def min_length(self) -> int:
        """Length of the shortest alternative."""
        return min(self.lengths)

    @property
    def max_length(self) -> int:
        """Length of the longest alternative."""
        return max(self.lengths)

    def to_spec(self) -> str:
        """Return the specification string this Target was parsed from (uppercased)."""
        prefix = '' if self.want else EXCLUDE_MARKER
        return prefix + ALTERNATIVE_DELIMITER.join(self.sequences)

    def reverse_complement(self) -> str:
        """Return the specification string of the opposite strand.

        Each alternative is reverse-complemented in place; the order of the
        alternatives and the exclusion marker are kept.
        """
        prefix = '' if self.want else EXCLUDE_MARKER
        return prefix + ALTERNATIVE_DELIMITER.join(
            reverse_complement(seq) for seq in self.sequences
        )

    def find_leftmost(
        self,
        read: str,
        right_pad: int,
        max_substitutions: int,
    ) -> Optional[TargetMatch]:
        """
        Find the match whose last base lies farthest left in the read.

        Leaves the most room to the right for a partner match. ``right_pad``
        bases at the end of the read are kept free. Each alternative is tried
        in declared order, scanning starts from the left; after a hit the end
        bound is tightened so a later alternative must end strictly earlier
        to replace it.

        Args:
            read: Read sequence
            right_pad: Number of bases reserved at the end of the read
            max_substitutions: Substitutions tolerated per match

        Returns:
            TargetMatch, or None if no alternative matches
        """
        best = None
        match_end = len(read) - right_pad  # exclusive

        for index, seq in enumerate(self.sequences):
            last_start = match_end - len(seq)

            for start in range(0, last_start + 1):
                if is_fuzzy_match(read, start, seq, max_substitutions):
                    best = TargetMatch(index=index, start=start, sequence=seq)
                    match_end = start + len(seq) - 1
                    break

        return best

    def find_rightmost(
        self,
        read: str,
        left_pad: int,
        max_substitutions: int,
    ) -> Optional[TargetMatch]:
        """
        Find the match whose first base lies farthest right in the read.

        Mirror of find_leftmost: ``left_pad`` bases at the start of the read
        are kept free, starts are scanned from the right, and after a hit
        the start bound moves just past it.

        Args:
            read: Read sequence
            left_pad: Number of bases reserved at the start of the read
            max_substitutions: Substitutions tolerated per match

        Returns:
            TargetMatch, or None if no alternative matches
        """
        best = None
        min_start = left_pad  # inclusive

        for index, seq in enumerate(self.sequences):
            first_start = len(read) - len(seq)

            for start in range(first_start, min_start - 1, -1):
                if is_fuzzy_match(read, start, seq, max_substitutions):
                    best = TargetMatch(index=index, start=start, sequence=seq)
                    min_start = start + 1
                    break

        return best

    def __str__(self) -> str:
        return self.to_spec()
