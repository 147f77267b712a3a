"""
Labeled pairs of targets.

A TargetPair describes one event (typically a gene fusion): a left Target
that must appear (or must not appear) upstream of a right Target in the
read. Each pair is searched on both strands by also building its reverse
complement.
"""

from dataclasses import dataclass
from typing import List, Optional

from .target import Target, TargetMatch, TargetSpecError


@dataclass(frozen=True)
class PairMatch:
    """Which alternative satisfied each side of a TargetPair, and where.

    A side is None when its Target is an exclusion (nothing was found).
    """
    left: Optional[TargetMatch] = None
    right: Optional[TargetMatch] = None


def highlight(window: str, target: str) -> str:
    """Bracket a matched window, lowercasing bases that differ from the target."""
    bases = [
        base if base == expected else base.lower()
        for base, expected in zip(window, target)
    ]
    return '[' + ''.join(bases) + ']'


@dataclass(frozen=True)
class TargetPair:
    """A labeled left/right pair of targets."""
    label: str
    left: Target
    right: Target

    def __post_init__(self):
        if not self.label:
            raise TargetSpecError(f"missing label before {self.left.to_spec()}")
        if not self.left.want and not self.right.want:
            raise TargetSpecError(f"double negative specified for {self.label}")

    @classmethod
    def from_strings(cls, label: str, left_spec: str, right_spec: str) -> 'TargetPair':
        """
        Build a TargetPair from a label and two target specification strings.

        Raises:
            TargetSpecError: If the label is empty, either specification is
                invalid, or both sides are exclusions
        """
        left = Target.parse(left_spec)
        right = Target.parse(right_spec)
        return cls(label=label, left=left, right=right)

    def reverse_complement(self) -> 'TargetPair':
        """Return the pair as it appears on the opposite strand.

        The sides swap and each is reverse-complemented.
        """
        return TargetPair.from_strings(
            self.label,
            self.right.reverse_complement(),
            self.left.reverse_complement(),
        )

    def find_match(self, read: str, max_substitutions: int) -> Optional[PairMatch]:
        """
        Decide whether this pair occurs in a read.

        When the left side is wanted, the leftmost left match is located
        first and the right side is then searched for after it; the pair
        matches if a right match is found exactly when the right side is
        wanted. When the left side is excluded, the rightmost right match is
        located first and the pair matches only if no left match precedes it.

        Args:
            read: Read sequence
            max_substitutions: Substitutions tolerated per match

        Returns:
            PairMatch describing the matched sides, or None
        """
        if self.left.want:
            right_pad = self.right.min_length if self.right.want else self.right.max_length
            left_match = self.left.find_leftmost(read, right_pad, max_substitutions)
            if left_match is None:
                return None

            right_match = self.right.find_rightmost(read, left_match.end, max_substitutions)
            if (right_match is not None) != self.right.want:
                return None

            return PairMatch(left=left_match, right=right_match)

        right_match = self.right.find_rightmost(read, self.left.max_length, max_substitutions)
        if right_match is None:
            return None

        left_match = self.left.find_leftmost(read, len(read) - right_match.start, max_substitutions)
        if left_match is not None:
            return None

        return PairMatch(right=right_match)

    def render(self, read: str, match: PairMatch) -> str:
        """
        Return the read with the matched targets highlighted.

        Wanted sides are enclosed in brackets, with substituted bases in
        lowercase. Everything else is copied from the read unchanged; when
        the right side is an exclusion, the whole remainder after the left
        match is copied.
        """
        parts: List[str] = []

        initial = match.left.start if self.left.want else match.right.start
        parts.append(read[:initial])

        if self.left.want:
            left = match.left
            parts.append(highlight(read[left.start:left.end], left.sequence))
            next_end = match.right.start if self.right.want else len(read)
            parts.append(read[left.end:next_end])

        if self.right.want:
            right = match.right
            parts.append(highlight(read[right.start:right.end], right.sequence))
            parts.append(read[right.end:])

        return ''.join(parts)

    def __str__(self) -> str:
        return f"{self.label}\t{self.left.to_spec()}\t{self.right.to_spec()}"
