"""Tests for fuzzion.core.target module."""

import pytest
from fuzzion.core.target import MIN_TARGET_LENGTH, Target, TargetMatch, TargetSpecError


class TestTargetParse:
    """Test parsing of target specification strings."""

    def test_single_sequence(self):
        """Test a single wanted sequence."""
        target = Target.parse("ACGTACGTAC")
        assert target.want is True
        assert target.sequences == ("ACGTACGTAC",)

    def test_lowercase_is_uppercased(self):
        """Test sequences are stored uppercase."""
        target = Target.parse("acgtACGTac")
        assert target.sequences == ("ACGTACGTAC",)

    def test_exclusion_marker(self):
        """Test a leading '-' marks an exclusion."""
        target = Target.parse("-ACGTACGT")
        assert target.want is False
        assert target.sequences == ("ACGTACGT",)

    def test_alternatives_keep_order(self):
        """Test '|' separates alternatives in declared order."""
        target = Target.parse("GGGGTTTTAA|ACGTACGT|CCCCAAAAC")
        assert target.sequences == ("GGGGTTTTAA", "ACGTACGT", "CCCCAAAAC")
        assert target.lengths == (10, 8, 9)
        assert target.min_length == 8
        assert target.max_length == 10

    def test_minimum_length_accepted(self):
        """Test an 8 nt sequence is accepted."""
        assert MIN_TARGET_LENGTH == 8
        Target.parse("ACGTACGT")

    def test_too_short_raises(self):
        """Test a 7 nt sequence is rejected."""
        with pytest.raises(TargetSpecError, match="invalid sequence length in ACGTACG"):
            Target.parse("ACGTACG")

    def test_short_alternative_raises(self):
        """Test any short alternative is rejected."""
        with pytest.raises(TargetSpecError, match="invalid sequence length"):
            Target.parse("ACGTACGTAC|ACGT")

    def test_empty_alternative_raises(self):
        """Test an empty alternative fails the length check."""
        with pytest.raises(TargetSpecError, match="invalid sequence length"):
            Target.parse("ACGTACGTAC|")
        with pytest.raises(TargetSpecError, match="invalid sequence length"):
            Target.parse("ACGTACGTAC||ACGTACGTAC")

    def test_empty_spec_raises(self):
        """Test empty and marker-only specifications are rejected."""
        with pytest.raises(TargetSpecError):
            Target.parse("")
        with pytest.raises(TargetSpecError):
            Target.parse("-")

    def test_invalid_character_raises(self):
        """Test non-ACGT characters are rejected, naming the sequence."""
        with pytest.raises(TargetSpecError, match="invalid character in ACGTNACGT"):
            Target.parse("ACGTACGTAC|acgtnacgt")

    def test_spec_error_is_value_error(self):
        """Test TargetSpecError can be caught as ValueError."""
        with pytest.raises(ValueError):
            Target.parse("ACG")


class TestTargetConstruction:
    """Test building a Target directly from its fields."""

    def test_valid_fields(self):
        target = Target(want=False, sequences=("ACGTACGT", "GGGGTTTTAA"))
        assert target.to_spec() == "-ACGTACGT|GGGGTTTTAA"
        assert target == Target.parse("-ACGTACGT|GGGGTTTTAA")

    def test_no_sequences_raises(self):
        """Test an empty sequences tuple is rejected."""
        with pytest.raises(TargetSpecError, match="invalid sequence length"):
            Target(want=True, sequences=())

    def test_short_sequence_raises(self):
        """Test a 7 nt sequence is rejected."""
        with pytest.raises(TargetSpecError, match="invalid sequence length"):
            Target(want=True, sequences=("ACGTACGTAC", "ACGTACG"))

    @pytest.mark.parametrize("seq", ["acgtacgt", "ACGTNACGT", "ACGT-ACGT"])
    def test_non_uppercase_acgt_raises(self, seq):
        """Test stored sequences must be uppercase A, C, G or T."""
        with pytest.raises(TargetSpecError, match="invalid character"):
            Target(want=True, sequences=(seq,))


class TestTargetReverseComplement:
    """Test strand flipping of targets."""

    def test_single_sequence(self):
        """Test a single sequence is reverse-complemented."""
        assert Target.parse("AAAACCCG").reverse_complement() == "CGGGTTTT"

    def test_alternative_order_kept(self):
        """Test alternatives stay in declared order."""
        target = Target.parse("AAAACCCC|ACGTTTGA")
        assert target.reverse_complement() == "GGGGTTTT|TCAAACGT"

    def test_exclusion_marker_kept(self):
        """Test the exclusion marker is re-emitted."""
        assert Target.parse("-AAAACCCC").reverse_complement() == "-GGGGTTTT"

    def test_involutive(self):
        """Test reverse complement twice restores the specification."""
        spec = "-ACGTTTGA|GGGGTTTTAA|CATCATCATG"
        once = Target.parse(spec).reverse_complement()
        assert Target.parse(once).reverse_complement() == spec

    def test_to_spec(self):
        """Test the canonical specification string."""
        assert Target.parse("-acgtacgt|GGGGTTTT").to_spec() == "-ACGTACGT|GGGGTTTT"


class TestFindLeftmost:
    """Test leftmost search."""

    READ = "NN" + "GGGGTTTT" + "NN" + "AAAACCCC" + "NNNN"

    def test_single_match(self):
        """Test a single alternative is found."""
        match = Target.parse("AAAACCCC").find_leftmost(self.READ, 0, 0)
        assert match == TargetMatch(index=0, start=12, sequence="AAAACCCC")
        assert match.end == 20
        assert match.length == 8

    def test_earliest_ending_alternative_wins(self):
        """Test a later alternative ending earlier replaces an earlier one."""
        match = Target.parse("AAAACCCC|GGGGTTTT").find_leftmost(self.READ, 0, 0)
        assert match.index == 1
        assert match.start == 2

    def test_no_match(self):
        """Test None is returned when nothing matches."""
        assert Target.parse("CATCATCA").find_leftmost(self.READ, 0, 2) is None

    def test_right_pad_limits_search(self):
        """Test the match must end before the reserved tail."""
        read = "NN" + "AAAACCCC" + "NN"
        target = Target.parse("AAAACCCC")
        assert target.find_leftmost(read, 3, 0) is None
        assert target.find_leftmost(read, 2, 0).start == 2

    def test_first_occurrence_of_alternative(self):
        """Test the leftmost occurrence is taken."""
        read = "N" + "AAAACCCC" + "N" + "AAAACCCC"
        assert Target.parse("AAAACCCC").find_leftmost(read, 0, 0).start == 1

    def test_tie_goes_to_first_declared(self):
        """Test alternatives ending at the same offset resolve to the first declared."""
        read = "NN" + "ACGTACGTAC" + "NN"

        match = Target.parse("ACGTACGTAC|GTACGTAC").find_leftmost(read, 0, 0)
        assert (match.index, match.start) == (0, 2)

        match = Target.parse("GTACGTAC|ACGTACGTAC").find_leftmost(read, 0, 0)
        assert (match.index, match.start) == (0, 4)

    def test_substitutions_allowed(self):
        """Test a match with substitutions within the budget."""
        read = "NN" + "AAATCCCC" + "NN"
        target = Target.parse("AAAACCCC")
        assert target.find_leftmost(read, 0, 0) is None
        assert target.find_leftmost(read, 0, 1).start == 2

    def test_read_shorter_than_target(self):
        """Test a short read yields no match."""
        assert Target.parse("AAAACCCC").find_leftmost("AAAA", 0, 2) is None


class TestFindRightmost:
    """Test rightmost search."""

    READ = "NN" + "GGGGTTTT" + "NN" + "AAAACCCC" + "NNNN"

    def test_latest_starting_alternative_wins(self):
        """Test a later alternative starting further right replaces an earlier one."""
        match = Target.parse("GGGGTTTT|AAAACCCC").find_rightmost(self.READ, 0, 0)
        assert match == TargetMatch(index=1, start=12, sequence="AAAACCCC")

    def test_last_occurrence_of_alternative(self):
        """Test the rightmost occurrence is taken."""
        read = "AAAACCCC" + "N" + "AAAACCCC" + "N"
        assert Target.parse("AAAACCCC").find_rightmost(read, 0, 0).start == 9

    def test_left_pad_limits_search(self):
        """Test the match must start at or after the reserved head."""
        read = "NN" + "AAAACCCC" + "NN"
        target = Target.parse("AAAACCCC")
        assert target.find_rightmost(read, 3, 0) is None
        assert target.find_rightmost(read, 2, 0).start == 2

    def test_tie_goes_to_first_declared(self):
        """Test alternatives starting at the same offset resolve to the first declared."""
        read = "NN" + "ACGTACGTAC" + "NN"
        match = Target.parse("ACGTACGT|ACGTACGTAC").find_rightmost(read, 0, 0)
        assert (match.index, match.start) == (0, 2)

    def test_no_match(self):
        """Test None is returned when nothing matches."""
        assert Target.parse("CATCATCA").find_rightmost(self.READ, 0, 2) is None

    def test_read_shorter_than_target(self):
        """Test a short read yields no match."""
        assert Target.parse("AAAACCCC").find_rightmost("AAAA", 0, 2) is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
