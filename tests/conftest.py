"""
Pytest configuration and shared fixtures for fuzzion tests.
"""

import pytest


# =============================================================================
# SHARED TEST DATA
# =============================================================================

FUSION_LEFT = "CTCATCGGGAGGAAATGGAG"   # 20 nt upstream of the breakpoint
FUSION_RIGHT = "GTCCATGAGCTGGAGAAGTC"  # 20 nt downstream of the breakpoint
FUSION_LINE = f"FUSE\t{FUSION_LEFT}\t{FUSION_RIGHT}\n"

# Exact fusion junction with 3 nt flanks on each side
FUSION_READ = "AAA" + FUSION_LEFT + FUSION_RIGHT + "TTT"
FUSION_HIT = "AAA[CTCATCGGGAGGAAATGGAG][GTCCATGAGCTGGAGAAGTC]TTT"

# Short targets for hand-built reads; N never matches a target base
LEFT_8 = "AAAACCCC"
RIGHT_8 = "GGGGTTTT"

# Not each other's reverse complement, so only one strand matches
LEFT_ASYM = "AAAAAAAC"
RIGHT_ASYM = "GGGGGGGT"


def sam_record(name: str, sequence: str, flag: int = 4) -> str:
    """Build an unaligned SAM record line."""
    seq = sequence or '*'
    qual = 'I' * len(sequence) if sequence else '*'
    return f"{name}\t{flag}\t*\t0\t0\t*\t*\t0\t0\t{seq}\t{qual}\n"


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def write_sam(tmp_path):
    """Return a function writing (name, sequence[, flag]) records to a SAM file."""
    def _write(records, filename='reads.sam'):
        path = tmp_path / filename
        with open(path, 'w') as f:
            f.write("@HD\tVN:1.6\tSO:unsorted\n")
            for record in records:
                f.write(sam_record(*record))
        return path
    return _write


@pytest.fixture
def write_targets(tmp_path):
    """Return a function writing target pair lines to a file."""
    def _write(lines, filename='targets.tsv'):
        path = tmp_path / filename
        with open(path, 'w') as f:
            f.write(''.join(lines))
        return path
    return _write
