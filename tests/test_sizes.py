import pytest

from natrep import dense_bits, gap_list, segmented, skew_binary
from natrep.oracle import bit_length_of

VALUES = list(range(10001)) + [2**64 - 1, 2**64, 3**100]


@pytest.mark.parametrize("module", [dense_bits, gap_list])
def test_binary_sizes(module):
    for n in VALUES:
        size = len(module.encode(n))
        if module is dense_bits:
            assert size == bit_length_of(n)
        else:
            assert size == bin(n).count("1")
            assert size <= bit_length_of(n)


def test_skew_size():
    for n in VALUES:
        # one digit per weight plus at most one repeated lowest weight
        assert len(skew_binary.encode(n)) <= bit_length_of(n + 1)


def test_segmented_size():
    for n in VALUES:
        pairs = segmented.runs(segmented.encode(n))
        assert len(pairs) <= bit_length_of(n)
        assert sum(length for _, length in pairs) == bit_length_of(n)
