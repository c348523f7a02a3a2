import pytest

from natrep.gap_list import GapList, add, decode, encode, increment, multiply


def test_roundtrip_values():
    for n in range(10001):
        assert decode(encode(n)) == n


@pytest.mark.parametrize(
    "n, gaps",
    [
        (0, ()),
        (1, (0,)),
        (2, (1,)),
        (3, (0, 0)),
        (4, (2,)),
        (5, (0, 1)),
        (12, (2, 0)),
        (2**20, (20,)),
    ],
)
def test_encode_counts_zero_runs(n, gaps):
    assert encode(n) == GapList(gaps)


def test_increment_of_zero_is_one():
    one = increment(GapList())
    assert one == GapList((0,))
    assert decode(one) == 1


@pytest.mark.parametrize(
    "gaps, expected",
    [
        ((0,), (1,)),                 # carry out of a single one bit
        ((0, 0, 0), (3,)),            # carry through a run of ones
        ((0, 2), (1, 1)),
        ((3,), (0, 2)),               # head > 0 stops immediately
        ((1, 4, 0), (0, 0, 4, 0)),
    ],
)
def test_increment_cases(gaps, expected):
    result = increment(GapList(gaps))
    assert result == GapList(expected)
    assert decode(result) == decode(GapList(gaps)) + 1


def test_increment_chain_is_canonical():
    value = GapList()
    for n in range(10001):
        assert decode(value) == n
        assert encode(decode(value)) == value
        value = increment(value)


def test_add_and_multiply():
    values = list(range(40)) + [255, 256, 1023, 4097, 2**70 + 5]
    for a in values:
        for b in values:
            assert add(encode(a), encode(b)) == encode(a + b)
            assert multiply(encode(a), encode(b)) == encode(a * b)


def test_add_with_long_carry():
    assert add(encode(2**16 - 1), encode(1)) == GapList((16,))


@pytest.mark.parametrize("bad", [(-1,), (0, -2)])
def test_negative_gaps_rejected(bad):
    with pytest.raises(ValueError):
        GapList(bad)


def test_values_are_immutable():
    value = encode(9)
    with pytest.raises(AttributeError):
        value.gaps = ()
    increment(value)
    assert value == encode(9)


def test_increment_long_run_of_ones():
    n = 2**5000 - 1
    value = encode(n)
    assert len(value) == 5000
    result = increment(value)
    assert result == GapList((5000,))
    assert decode(result) == 2**5000


def test_increment_carry_stops_at_first_zero_bit():
    n = (2**3000 - 1) | (1 << 3005)
    assert increment(encode(n)) == encode(n + 1)
