import pytest

from natrep.segmented import OneRun, ZeroRun, decode, encode, increment, runs


def test_roundtrip_values():
    for n in range(10001):
        assert decode(encode(n)) == n


def test_first_twenty_increments():
    value = None
    for n in range(20):
        assert decode(value) == n
        value = increment(value)


@pytest.mark.parametrize(
    "n, expected",
    [
        (0, None),
        (1, OneRun(1)),
        (2, ZeroRun(1, OneRun(1))),
        (3, OneRun(2)),
        (4, ZeroRun(2, OneRun(1))),
        (5, OneRun(1, ZeroRun(1, OneRun(1)))),
        (6, ZeroRun(1, OneRun(2))),
    ],
)
def test_encode_small_values(n, expected):
    assert encode(n) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, OneRun(1)),
        (ZeroRun(1, OneRun(2)), OneRun(3)),
        (ZeroRun(2, OneRun(1)), OneRun(1, ZeroRun(1, OneRun(1)))),
        (OneRun(2), ZeroRun(2, OneRun(1))),
        (OneRun(1, ZeroRun(1, OneRun(1))), ZeroRun(1, OneRun(2))),
        (
            OneRun(1, ZeroRun(2, OneRun(1))),
            ZeroRun(1, OneRun(1, ZeroRun(1, OneRun(1)))),
        ),
    ],
)
def test_increment_cases(value, expected):
    result = increment(value)
    assert result == expected
    assert decode(result) == decode(value) + 1


def test_increment_chain_is_canonical():
    value = None
    for n in range(10001):
        assert encode(n) == value
        pairs = runs(value)
        assert all(length >= 1 for _, length in pairs)
        assert all(a[0] != b[0] for a, b in zip(pairs, pairs[1:]))
        if pairs:
            assert pairs[-1][0] == 1
        value = increment(value)


def test_increment_shares_the_upper_runs():
    upper = OneRun(3, ZeroRun(2, OneRun(1)))
    value = ZeroRun(4, upper)
    assert increment(value).tail.tail is upper

    value = OneRun(2, ZeroRun(1, upper))
    assert increment(value).tail.tail is upper.tail


def test_runs_lists_lowest_first():
    assert runs(encode(0b1100111)) == [(1, 3), (0, 2), (1, 2)]
    assert runs(None) == []


@pytest.mark.parametrize(
    "build",
    [
        lambda: OneRun(0),
        lambda: ZeroRun(0, OneRun(1)),
        lambda: ZeroRun(1, None),
        lambda: ZeroRun(1, ZeroRun(1, OneRun(1))),
        lambda: OneRun(1, OneRun(1)),
    ],
)
def test_malformed_runs_rejected(build):
    with pytest.raises(ValueError):
        build()


def test_encode_rejects_negative():
    with pytest.raises(ValueError):
        encode(-1)
