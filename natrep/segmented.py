from __future__ import annotations

from dataclasses import dataclass

from .oracle import check_natural

__all__ = [
    "ZeroRun",
    "OneRun",
    "Segmented",
    "encode",
    "decode",
    "increment",
    "runs",
]

# ---------------------------------------------------------------------------
# Representation
# ---------------------------------------------------------------------------
#
# A number is a chain of alternating runs, least significant first.  A zero
# run always owns the one run above it; a one run may own the zero run above
# it.  Zero is ``None`` and the chain can never end in zeros, so the encoding
# is canonical.

@dataclass(frozen=True)
class OneRun:
    length: int
    tail: ZeroRun | None = None

    def __post_init__(self) -> None:
        _check_length(self.length)
        if self.tail is not None and not isinstance(self.tail, ZeroRun):
            raise ValueError("a one run can only be followed by a zero run")


@dataclass(frozen=True)
class ZeroRun:
    length: int
    tail: OneRun

    def __post_init__(self) -> None:
        _check_length(self.length)
        if not isinstance(self.tail, OneRun):
            raise ValueError("a zero run must be followed by a one run")


Segmented = ZeroRun | OneRun | None


def _check_length(length: int) -> None:
    if check_natural(length, "run length") < 1:
        raise ValueError("run length must be at least 1")


def runs(value: Segmented) -> list[tuple[int, int]]:
    """Flatten *value* into ``(bit, length)`` pairs, lowest run first."""
    out = []
    node = value
    while node is not None:
        out.append((1 if isinstance(node, OneRun) else 0, node.length))
        node = node.tail
    return out

# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------

def encode(n: int) -> Segmented:
    n = check_natural(n)
    pairs: list[list[int]] = []
    while n:
        bit = n & 1
        if pairs and pairs[-1][0] == bit:
            pairs[-1][1] += 1
        else:
            pairs.append([bit, 1])
        n >>= 1

    node: Segmented = None
    for bit, length in reversed(pairs):
        node = OneRun(length, node) if bit else ZeroRun(length, node)
    return node


def decode(value: Segmented) -> int:
    total = 0
    pos = 0
    for bit, length in runs(value):
        if bit:
            total += ((1 << length) - 1) << pos
        pos += length
    return total

# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------

def increment(value: Segmented) -> Segmented:
    """Add one in constant time.

    Only the lowest one or two runs are rebuilt; everything above them is
    shared with *value*.
    """
    if value is None:
        return OneRun(1)

    if isinstance(value, ZeroRun):
        ones = value.tail
        if value.length == 1:
            return OneRun(ones.length + 1, ones.tail)
        return OneRun(1, ZeroRun(value.length - 1, ones))

    # The low ones all flip to zeros and the carry lands just above them.
    zeros = value.tail
    if zeros is None:
        return ZeroRun(value.length, OneRun(1))
    ones = zeros.tail
    if zeros.length == 1:
        return ZeroRun(value.length, OneRun(ones.length + 1, ones.tail))
    return ZeroRun(value.length, OneRun(1, ZeroRun(zeros.length - 1, ones)))
