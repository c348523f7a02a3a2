from __future__ import annotations

from dataclasses import dataclass

from .oracle import check_natural

__all__ = [
    "GapList",
    "encode",
    "decode",
    "increment",
    "add",
    "multiply",
]

# ---------------------------------------------------------------------------
# Representation
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GapList:
    """Run lengths of zero bits in front of each one bit.

    ``gaps[0]`` counts the zeros below the lowest one bit and ``gaps[i]`` the
    zeros between one bit *i-1* and one bit *i*.  Zero is the empty tuple, so
    every tuple of naturals is the unique encoding of exactly one number.
    """

    gaps: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        gaps = tuple(self.gaps)
        for g in gaps:
            check_natural(g, "gap")
        object.__setattr__(self, "gaps", gaps)

    def __len__(self) -> int:
        return len(self.gaps)


def _positions(gaps: tuple[int, ...]) -> list[int]:
    """Positions of the one bits, ascending."""
    out = []
    pos = 0
    for g in gaps:
        pos += g
        out.append(pos)
        pos += 1
    return out


def _from_positions(positions: list[int]) -> GapList:
    gaps = []
    prev = -1
    for p in positions:
        gaps.append(p - prev - 1)
        prev = p
    return GapList(tuple(gaps))

# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------

def encode(n: int) -> GapList:
    n = check_natural(n)
    gaps = []
    run = 0
    while n:
        if n & 1:
            gaps.append(run)
            run = 0
        else:
            run += 1
        n >>= 1
    return GapList(tuple(gaps))


def decode(value: GapList) -> int:
    return sum(1 << p for p in _positions(value.gaps))

# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------

def _inc(gaps: tuple[int, ...]) -> tuple[int, ...]:
    # Leading zero gaps are a run of one bits at the front; the carry clears
    # them and lands on the first zero bit above.
    j = 0
    while j < len(gaps) and gaps[j] == 0:
        j += 1
    if j == len(gaps):
        return (j,)
    return (j, gaps[j] - 1) + gaps[j + 1:]


def increment(value: GapList) -> GapList:
    """Add one.

    The carry only walks the run of one bits at the front.
    """
    return GapList(_inc(value.gaps))


def _add_positions(xs: list[int], ys: list[int]) -> list[int]:
    out = []
    i = j = 0
    carry = None
    while i < len(xs) or j < len(ys) or carry is not None:
        candidates = []
        if i < len(xs):
            candidates.append(xs[i])
        if j < len(ys):
            candidates.append(ys[j])
        if carry is not None:
            candidates.append(carry)
        p = min(candidates)

        count = 0
        if i < len(xs) and xs[i] == p:
            i += 1
            count += 1
        if j < len(ys) and ys[j] == p:
            j += 1
            count += 1
        if carry == p:
            carry = None
            count += 1

        if count & 1:
            out.append(p)
        if count > 1:
            carry = p + 1
    return out


def add(a: GapList, b: GapList) -> GapList:
    """Sum of *a* and *b*, computed on the one-bit positions."""
    return _from_positions(_add_positions(_positions(a.gaps), _positions(b.gaps)))


def _shift(gaps: tuple[int, ...], by: int) -> tuple[int, ...]:
    if not gaps:
        return gaps
    return (gaps[0] + by,) + gaps[1:]


def multiply(a: GapList, b: GapList) -> GapList:
    """Shift-and-add: one shifted copy of *a* per one bit of *b*."""
    product: list[int] = []
    for q in _positions(b.gaps):
        product = _add_positions(product, _positions(_shift(a.gaps, q)))
    return _from_positions(product)
