from __future__ import annotations

from dataclasses import dataclass

from .oracle import check_natural

__all__ = [
    "SkewBinary",
    "encode",
    "encode_by_increment",
    "decode",
    "increment",
]

# ---------------------------------------------------------------------------
# Representation
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SkewBinary:
    """Skew binary number stored as gaps between its non-zero digits.

    Digit *k* has weight ``2**(k+1) - 1``.  With gaps ``x0, x1, x2, ...`` the
    digit positions are::

        p0 = x0
        p1 = p0 + x1
        pi = p(i-1) + 1 + xi        (i >= 2)

    so only the two lowest positions may coincide: at most one digit is 2 and
    it is the lowest non-zero one.  Build values with :func:`encode` or
    :func:`increment` only.
    """

    digits: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        digits = tuple(self.digits)
        for d in digits:
            check_natural(d, "digit gap")
        object.__setattr__(self, "digits", digits)

    def __len__(self) -> int:
        return len(self.digits)


def _weight(k: int) -> int:
    return (2 << k) - 1

# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------

def encode(n: int) -> SkewBinary:
    """Skew binary digits of *n* by greedy extraction of the largest weight."""
    n = check_natural(n)
    positions = []
    k = max(n.bit_length() - 1, 0)
    while n:
        while _weight(k) > n:
            k -= 1
        n -= _weight(k)
        positions.append(k)
    positions.reverse()

    digits = []
    for i, p in enumerate(positions):
        if i == 0:
            digits.append(p)
        elif i == 1:
            digits.append(p - positions[0])
        else:
            digits.append(p - positions[i - 1] - 1)
    return SkewBinary(tuple(digits))


def encode_by_increment(n: int) -> SkewBinary:
    """Reference encoder: *n* increments starting from zero."""
    value = SkewBinary()
    for _ in range(check_natural(n)):
        value = increment(value)
    return value


def decode(value: SkewBinary) -> int:
    total = 0
    pos = 0
    for i, x in enumerate(value.digits):
        if i == 0:
            pos = x
        elif i == 1:
            pos += x
        else:
            pos += 1 + x
        total += _weight(pos)
    return total

# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------

def increment(value: SkewBinary) -> SkewBinary:
    """Add one in constant time."""
    d = value.digits
    if not d:
        return SkewBinary((0,))
    if len(d) == 1:
        return SkewBinary((0, d[0]))
    if d[1] == 0:
        # Two equal lowest digits merge into the next weight up.
        return SkewBinary((d[0] + 1,) + d[2:])
    return SkewBinary((0, d[0], d[1] - 1) + d[2:])
