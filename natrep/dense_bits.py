from __future__ import annotations

import enum
from dataclasses import dataclass

from .oracle import check_natural

__all__ = [
    "Bit",
    "DenseBits",
    "encode",
    "decode",
    "increment",
    "add",
    "multiply",
    "normalize",
]

# ---------------------------------------------------------------------------
# Representation
# ---------------------------------------------------------------------------

class Bit(enum.IntEnum):
    ZERO = 0
    ONE = 1


@dataclass(frozen=True)
class DenseBits:
    """Little-endian list of bits.

    There is no invariant: ``DenseBits(())`` and ``DenseBits((Bit.ZERO,))``
    are different values that both decode to 0.
    """

    bits: tuple[Bit, ...] = ()

    def __post_init__(self) -> None:
        try:
            bits = tuple(Bit(b) for b in self.bits)
        except ValueError as exc:
            raise ValueError(f"Invalid bit in {self.bits!r}") from exc
        object.__setattr__(self, "bits", bits)

    def __len__(self) -> int:
        return len(self.bits)

    def __str__(self) -> str:
        return "".join(str(int(b)) for b in self.bits) or "-"


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------

def encode(n: int) -> DenseBits:
    """Bits of *n*, least significant first (``encode(0)`` is empty)."""
    n = check_natural(n)
    out = []
    while n:
        out.append(Bit(n & 1))
        n >>= 1
    return DenseBits(tuple(out))


def decode(bits: DenseBits) -> int:
    value = 0
    for b in reversed(bits.bits):
        value = (value << 1) | b
    return value


def normalize(bits: DenseBits) -> DenseBits:
    """Drop trailing zero bits."""
    end = len(bits.bits)
    while end and bits.bits[end - 1] is Bit.ZERO:
        end -= 1
    return DenseBits(bits.bits[:end])

# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------

def increment(bits: DenseBits) -> DenseBits:
    """Add one with a ripple carry; trailing zeros of *bits* are kept."""
    out = list(bits.bits)
    for i, b in enumerate(out):
        if b is Bit.ZERO:
            out[i] = Bit.ONE
            return DenseBits(tuple(out))
        out[i] = Bit.ZERO
    out.append(Bit.ONE)
    return DenseBits(tuple(out))


def add(a: DenseBits, b: DenseBits) -> DenseBits:
    """Ripple-carry sum; one extra bit only when a carry leaves the top."""
    width = max(len(a.bits), len(b.bits))
    xs = a.bits + (Bit.ZERO,) * (width - len(a.bits))
    ys = b.bits + (Bit.ZERO,) * (width - len(b.bits))
    out = []
    carry = 0
    for x, y in zip(xs, ys):
        total = x + y + carry
        out.append(Bit(total & 1))
        carry = total >> 1
    if carry:
        out.append(Bit.ONE)
    return DenseBits(tuple(out))


def multiply(a: DenseBits, b: DenseBits) -> DenseBits:
    """Shift-and-add over the one bits of *b*."""
    product = DenseBits()
    for shift, bit in enumerate(b.bits):
        if bit is Bit.ONE:
            product = add(product, DenseBits((Bit.ZERO,) * shift + a.bits))
    return product
