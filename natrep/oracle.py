from __future__ import annotations

__all__ = [
    "check_natural",
    "bit_length_of",
]


def check_natural(value: object, name: str = "n") -> int:
    """Return *value* unchanged if it is a natural number.

    ``bool`` is rejected even though it subclasses ``int``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative (got {value})")
    return value


def bit_length_of(n: int) -> int:
    """Number of binary digits of *n* (0 for 0)."""
    return check_natural(n).bit_length()
