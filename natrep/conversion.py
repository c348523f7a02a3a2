from __future__ import annotations

import logging
from types import ModuleType

from . import dense_bits, gap_list, segmented, skew_binary
from .errors import UnknownEncodingError, UnsupportedOperationError

__all__ = [
    "ENCODINGS",
    "DEFAULT_ARITHMETIC",
    "OPERATIONS",
    "get_encoding",
    "encoding_of",
    "supports",
    "to_natural",
    "convert",
    "add",
    "multiply",
]

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

ENCODINGS: dict[str, ModuleType] = {
    "dense": dense_bits,
    "gaps": gap_list,
    "skew": skew_binary,
    "segmented": segmented,
}

DEFAULT_ARITHMETIC = "gaps"

_ORACLE = "oracle"

OPERATIONS = frozenset({"encode", "decode", "increment", "add", "multiply"})

_TYPE_TO_NAME = {
    dense_bits.DenseBits: "dense",
    gap_list.GapList: "gaps",
    skew_binary.SkewBinary: "skew",
    segmented.ZeroRun: "segmented",
    segmented.OneRun: "segmented",
}


def get_encoding(name: str) -> ModuleType:
    module = ENCODINGS.get(name)
    if module is None:
        raise UnknownEncodingError(name, sorted(ENCODINGS))
    return module


def encoding_of(value: object) -> str:
    """Name of the encoding *value* belongs to.

    ``None`` is the segmented encoding of zero.
    """
    if value is None:
        return "segmented"
    name = _TYPE_TO_NAME.get(type(value))
    if name is None:
        raise TypeError(f"Not a natural-number representation: {value!r}")
    return name


def supports(name: str, operation: str) -> bool:
    """True if encoding *name* implements *operation* natively."""
    if operation not in OPERATIONS:
        return False
    if name == _ORACLE:
        return True
    return operation in get_encoding(name).__all__

# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------

def to_natural(value: object) -> int:
    return get_encoding(encoding_of(value)).decode(value)


def convert(value: object, target: str):
    """Re-encode *value* (any representation) as encoding *target*."""
    source = encoding_of(value)
    module = get_encoding(target)
    if source == target:
        return value
    logger.debug("converting %s value to %s", source, target)
    return module.encode(to_natural(value))

# ---------------------------------------------------------------------------
# Arithmetic through a capable encoding
# ---------------------------------------------------------------------------

def _binary(operation: str, a: object, b: object, via: str):
    if via != _ORACLE and not supports(via, operation):
        raise UnsupportedOperationError(via, operation)
    result_encoding = encoding_of(a)
    logger.debug("%s of %s values via %s", operation, result_encoding, via)

    if via == _ORACLE:
        x, y = to_natural(a), to_natural(b)
        n = x + y if operation == "add" else x * y
        return get_encoding(result_encoding).encode(n)

    module = get_encoding(via)
    result = getattr(module, operation)(convert(a, via), convert(b, via))
    return convert(result, result_encoding)


def add(a: object, b: object, via: str = DEFAULT_ARITHMETIC):
    """Sum of two representations, encoded like *a*.

    *via* names the encoding that does the work: ``"gaps"``, ``"dense"`` or
    ``"oracle"`` for plain Python integers.
    """
    return _binary("add", a, b, via)


def multiply(a: object, b: object, via: str = DEFAULT_ARITHMETIC):
    """Product of two representations, encoded like *a*."""
    return _binary("multiply", a, b, via)
