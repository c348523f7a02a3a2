from . import dense_bits, gap_list, segmented, skew_binary
from .conversion import (
    ENCODINGS,
    add,
    convert,
    encoding_of,
    get_encoding,
    multiply,
    supports,
    to_natural,
)
from .errors import NatrepError, UnknownEncodingError, UnsupportedOperationError

__all__ = [
    "dense_bits",
    "gap_list",
    "skew_binary",
    "segmented",
    "ENCODINGS",
    "add",
    "convert",
    "encoding_of",
    "get_encoding",
    "multiply",
    "supports",
    "to_natural",
    "NatrepError",
    "UnknownEncodingError",
    "UnsupportedOperationError",
]
