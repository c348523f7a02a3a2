from __future__ import annotations

__all__ = [
    "NatrepError",
    "UnknownEncodingError",
    "UnsupportedOperationError",
]


class NatrepError(ValueError):
    """Base class for errors raised by the conversion layer."""


class UnknownEncodingError(NatrepError):
    """Raised when an encoding name is not in the registry."""

    def __init__(self, name: str, known: list[str]):
        self.name = name
        self.known = known
        super().__init__(
            f"Unknown encoding: {name!r} (expected one of {', '.join(known)})"
        )


class UnsupportedOperationError(NatrepError):
    """Raised when an encoding has no implementation of *operation*."""

    def __init__(self, encoding: str, operation: str):
        self.encoding = encoding
        self.operation = operation
        super().__init__(f"Encoding {encoding!r} does not support {operation}")
