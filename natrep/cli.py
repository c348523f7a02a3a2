"""Print the four encodings side by side for a range of numbers.

Example::

    python -m natrep 16 --encoding skew --encoding segmented
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Sequence

from . import conversion
from .errors import NatrepError
from .segmented import runs

logger = logging.getLogger(__name__)

VERBOSE_ENV = "NATREP_VERBOSE"


def render(value: object) -> str:
    """Short ASCII rendering of any representation."""
    name = conversion.encoding_of(value)
    if name == "dense":
        return str(value)
    if name == "gaps":
        return "[" + ",".join(str(g) for g in value.gaps) + "]"
    if name == "skew":
        return "[" + ",".join(str(d) for d in value.digits) + "]"
    return " ".join(f"{bit}x{length}" for bit, length in runs(value)) or "-"


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="natrep",
        description="Show natural numbers in dense, gap, skew and segmented form",
    )
    parser.add_argument("bounds", type=int, nargs="+", metavar="N",
                        help="STOP, or START STOP (half-open range)")
    parser.add_argument(
        "--encoding",
        action="append",
        choices=sorted(conversion.ENCODINGS),
        help="Encoding to show (repeatable, default: all)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Verify round trips and the increment chain for every row",
    )
    parser.add_argument(
        "--verbose",
        dest="verbose",
        action="store_true",
        default=None,
        help=f"Enable verbose logging (can also set {VERBOSE_ENV}=1)",
    )
    parser.add_argument(
        "--quiet",
        dest="verbose",
        action="store_false",
        help="Disable verbose logging",
    )
    args = parser.parse_args(argv)

    if len(args.bounds) == 1:
        args.start, args.stop = 0, args.bounds[0]
    elif len(args.bounds) == 2:
        args.start, args.stop = args.bounds
    else:
        parser.error("expected STOP or START STOP")
    if args.start < 0 or args.stop < args.start:
        parser.error("range must satisfy 0 <= START <= STOP")

    if args.verbose is None:
        args.verbose = _env_flag(VERBOSE_ENV)
    if not args.encoding:
        args.encoding = list(conversion.ENCODINGS)
    args.encoding = list(dict.fromkeys(args.encoding))
    return args


def _check_row(name: str, n: int, value: object, previous: dict[str, object]) -> None:
    module = conversion.get_encoding(name)
    if module.decode(value) != n:
        raise NatrepError(f"{name}: decode(encode({n})) != {n}")
    if name in previous and module.increment(previous[name]) != value:
        raise NatrepError(f"{name}: increment(encode({n - 1})) != encode({n})")


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    if args.verbose and not logging.getLogger().handlers:
        logging.basicConfig(level=logging.INFO)

    logger.info("rendering %d..%d as %s", args.start, args.stop,
                ", ".join(args.encoding))
    width = len(str(max(args.stop - 1, 0)))
    previous: dict[str, object] = {}
    try:
        for n in range(args.start, args.stop):
            cells = [f"{n:>{width}}"]
            for name in args.encoding:
                value = conversion.get_encoding(name).encode(n)
                if args.check:
                    _check_row(name, n, value, previous)
                previous[name] = value
                cells.append(f"{name}={render(value)}")
            print(" | ".join(cells))
    except NatrepError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.check:
        logger.info("checked %d values", args.stop - args.start)
    return 0
