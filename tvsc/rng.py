"""Pseudo-random values drawn from a process-wide, seedable engine."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence
from typing import Optional

from tvsc.clock import delay_ms
from tvsc.output import println

_UINT32_MAX = (1 << 32) - 1
_UINT64_MAX = (1 << 64) - 1

_engine: Optional[random.Random] = None


def _get_engine() -> random.Random:
    global _engine
    if _engine is None:
        # Seeded from the operating system's entropy source.
        _engine = random.Random()
    return _engine


def set_seed(seed: int) -> None:
    """Reseed the engine; the seed is taken as an unsigned 32-bit value."""
    _get_engine().seed(seed & _UINT32_MAX)


def initialize_seed() -> None:
    """Make sure the engine exists and is seeded from system entropy."""
    _get_engine()


def generate_entropy() -> int:
    """Return 32 random bits as an unsigned integer."""
    return _get_engine().getrandbits(32)


def _span(minimum: int, maximum: int) -> int:
    span = maximum - minimum
    if span <= 0:
        raise ValueError(f"maximum ({maximum}) must be greater than minimum ({minimum})")
    return span


def generate_random_value(minimum: int = 0, maximum: int = _UINT32_MAX) -> int:
    """Random integer in ``[minimum, maximum)`` built from 32 bits of entropy."""
    span = _span(minimum, maximum)
    return generate_entropy() % span + minimum


def generate_random_value_64(minimum: int = 0, maximum: int = _UINT64_MAX) -> int:
    """Random integer in ``[minimum, maximum)`` built from 64 bits of entropy."""
    span = _span(minimum, maximum)
    bits = (generate_entropy() << 32) | generate_entropy()
    return bits % span + minimum


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print random 64-bit values, one every interval, until stopped."""
    parser = argparse.ArgumentParser(
        prog="tvsc-random", description="Print random unsigned 64-bit values."
    )
    parser.add_argument(
        "--count", type=int, default=None, help="stop after this many values"
    )
    parser.add_argument(
        "--delay-ms", type=int, default=500, help="pause between values in milliseconds"
    )
    args = parser.parse_args(argv)
    if args.count is not None and args.count < 0:
        parser.error("--count must be non-negative")
    if args.delay_ms < 0:
        parser.error("--delay-ms must be non-negative")

    initialize_seed()
    printed = 0
    try:
        while args.count is None or printed < args.count:
            println(generate_random_value_64())
            printed += 1
            if args.count is None or printed < args.count:
                delay_ms(args.delay_ms)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())