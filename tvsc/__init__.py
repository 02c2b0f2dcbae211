"""Buffers, paged ring buffers, clocks, hashing, random values and file readers."""

__version__ = "0.1.0"