"""Byte-exact file comparison.

Sizes are compared first so files of different length are never read.
Equal-sized files are read in lock-step chunks, stopping at the first mismatch.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import BinaryIO

CHUNK_SIZE = 4 * 1024


def _read_chunk(stream: BinaryIO, chunk_size: int) -> bytes:
    """Read up to ``chunk_size`` bytes, retrying short reads until full or EOF.

    Raw and unbuffered streams may legally return fewer bytes than requested
    before end-of-input; only an empty read marks EOF.
    """
    data = stream.read(chunk_size)
    if not data or len(data) == chunk_size:
        return data
    parts = [data]
    remaining = chunk_size - len(data)
    while remaining > 0:
        more = stream.read(remaining)
        if not more:
            break
        parts.append(more)
        remaining -= len(more)
    return b"".join(parts)


def streams_equal(stream_a: BinaryIO, stream_b: BinaryIO, chunk_size: int = CHUNK_SIZE) -> bool:
    """Return whether two binary streams yield identical bytes.

    Reading stops as soon as one chunk differs, so at most one mismatching
    chunk is consumed from each stream.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be >= 1")

    while True:
        chunk_a = _read_chunk(stream_a, chunk_size)
        chunk_b = _read_chunk(stream_b, chunk_size)

        if not chunk_a and not chunk_b:
            return True
        # One side ended early; possible if a file changed after the size check.
        if not chunk_a or not chunk_b:
            return False
        if len(chunk_a) != len(chunk_b):
            return False
        if chunk_a != chunk_b:
            return False


def files_equal(path_a: str | Path, path_b: str | Path, chunk_size: int = CHUNK_SIZE) -> bool:
    """Compare two files byte for byte.

    Both handles are opened before sizing so a missing second file fails even
    when the first one is empty. ``OSError`` from open/stat/read propagates.
    """
    with open(path_a, "rb") as file_a, open(path_b, "rb") as file_b:
        if os.fstat(file_a.fileno()).st_size != os.fstat(file_b.fileno()).st_size:
            return False
        return streams_equal(file_a, file_b, chunk_size)


__all__ = [
    "CHUNK_SIZE",
    "files_equal",
    "streams_equal",
]
