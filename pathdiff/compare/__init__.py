"""Comparison engine: byte equality, directory reconciliation, and scheduling.

``ComparisonScheduler`` drives the other two and is the entry point used by
the CLI; the lower-level helpers are exported for direct use and tests.
"""

from __future__ import annotations

from .content import CHUNK_SIZE, files_equal, streams_equal
from .entries import Entry, EntryPair, PairKind, list_entries, reconcile
from .scheduler import ComparisonScheduler, CompletionBarrier, FaultLatch

__all__ = [
    "CHUNK_SIZE",
    "files_equal",
    "streams_equal",
    "Entry",
    "EntryPair",
    "PairKind",
    "list_entries",
    "reconcile",
    "ComparisonScheduler",
    "CompletionBarrier",
    "FaultLatch",
]
