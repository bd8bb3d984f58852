"""Directory listing and name-keyed reconciliation of two listings.

``reconcile`` partitions two immediate-child listings into names found only on
one side and matched pairs classified by file/directory type.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class Entry:
    """One immediate child of a listed directory."""

    name: str
    is_dir: bool


class PairKind(Enum):
    ONLY_IN_LEFT = "only_in_left"
    ONLY_IN_RIGHT = "only_in_right"
    BOTH_FILES = "both_files"
    BOTH_DIRECTORIES = "both_directories"
    LEFT_DIR_RIGHT_FILE = "left_dir_right_file"
    LEFT_FILE_RIGHT_DIR = "left_file_right_dir"


@dataclass(frozen=True)
class EntryPair:
    """Classification of one name across the two listings.

    For ``ONLY_IN_*`` kinds the path of the missing side is ``None``.
    """

    kind: PairKind
    name: str
    left_path: str | None
    right_path: str | None


def list_entries(directory: str | Path) -> list[Entry]:
    """Return immediate children of ``directory`` in scan order.

    Symlinks are classified by their target; a dangling link is a file.
    ``OSError`` from the scan propagates.
    """
    entries: list[Entry] = []
    with os.scandir(directory) as scanned:
        for child in scanned:
            try:
                is_dir = child.is_dir()
            except OSError:
                is_dir = False
            entries.append(Entry(name=child.name, is_dir=is_dir))
    return entries


def _classify(left: Entry, right: Entry) -> PairKind:
    if left.is_dir and right.is_dir:
        return PairKind.BOTH_DIRECTORIES
    if left.is_dir:
        return PairKind.LEFT_DIR_RIGHT_FILE
    if right.is_dir:
        return PairKind.LEFT_FILE_RIGHT_DIR
    return PairKind.BOTH_FILES


def reconcile(
    left_dir: str | Path,
    left_entries: list[Entry],
    right_dir: str | Path,
    right_entries: list[Entry],
) -> list[EntryPair]:
    """Classify every entry of both listings exactly once.

    Left-side names come first in left listing order, followed by right-only
    names in right listing order. A matched name is consumed even when the
    types disagree, so it is never also reported as right-only.
    """
    right_by_name = {entry.name: entry for entry in right_entries}
    visited: set[str] = set()
    pairs: list[EntryPair] = []

    for left in left_entries:
        right = right_by_name.get(left.name)
        if right is None:
            pairs.append(EntryPair(PairKind.ONLY_IN_LEFT, left.name, os.path.join(left_dir, left.name), None))
            continue
        visited.add(left.name)
        pairs.append(
            EntryPair(
                _classify(left, right),
                left.name,
                os.path.join(left_dir, left.name),
                os.path.join(right_dir, right.name),
            )
        )

    for right in right_entries:
        if right.name in visited:
            continue
        pairs.append(EntryPair(PairKind.ONLY_IN_RIGHT, right.name, None, os.path.join(right_dir, right.name)))

    return pairs


__all__ = [
    "Entry",
    "EntryPair",
    "PairKind",
    "list_entries",
    "reconcile",
]
