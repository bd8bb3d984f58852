"""Exception types raised by the comparison engine.

Usage faults are raised before any file is read. Run faults wrap the first
exception raised by any comparison task and abort the whole run.
"""

from __future__ import annotations

from pathlib import Path


class PathDiffError(Exception):
    """Base class for pathdiff failures."""


class MixedPathTypesError(PathDiffError):
    """Raised when one root path is a file and the other a directory."""

    def __init__(self, path_a: str | Path, path_b: str | Path) -> None:
        super().__init__("Cannot compare between a file and a directory.")
        self.path_a = path_a
        self.path_b = path_b


class ComparisonAborted(PathDiffError):
    """A comparison task failed and the run was abandoned.

    The original exception is chained as ``__cause__`` and kept on ``error``.
    """

    def __init__(self, error: BaseException) -> None:
        super().__init__(str(error) or type(error).__name__)
        self.error = error


class ComparisonIOError(ComparisonAborted):
    """Raised when stat/open/list/read fails once a comparison has begun."""


class ComparisonFault(ComparisonAborted):
    """Raised when a task fails with anything other than an ``OSError``."""


def abort_error_for(error: BaseException) -> ComparisonAborted:
    """Wrap ``error`` in the run-fault type matching its kind."""
    if isinstance(error, OSError):
        return ComparisonIOError(error)
    return ComparisonFault(error)


__all__ = [
    "PathDiffError",
    "MixedPathTypesError",
    "ComparisonAborted",
    "ComparisonIOError",
    "ComparisonFault",
    "abort_error_for",
]
