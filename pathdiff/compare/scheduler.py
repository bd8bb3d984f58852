"""Concurrent fan-out of file and directory comparisons.

Every file pair and (in recursive mode) every common subdirectory pair runs on
its own daemon thread. Each directory call owns a ``CompletionBarrier`` for the
tasks it spawned and returns only once that whole subtree has finished, so the
top-level call waits on a single root task.

The first exception raised by any task is recorded on the run's ``FaultLatch``.
Recording it wakes every barrier, stops further spawning, and makes the
top-level call raise ``ComparisonIOError`` (for an ``OSError``) or
``ComparisonFault`` (for anything else) while abandoning tasks that are still
in flight.
"""

from __future__ import annotations

import logging
import os
import stat
import threading
from collections.abc import Callable
from pathlib import Path

from ..errors import ComparisonAborted, ComparisonIOError, MixedPathTypesError, abort_error_for
from ..report import (
    DIRECTORY,
    FILE,
    CommonSubdirectories,
    FilesDiffer,
    OnlyIn,
    ReportSink,
    TypeMismatch,
)
from .content import CHUNK_SIZE, files_equal
from .entries import PairKind, list_entries, reconcile

logger = logging.getLogger(__name__)


class FaultLatch:
    """Run-wide holder of the first task failure."""

    def __init__(self) -> None:
        self.condition = threading.Condition()
        self.error: BaseException | None = None

    @property
    def tripped(self) -> bool:
        with self.condition:
            return self.error is not None

    def record(self, error: BaseException) -> None:
        """Keep ``error`` if it is the first fault and wake all waiters."""
        with self.condition:
            if self.error is None:
                self.error = error
            self.condition.notify_all()

    def raise_if_tripped(self) -> None:
        with self.condition:
            error = self.error
        if error is not None:
            raise abort_error_for(error) from error


class CompletionBarrier:
    """Counted join for the tasks spawned by one comparison call.

    ``wait`` returns when every ``add`` has a matching ``done`` or when the
    run's latch has recorded a fault.
    """

    def __init__(self, latch: FaultLatch) -> None:
        self._latch = latch
        self._pending = 0

    @property
    def pending(self) -> int:
        with self._latch.condition:
            return self._pending

    def add(self) -> None:
        with self._latch.condition:
            self._pending += 1

    def done(self) -> None:
        with self._latch.condition:
            self._pending -= 1
            if self._pending == 0:
                self._latch.condition.notify_all()

    def wait(self) -> None:
        with self._latch.condition:
            self._latch.condition.wait_for(lambda: self._pending == 0 or self._latch.error is not None)


class ComparisonScheduler:
    """Drives byte comparison and directory reconciliation across threads.

    One scheduler serves one run: its latch is shared by every task spawned
    through it, while barriers are created per call.
    """

    def __init__(
        self,
        sink: ReportSink,
        *,
        recursive: bool = False,
        chunk_size: int = CHUNK_SIZE,
    ) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be >= 1")
        self.sink = sink
        self.recursive = recursive
        self.chunk_size = chunk_size
        self.latch = FaultLatch()

    def _spawn(
        self,
        barrier: CompletionBarrier,
        target: Callable[[str, str], None],
        path_a: str,
        path_b: str,
    ) -> bool:
        """Start ``target(path_a, path_b)`` on a worker thread tracked by ``barrier``.

        Returns ``False`` without spawning once the run has faulted.
        """
        if self.latch.tripped:
            return False

        def run() -> None:
            try:
                target(path_a, path_b)
            except ComparisonAborted:
                # Raised by a nested directory call for a fault already latched.
                pass
            except Exception as exc:
                logger.debug("comparison of %s and %s failed: %r", path_a, path_b, exc)
                self.latch.record(exc)
            finally:
                barrier.done()

        barrier.add()
        worker = threading.Thread(
            target=run,
            name="pathdiff-compare",
            daemon=True,
        )
        try:
            worker.start()
        except RuntimeError as exc:
            barrier.done()
            self.latch.record(exc)
            return False
        return True

    def compare_files(self, path_a: str, path_b: str) -> None:
        """Emit ``FilesDiffer`` when the two files are not byte-identical."""
        if not files_equal(path_a, path_b, self.chunk_size):
            self.sink.emit(FilesDiffer(path_a, path_b))

    def compare_directories(self, path_a: str, path_b: str) -> None:
        """Reconcile two directories and wait for every comparison spawned here.

        Only-in, type-mismatch, and common-subdirectory lines are emitted from
        the calling thread; file pairs and recursive subdirectory pairs run on
        worker threads. Raises ``ComparisonAborted`` if the run faulted.
        """
        path_a = str(path_a)
        path_b = str(path_b)
        left_entries = list_entries(path_a)
        right_entries = list_entries(path_b)
        barrier = CompletionBarrier(self.latch)

        for pair in reconcile(path_a, left_entries, path_b, right_entries):
            if self.latch.tripped:
                break
            kind = pair.kind
            if kind is PairKind.ONLY_IN_LEFT:
                self.sink.emit(OnlyIn(path_a, pair.name))
            elif kind is PairKind.ONLY_IN_RIGHT:
                self.sink.emit(OnlyIn(path_b, pair.name))
            elif kind is PairKind.BOTH_FILES:
                self._spawn(barrier, self.compare_files, pair.left_path, pair.right_path)
            elif kind is PairKind.BOTH_DIRECTORIES:
                if self.recursive:
                    self._spawn(barrier, self.compare_directories, pair.left_path, pair.right_path)
                else:
                    self.sink.emit(CommonSubdirectories(pair.left_path, pair.right_path))
            elif kind is PairKind.LEFT_DIR_RIGHT_FILE:
                self.sink.emit(TypeMismatch(pair.left_path, DIRECTORY, pair.right_path, FILE))
            else:
                self.sink.emit(TypeMismatch(pair.left_path, FILE, pair.right_path, DIRECTORY))

        barrier.wait()
        self.latch.raise_if_tripped()

    def compare_paths(self, path_a: str | Path, path_b: str | Path) -> None:
        """Compare two root paths that are both files or both directories.

        Raises ``MixedPathTypesError`` before reading anything when the types
        differ, and a ``ComparisonAborted`` subclass for the first task failure
        of the run.
        """
        path_a = str(path_a)
        path_b = str(path_b)
        try:
            is_dir_a = stat.S_ISDIR(os.stat(path_a).st_mode)
            is_dir_b = stat.S_ISDIR(os.stat(path_b).st_mode)
        except OSError as exc:
            raise ComparisonIOError(exc) from exc

        if is_dir_a != is_dir_b:
            raise MixedPathTypesError(path_a, path_b)

        target = self.compare_directories if is_dir_a else self.compare_files
        logger.debug(
            "comparing %s %s and %s (recursive=%s)",
            "directories" if is_dir_a else "files",
            path_a,
            path_b,
            self.recursive,
        )
        barrier = CompletionBarrier(self.latch)
        self._spawn(barrier, target, path_a, path_b)
        barrier.wait()
        self.latch.raise_if_tripped()


__all__ = [
    "ComparisonScheduler",
    "CompletionBarrier",
    "FaultLatch",
]
