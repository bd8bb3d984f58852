"""Report-line model, formatting, and the shared output sink.

Comparison tasks emit ``ReportLine`` values into one ``ReportSink``. The sink
writes each formatted line with a single locked write so concurrent tasks
never interleave partial lines.
"""

from __future__ import annotations

import os
import sys
import threading
from dataclasses import dataclass
from typing import TextIO, Union

from .ui_theme import PLAIN_THEME, ReportTheme, paint

FILE = "file"
DIRECTORY = "directory"


@dataclass(frozen=True)
class FilesDiffer:
    path1: str
    path2: str


@dataclass(frozen=True)
class OnlyIn:
    directory: str
    name: str


@dataclass(frozen=True)
class TypeMismatch:
    """``path1`` is a ``kind1`` while ``path2`` is a ``kind2``."""

    path1: str
    kind1: str
    path2: str
    kind2: str


@dataclass(frozen=True)
class CommonSubdirectories:
    path1: str
    path2: str


ReportLine = Union[FilesDiffer, OnlyIn, TypeMismatch, CommonSubdirectories]


def display_path(path: str) -> str:
    """Return ``path`` with undecodable filename bytes shown as ``\\xNN`` escapes.

    Names read from the filesystem carry such bytes as lone surrogates, which
    strict text streams refuse to encode.
    """
    return os.fsencode(path).decode(sys.getfilesystemencoding(), errors="backslashreplace")


def format_report_line(line: ReportLine, theme: ReportTheme = PLAIN_THEME) -> str:
    """Render one report line without the trailing newline."""
    if isinstance(line, FilesDiffer):
        path1 = display_path(line.path1)
        path2 = display_path(line.path2)
        return f"Files {path1} and {path2} {paint('differ', theme.differ, theme)}"
    if isinstance(line, OnlyIn):
        return f"{paint('Only in', theme.only_in, theme)} {display_path(line.directory)}: {display_path(line.name)}"
    if isinstance(line, TypeMismatch):
        kind1 = paint(line.kind1, theme.kind, theme)
        kind2 = paint(line.kind2, theme.kind, theme)
        return f"{display_path(line.path1)} is a {kind1} while {display_path(line.path2)} is a {kind2}"
    if isinstance(line, CommonSubdirectories):
        return f"Common subdirectories: {display_path(line.path1)} and {display_path(line.path2)}"
    raise TypeError(f"unsupported report line: {line!r}")


class ReportSink:
    """Thread-safe line writer that also records what it emitted."""

    def __init__(self, stream: TextIO, theme: ReportTheme = PLAIN_THEME) -> None:
        self._stream = stream
        self._theme = theme
        self._lock = threading.Lock()
        self._lines: list[ReportLine] = []

    @property
    def lines(self) -> list[ReportLine]:
        """Snapshot of emitted lines in emission order."""
        with self._lock:
            return list(self._lines)

    def emit(self, line: ReportLine) -> None:
        text = format_report_line(line, self._theme) + "\n"
        with self._lock:
            self._stream.write(text)
            self._stream.flush()
            self._lines.append(line)


__all__ = [
    "FILE",
    "DIRECTORY",
    "FilesDiffer",
    "OnlyIn",
    "TypeMismatch",
    "CommonSubdirectories",
    "ReportLine",
    "ReportSink",
    "display_path",
    "format_report_line",
]
