"""Public package surface for pathdiff.

Exports ``main`` for programmatic CLI invocation.
The comparison engine lives under ``pathdiff.compare``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
