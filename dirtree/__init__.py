"""Public package surface for dirtree.

Exports ``main`` for programmatic CLI invocation.
Traversal and formatting live in submodules under ``dirtree``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
