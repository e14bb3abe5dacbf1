"""Public package surface for folderanalyzer.

Exports ``main`` for programmatic CLI invocation.
Scanning lives in ``folderanalyzer.folder_tree``, text output in
``folderanalyzer.render``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
