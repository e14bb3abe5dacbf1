"""Text rendering for folder trees, metadata tables and menu frames."""

from __future__ import annotations

from .frame import frame_bottom, frame_row, frame_top, render_frame
from .table import render_entries, shorten_path
from .tree import HighlightClass, classify_file_size, render_tree, tree_indent

__all__ = [
    "HighlightClass",
    "classify_file_size",
    "frame_bottom",
    "frame_row",
    "frame_top",
    "render_entries",
    "render_frame",
    "render_tree",
    "shorten_path",
    "tree_indent",
]
