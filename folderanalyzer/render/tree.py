"""Render a ``FolderTree`` as box-drawing tree lines.

Each directory lists its files first, then its subfolders, in stored order.
The last of those combined entries gets the closing branch glyph. File names
can be coloured by a size-based highlight class; metadata for file lines is
read from the filesystem at render time.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from pathlib import Path

from ..folder_tree.metadata import creation_timestamp, format_timestamp
from ..folder_tree.types import FolderTree
from ..settings import HighlightConfig
from ..ui_theme import PLAIN_THEME, UITheme, paint

BYTES_PER_MB = 1024 * 1024
BRANCH_MORE = "├── "
BRANCH_LAST = "└── "
INDENT_MORE = "│   "
INDENT_LAST = "    "
FOLDER_TAG = "(FOLDER)"


class HighlightClass(Enum):
    ZERO = "zero"
    MINOR = "minor"
    MEDIUM = "medium"
    ABOVE_AVERAGE = "above_average"
    MAX = "max"


def classify_file_size(size_bytes: int, config: HighlightConfig) -> HighlightClass | None:
    """Return the highlight class for a file of ``size_bytes``.

    Returns ``None`` when highlighting is off or no rung of the ladder
    matches. Rungs are tested in this order: ``<= minor``, ``<= medium``,
    ``> above average``, ``> max``. With ascending thresholds the last rung
    can never match, and a size between ``medium`` and ``above average`` gets
    no class.
    """
    if not config.highlight:
        return None
    if size_bytes == 0:
        return HighlightClass.ZERO
    megabytes = size_bytes / BYTES_PER_MB
    if megabytes <= config.min_size_light:
        return HighlightClass.MINOR
    if megabytes <= config.medium_size_light:
        return HighlightClass.MEDIUM
    if megabytes > config.above_average_size_light:
        return HighlightClass.ABOVE_AVERAGE
    if megabytes > config.max_size_light:
        return HighlightClass.MAX
    return None


def highlight_color(highlight: HighlightClass | None, theme: UITheme) -> str:
    """Map a highlight class to the theme's colour escape."""
    if highlight is None:
        return ""
    return {
        HighlightClass.ZERO: theme.highlight_zero,
        HighlightClass.MINOR: theme.highlight_minor,
        HighlightClass.MEDIUM: theme.highlight_medium,
        HighlightClass.ABOVE_AVERAGE: theme.highlight_above_average,
        HighlightClass.MAX: theme.highlight_max,
    }[highlight]


def tree_indent(last_flags: Sequence[bool]) -> str:
    """Build the indent for an entry from its ancestors' "was last" flags.

    ``last_flags`` runs from depth 1 down to the entry itself; the entry's own
    flag picks the branch glyph, not the indent, so it is ignored here.
    """
    return "".join(INDENT_LAST if last else INDENT_MORE for last in last_flags[:-1])


def format_file_label(path: Path, config: HighlightConfig, theme: UITheme = PLAIN_THEME) -> str:
    """Return the file part of a tree line: name plus optional size and dates."""
    name = path.name
    try:
        st = path.stat()
    except OSError:
        return f"{name} (unavailable)"

    size_bytes = int(st.st_size)
    label = paint(highlight_color(classify_file_size(size_bytes, config), theme), name, theme)
    if config.show_size:
        label += f" ({size_bytes} B) ({size_bytes / BYTES_PER_MB:.2f} MB)"
    if config.show_creation_date:
        label += f" ||Created: {format_timestamp(creation_timestamp(st))}||"
    if config.show_date_change:
        label += f" ||Last change: {format_timestamp(st.st_mtime)}||"
    return label


def render_tree(tree: FolderTree, config: HighlightConfig, theme: UITheme = PLAIN_THEME) -> list[str]:
    """Render ``tree`` to lines, root label first, in pre-order."""
    lines = [paint(theme.tree_root, f"{tree.name.upper()}{FOLDER_TAG}", theme)]

    def walk(node: FolderTree, last_flags: tuple[bool, ...]) -> None:
        file_count = len(node.files)
        total = file_count + len(node.children)
        for index in range(total):
            flags = last_flags + (index == total - 1,)
            branch = BRANCH_LAST if flags[-1] else BRANCH_MORE
            prefix = paint(theme.tree_branch, f"{tree_indent(flags)}{branch}", theme)
            if index < file_count:
                lines.append(prefix + format_file_label(node.files[index], config, theme))
                continue
            child = node.children[index - file_count]
            lines.append(prefix + paint(theme.tree_folder, f"{child.name}{FOLDER_TAG}", theme))
            walk(child, flags)

    walk(tree, ())
    return lines


__all__ = [
    "BRANCH_LAST",
    "BRANCH_MORE",
    "BYTES_PER_MB",
    "FOLDER_TAG",
    "HighlightClass",
    "classify_file_size",
    "format_file_label",
    "highlight_color",
    "render_tree",
    "tree_indent",
]
