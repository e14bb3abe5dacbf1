"""Tabular reports for file and folder metadata records."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from ..folder_tree.metadata import EntryRecord, FileRecord, FolderRecord, format_timestamp
from ..settings import HighlightConfig
from ..ui_theme import PLAIN_THEME, UITheme, paint
from .tree import BYTES_PER_MB

RULE_CHAR = "="
NAME_WIDTH = 35
_PATH_SEPARATOR_RE = re.compile(r"[\\/]")


@dataclass(frozen=True)
class Column:
    title: str
    width: int = 0
    align: str = "<"

    def format(self, value: str) -> str:
        if self.width <= 0:
            return value
        return f"{value:{self.align}{self.width}}"


FILE_COLUMNS: tuple[Column, ...] = (
    Column("File Name", NAME_WIDTH),
    Column("File Extension", 15),
    Column("Weight(B)", 12),
    Column("Weight (MB)", 12),
    Column("IsReadOnly", 12),
    Column("Creation Date", 20),
    Column("Last Access", 20),
    Column("Last Write", 20),
    Column("Attributes", 16),
    Column("Absolute Path"),
)

FOLDER_COLUMNS: tuple[Column, ...] = (
    Column("Folder Name", NAME_WIDTH),
    Column("Num File", 10),
    Column("Num subfolder", 13, ">"),
    Column("Weight(B)", 14, ">"),
    Column("Weight (MB)", 14, ">"),
    Column("Creation Date", 20),
    Column("Last Access", 20),
    Column("Last Write", 20),
    Column("Attributes", 16),
    Column("Absolute Path"),
)


def shorten_path(path: str) -> str:
    """Collapse the middle of ``path`` to ``...``, keeping two segments per side.

    Works on segments split at either ``/`` or ``\\`` and joins with the first
    separator found, so Windows and POSIX paths behave the same. Paths with
    fewer than four segments come back unchanged; exactly four still get the
    ellipsis between the two halves.
    """
    match = _PATH_SEPARATOR_RE.search(path)
    if match is None:
        return path
    parts = _PATH_SEPARATOR_RE.split(path)
    if len(parts) < 4:
        return path
    return match.group(0).join([*parts[:2], "...", *parts[-2:]])


def _display_path(record: EntryRecord, config: HighlightConfig) -> str:
    text = str(record.path)
    return shorten_path(text) if config.shorten_absolute_path else text


def _format_row(columns: Sequence[Column], values: Sequence[str], name_color: str, theme: UITheme) -> str:
    """Join padded cells; the first (name) cell is coloured after padding."""
    cells = [column.format(value) for column, value in zip(columns, values)]
    cells[0] = paint(name_color, cells[0], theme)
    return " ".join(cells).rstrip()


def _header_lines(columns: Sequence[Column], theme: UITheme) -> list[str]:
    header = " ".join(column.format(column.title) for column in columns)
    return [paint(theme.table_header, header, theme), RULE_CHAR * len(header)]


def file_row_values(record: FileRecord, config: HighlightConfig) -> list[str]:
    return [
        record.name,
        record.extension or "None",
        str(record.size_bytes),
        f"{record.size_bytes / BYTES_PER_MB:.2f}",
        "Yes" if record.read_only else "No",
        format_timestamp(record.created),
        format_timestamp(record.accessed),
        format_timestamp(record.modified),
        record.attributes,
        _display_path(record, config),
    ]


def folder_row_values(record: FolderRecord, config: HighlightConfig) -> list[str]:
    return [
        record.name,
        str(record.file_count),
        str(record.folder_count),
        f"{record.total_size:,}",
        f"{record.total_size / BYTES_PER_MB:.2f}",
        format_timestamp(record.created),
        format_timestamp(record.accessed),
        format_timestamp(record.modified),
        record.attributes,
        _display_path(record, config),
    ]


def render_entries(
    entries: Sequence[EntryRecord],
    config: HighlightConfig,
    theme: UITheme = PLAIN_THEME,
) -> str:
    """Render records as text tables.

    File records and folder records get separate tables (files first), each
    with a header row and a separator rule. An empty sequence renders the
    bare file table header.
    """
    files = [entry for entry in entries if isinstance(entry, FileRecord)]
    folders = [entry for entry in entries if isinstance(entry, FolderRecord)]

    sections: list[str] = []
    if files or not folders:
        lines = _header_lines(FILE_COLUMNS, theme)
        lines.extend(
            _format_row(FILE_COLUMNS, file_row_values(record, config), theme.table_name, theme) for record in files
        )
        sections.append("\n".join(lines))
    if folders:
        lines = _header_lines(FOLDER_COLUMNS, theme)
        lines.extend(
            _format_row(FOLDER_COLUMNS, folder_row_values(record, config), theme.table_name, theme)
            for record in folders
        )
        sections.append("\n".join(lines))
    return "\n\n".join(sections)


__all__ = [
    "Column",
    "FILE_COLUMNS",
    "FOLDER_COLUMNS",
    "file_row_values",
    "folder_row_values",
    "render_entries",
    "shorten_path",
]
