"""File and folder metadata records read at report time.

Records are snapshots of ``stat`` output plus, for folders, direct entry
counts and the recursive byte total. They are never stored in a
``FolderTree``; callers build them right before rendering a report.
"""

from __future__ import annotations

import os
import stat
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from ..diagnostics import DiagnosticSink, write_diagnostic
from .scanner import absolute_path, aggregate_size, describe_os_error, folder_name, list_directory

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_WINDOWS_ATTRIBUTE_NAMES = (
    ("ReadOnly", stat.FILE_ATTRIBUTE_READONLY),
    ("Hidden", stat.FILE_ATTRIBUTE_HIDDEN),
    ("System", stat.FILE_ATTRIBUTE_SYSTEM),
    ("Directory", stat.FILE_ATTRIBUTE_DIRECTORY),
    ("Archive", stat.FILE_ATTRIBUTE_ARCHIVE),
    ("ReparsePoint", stat.FILE_ATTRIBUTE_REPARSE_POINT),
    ("Compressed", stat.FILE_ATTRIBUTE_COMPRESSED),
    ("Encrypted", stat.FILE_ATTRIBUTE_ENCRYPTED),
)


@dataclass(frozen=True)
class FileRecord:
    """Metadata for one file."""

    path: Path
    name: str
    extension: str
    size_bytes: int
    read_only: bool
    created: float
    accessed: float
    modified: float
    attributes: str


@dataclass(frozen=True)
class FolderRecord:
    """Metadata for one folder, with direct counts and recursive size."""

    path: Path
    name: str
    file_count: int
    folder_count: int
    total_size: int
    created: float
    accessed: float
    modified: float
    attributes: str


EntryRecord = FileRecord | FolderRecord


def creation_timestamp(st: os.stat_result) -> float:
    """Return birth time where the platform records it, else ``st_ctime``."""
    birthtime = getattr(st, "st_birthtime", None)
    if birthtime is not None:
        return float(birthtime)
    return float(st.st_ctime)


def format_timestamp(timestamp: float) -> str:
    """Format a POSIX timestamp in local time."""
    return datetime.fromtimestamp(timestamp).strftime(TIMESTAMP_FORMAT)


def describe_attributes(st: os.stat_result) -> str:
    """Return OS attribute flags as text.

    Windows reports named attribute bits; elsewhere the permission string
    from ``stat.filemode`` is used.
    """
    flags = getattr(st, "st_file_attributes", None)
    if flags is None:
        return stat.filemode(st.st_mode)
    names = [label for label, bit in _WINDOWS_ATTRIBUTE_NAMES if flags & bit]
    return ", ".join(names) if names else "Normal"


def is_read_only(st: os.stat_result) -> bool:
    """Return whether the owner cannot write the entry."""
    flags = getattr(st, "st_file_attributes", None)
    if flags is not None:
        return bool(flags & stat.FILE_ATTRIBUTE_READONLY)
    return not st.st_mode & stat.S_IWUSR


def read_file_record(path: Path | str) -> FileRecord:
    """Stat ``path`` and build its ``FileRecord``; raises ``OSError`` on failure."""
    file_path = absolute_path(path)
    st = file_path.stat()
    return FileRecord(
        path=file_path,
        name=file_path.stem,
        extension=file_path.suffix,
        size_bytes=int(st.st_size),
        read_only=is_read_only(st),
        created=creation_timestamp(st),
        accessed=float(st.st_atime),
        modified=float(st.st_mtime),
        attributes=describe_attributes(st),
    )


def read_folder_record(path: Path | str) -> FolderRecord:
    """Stat folder ``path``, count direct entries and total its size.

    Raises ``OSError`` when the folder itself cannot be stat-ed; an
    unlistable folder counts as empty.
    """
    folder_path = absolute_path(path)
    st = folder_path.stat()
    files, subdirectories, _error = list_directory(folder_path)
    return FolderRecord(
        path=folder_path,
        name=folder_name(folder_path),
        file_count=len(files),
        folder_count=len(subdirectories),
        total_size=aggregate_size(folder_path),
        created=creation_timestamp(st),
        accessed=float(st.st_atime),
        modified=float(st.st_mtime),
        attributes=describe_attributes(st),
    )


def read_records(paths: Iterable[Path | str], warn: DiagnosticSink | None = None) -> list[EntryRecord]:
    """Build records for ``paths``, skipping (and reporting) unreadable ones."""
    emit = warn if warn is not None else write_diagnostic
    records: list[EntryRecord] = []
    for path in paths:
        try:
            if os.path.isdir(path):
                records.append(read_folder_record(path))
            else:
                records.append(read_file_record(path))
        except OSError as exc:
            emit(f"Cannot read information for {path}: {describe_os_error(exc)}")
    return records


__all__ = [
    "EntryRecord",
    "FileRecord",
    "FolderRecord",
    "TIMESTAMP_FORMAT",
    "creation_timestamp",
    "describe_attributes",
    "format_timestamp",
    "is_read_only",
    "read_file_record",
    "read_folder_record",
    "read_records",
]
