"""Domain model and filesystem access for scanned folder trees.

This package contains non-UI primitives:
- the immutable ``FolderTree`` node
- traversal, name search, file listing and size aggregation
- file/folder metadata records read at report time
"""

from __future__ import annotations

from .types import FolderTree
from .scanner import (
    absolute_path,
    aggregate_size,
    find_file,
    find_folder,
    folder_name,
    list_directory,
    list_files,
    safe_file_size,
    scan_folder_tree,
)
from .metadata import (
    EntryRecord,
    FileRecord,
    FolderRecord,
    creation_timestamp,
    format_timestamp,
    read_file_record,
    read_folder_record,
    read_records,
)

__all__ = [
    "FolderTree",
    "absolute_path",
    "aggregate_size",
    "find_file",
    "find_folder",
    "folder_name",
    "list_directory",
    "list_files",
    "safe_file_size",
    "scan_folder_tree",
    "EntryRecord",
    "FileRecord",
    "FolderRecord",
    "creation_timestamp",
    "format_timestamp",
    "read_file_record",
    "read_folder_record",
    "read_records",
]
