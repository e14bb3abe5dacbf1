"""Filesystem traversal: folder-tree scan, name search, listing and sizing.

Every directory listing is contained on its own: an unreadable directory
becomes an empty result for that subtree plus a diagnostic, and siblings are
still visited. Nothing here raises ``OSError`` to the caller; checking that
the root exists at all is the caller's job.

Directories are tracked by real path along the current ancestor chain so a
symlink pointing back up the tree is not followed a second time.
"""

from __future__ import annotations

import os
from pathlib import Path, PurePath

from ..diagnostics import DiagnosticSink, write_diagnostic
from .types import FolderTree


def absolute_path(path: Path | str) -> Path:
    """Return normalized absolute ``path`` without resolving symlinks."""
    return Path(os.path.abspath(os.fspath(path)))


def folder_name(path: Path) -> str:
    """Return base name of ``path``, or the full text for filesystem roots."""
    return path.name or str(path)


def safe_file_size(path: Path) -> int | None:
    """Return file size in bytes or ``None`` on stat failure."""
    try:
        return int(path.stat().st_size)
    except OSError:
        return None


def list_directory(directory: Path) -> tuple[list[Path], list[Path], OSError | None]:
    """List direct files and subdirectories in enumeration order.

    Returns ``(files, subdirectories, error)``. On listing failure both lists
    are empty and ``error`` carries the exception. Order is whatever the
    operating system hands back; nothing is sorted. Symlinks to directories
    count as subdirectories, anything else (broken links included) as a file.
    """
    files: list[Path] = []
    subdirectories: list[Path] = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                try:
                    is_dir = entry.is_dir()
                except OSError:
                    is_dir = False
                if is_dir:
                    subdirectories.append(Path(entry.path))
                else:
                    files.append(Path(entry.path))
    except OSError as exc:
        return [], [], exc
    return files, subdirectories, None


def describe_os_error(exc: OSError) -> str:
    """Return the short human reason for an ``OSError``."""
    return exc.strerror or str(exc)


def scan_error_message(directory: Path, exc: OSError) -> str:
    """Format the diagnostic for a directory that could not be scanned."""
    if isinstance(exc, PermissionError):
        return f"Access denied to folder: {directory}"
    if isinstance(exc, FileNotFoundError):
        return f"Directory not found: {directory}"
    return f"IO error accessing folder {directory}: {describe_os_error(exc)}"


def scan_folder_tree(path: Path | str, warn: DiagnosticSink | None = None) -> FolderTree:
    """Build a ``FolderTree`` for ``path``, recursing into every subdirectory.

    Never returns ``None``: an inaccessible root still yields a named node
    with no files and no children.
    """
    emit = warn if warn is not None else write_diagnostic
    return _scan(absolute_path(path), emit, frozenset())


def _scan(directory: Path, emit: DiagnosticSink, ancestors: frozenset[str]) -> FolderTree:
    name = folder_name(directory)
    real = os.path.realpath(directory)
    if real in ancestors:
        emit(f"Skipping symlink cycle at folder: {directory}")
        return FolderTree(name=name, path=directory)

    files, subdirectories, error = list_directory(directory)
    if error is not None:
        emit(scan_error_message(directory, error))
        return FolderTree(name=name, path=directory)

    inner = ancestors | {real}
    children = tuple(_scan(subdirectory, emit, inner) for subdirectory in subdirectories)
    return FolderTree(name=name, path=directory, files=tuple(files), children=children)


def find_folder(root: Path | str, name: str, warn: DiagnosticSink | None = None) -> Path | None:
    """Find a subdirectory of ``root`` named ``name`` (case-insensitive).

    All direct subdirectories are compared before any of them is descended
    into; descent then goes through them in enumeration order and the first
    hit wins. A direct child therefore always beats a deeper namesake.
    """
    emit = warn if warn is not None else write_diagnostic
    return _find(absolute_path(root), name.casefold(), emit, frozenset(), match_files=False)


def find_file(root: Path | str, name: str, warn: DiagnosticSink | None = None) -> Path | None:
    """Find a file under ``root`` whose full name equals ``name`` (case-insensitive).

    Same order as ``find_folder``: direct files are checked before any
    subdirectory is searched.
    """
    emit = warn if warn is not None else write_diagnostic
    return _find(absolute_path(root), name.casefold(), emit, frozenset(), match_files=True)


def _find(
    directory: Path,
    wanted: str,
    emit: DiagnosticSink,
    ancestors: frozenset[str],
    *,
    match_files: bool,
) -> Path | None:
    real = os.path.realpath(directory)
    if real in ancestors:
        return None

    files, subdirectories, error = list_directory(directory)
    if error is not None:
        emit(f"Error during searching: {describe_os_error(error)} ({directory})")
        return None

    candidates = files if match_files else subdirectories
    for candidate in candidates:
        if candidate.name.casefold() == wanted:
            return candidate

    inner = ancestors | {real}
    for subdirectory in subdirectories:
        found = _find(subdirectory, wanted, emit, inner, match_files=match_files)
        if found is not None:
            return found
    return None


def list_files(path: Path | str, recursive: bool = False, warn: DiagnosticSink | None = None) -> list[Path]:
    """Return absolute file paths directly in ``path`` or, if ``recursive``, in its whole subtree.

    An empty or unreadable ``path`` gives an empty list after a diagnostic.
    ``Path("")`` collapses to ``Path(".")``, so a path object with no parts
    counts as empty too.
    In recursive mode an unreadable subdirectory is reported and skipped.
    """
    emit = warn if warn is not None else write_diagnostic
    if not os.fspath(path) or (isinstance(path, PurePath) and not path.parts):
        emit("Error listing files: no folder path given")
        return []

    directory = absolute_path(path)
    files, subdirectories, error = list_directory(directory)
    if error is not None:
        emit(f"Error listing files in {directory}: {describe_os_error(error)}")
        return []
    if not recursive:
        return files

    collected = list(files)
    inner = frozenset({os.path.realpath(directory)})
    for subdirectory in subdirectories:
        _collect_files(subdirectory, collected, emit, inner)
    return collected


def _collect_files(directory: Path, out: list[Path], emit: DiagnosticSink, ancestors: frozenset[str]) -> None:
    real = os.path.realpath(directory)
    if real in ancestors:
        return
    files, subdirectories, error = list_directory(directory)
    if error is not None:
        emit(f"Error listing files in {directory}: {describe_os_error(error)}")
        return
    out.extend(files)
    inner = ancestors | {real}
    for subdirectory in subdirectories:
        _collect_files(subdirectory, out, emit, inner)


def aggregate_size(path: Path | str) -> int:
    """Return total bytes of every file under ``path``.

    Unreadable subdirectories and unstat-able files add zero without any
    diagnostic.
    """
    return _aggregate_size(absolute_path(path), frozenset())


def _aggregate_size(directory: Path, ancestors: frozenset[str]) -> int:
    real = os.path.realpath(directory)
    if real in ancestors:
        return 0
    files, subdirectories, error = list_directory(directory)
    if error is not None:
        return 0
    total = sum(safe_file_size(file_path) or 0 for file_path in files)
    inner = ancestors | {real}
    for subdirectory in subdirectories:
        total += _aggregate_size(subdirectory, inner)
    return total


__all__ = [
    "absolute_path",
    "aggregate_size",
    "describe_os_error",
    "find_file",
    "find_folder",
    "folder_name",
    "list_directory",
    "list_files",
    "safe_file_size",
    "scan_error_message",
    "scan_folder_tree",
]
