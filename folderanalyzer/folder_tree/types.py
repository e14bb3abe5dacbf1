"""Domain datatypes for scanned folder trees."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FolderTree:
    """One scanned directory with its direct files and entered subdirectories.

    ``files`` keeps the order returned by the directory listing; it is never
    re-sorted. ``children`` holds one node per subdirectory in enumeration
    order. A directory that could not be listed is still a node, just with
    both sequences empty.
    """

    name: str
    path: Path
    files: tuple[Path, ...] = ()
    children: tuple["FolderTree", ...] = ()

    def file_count(self) -> int:
        """Return number of files across this node and every descendant."""
        return len(self.files) + sum(child.file_count() for child in self.children)

    def folder_count(self) -> int:
        """Return number of descendant folder nodes, excluding this one."""
        return len(self.children) + sum(child.folder_count() for child in self.children)

    def iter_files(self) -> Iterator[Path]:
        """Yield every file path in pre-order, own files before children."""
        yield from self.files
        for child in self.children:
            yield from child.iter_files()


__all__ = ["FolderTree"]
