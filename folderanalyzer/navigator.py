"""Interactive directory session: tree view, commands and name resolution.

Each loop iteration re-scans the current directory, renders the tree with a
fresh settings snapshot and reads one command. Reports (file tables, info)
send the session back to its starting folder afterwards.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .console import ConsoleController
from .diagnostics import DiagnosticSink
from .folder_tree import (
    absolute_path,
    find_file,
    find_folder,
    list_files,
    read_file_record,
    read_folder_record,
    read_records,
    scan_folder_tree,
)
from .folder_tree.scanner import describe_os_error
from .render import render_entries, render_frame, render_tree
from .settings import SettingsStore

ACTION_FRAME_WIDTH = 150
ACTION_ITEMS = (
    "<all file info in *name folder*> - get information about all files in the folder",
    "<all file info in all folders *name folder*> - information about files in the folder and all subfolders",
    "<info *name file*> - get information about the file by name",
    "<info *name folder*> - get information about the folder by name",
    "<to *name folder*> - move to the specified folder (<to home> returns to the starting folder)",
    "<back> - return to the main menu",
)

ACTION_RECURSIVE_FILES = "all file info in all folders"
ACTION_FILES = "all file info in"
ACTION_INFO = "info"
ACTION_CHANGE_DIRECTORY = "to"
ACTION_BACK = "back"

# Longest prefix first: "all file info in all folders x" also starts with "all file info in ".
_COMMAND_PREFIXES = (
    (f"{ACTION_RECURSIVE_FILES} ", ACTION_RECURSIVE_FILES),
    (f"{ACTION_FILES} ", ACTION_FILES),
    (f"{ACTION_INFO} ", ACTION_INFO),
    (f"{ACTION_CHANGE_DIRECTORY} ", ACTION_CHANGE_DIRECTORY),
)
HOME_KEYWORD = "home"


@dataclass(frozen=True)
class Command:
    action: str
    name: str = ""


def parse_command(text: str) -> Command | None:
    """Parse one command line; ``None`` when it matches no command form."""
    candidate = text.strip()
    for prefix, action in _COMMAND_PREFIXES:
        if candidate.startswith(prefix):
            name = candidate[len(prefix) :].strip()
            return Command(action, name) if name else None
    if candidate.startswith(ACTION_BACK) or candidate.startswith("exit"):
        return Command(ACTION_BACK)
    return None


def is_bare_name(name: str) -> bool:
    """Return whether ``name`` has no path separator of either style."""
    return "/" not in name and "\\" not in name


def _joined(current: Path, name: str) -> Path:
    return Path(os.path.normpath(current / name))


def resolve_folder_name(current: Path, name: str, warn: DiagnosticSink | None = None) -> Path:
    """Resolve a user-typed folder name relative to ``current``.

    A bare name matching the current folder's own name means ``current``;
    otherwise it is searched for below ``current``. Unresolved names and
    names with separators are joined onto ``current`` (absolute ones stay as
    typed).
    """
    if not is_bare_name(name):
        return _joined(current, name)
    if current.name.casefold() == name.casefold():
        return current
    found = find_folder(current, name, warn)
    return found if found is not None else current / name


def resolve_entry_name(current: Path, name: str, warn: DiagnosticSink | None = None) -> Path:
    """Like ``resolve_folder_name`` but a matching file wins over a folder."""
    if not is_bare_name(name):
        return _joined(current, name)
    if current.name.casefold() == name.casefold():
        return current
    found = find_file(current, name, warn)
    if found is None:
        found = find_folder(current, name, warn)
    return found if found is not None else current / name


class NavigatorSession:
    """One interactive browsing session rooted at ``home``."""

    def __init__(
        self,
        home: Path | str,
        settings: SettingsStore,
        console: ConsoleController,
        warn: DiagnosticSink | None = None,
    ) -> None:
        self.home = absolute_path(home)
        self.current = self.home
        self.settings = settings
        self.console = console
        self.warn = warn if warn is not None else console.warning

    def run(self) -> None:
        while True:
            if self.current.is_file():
                self.show_paths([self.current])
                self.console.pause()
                self.current = self.home
                return
            if not self.current.is_dir():
                self.console.error("Current path is invalid.")
                self.console.pause()
                return

            self.console.clear()
            self.show_tree()
            self.console.lines(render_frame("ACTION", ACTION_ITEMS, ACTION_FRAME_WIDTH, self.console.theme))
            command = self.read_command()
            if command is None or command.action == ACTION_BACK:
                return
            self.dispatch(command)

    def show_tree(self) -> None:
        tree = scan_folder_tree(self.current, warn=self.warn)
        self.console.lines(render_tree(tree, self.settings.snapshot(), self.console.theme))

    def show_paths(self, paths: list[Path]) -> None:
        records = read_records(paths, warn=self.warn)
        self.console.line(render_entries(records, self.settings.snapshot(), self.console.theme))

    def read_command(self) -> Command | None:
        """Prompt until a valid command is typed; ``None`` when input ends."""
        self.console.line("Select an option:")
        while True:
            text = self.console.prompt()
            if text is None:
                return None
            command = parse_command(text)
            if command is not None:
                return command
            self.console.line("Invalid option. Please try again:")

    def dispatch(self, command: Command) -> bool:
        if command.action == ACTION_CHANGE_DIRECTORY:
            return self.change_directory(command.name)
        if command.action == ACTION_INFO:
            return self.report_info(command.name)
        if command.action == ACTION_FILES:
            return self.report_files(command.name, recursive=False)
        if command.action == ACTION_RECURSIVE_FILES:
            return self.report_files(command.name, recursive=True)
        self.console.line("Unknown command, please try again.")
        return False

    def change_directory(self, name: str) -> bool:
        """Move to folder ``name``; ``home`` returns to the starting folder."""
        if name.lower() == HOME_KEYWORD:
            target = self.home
        else:
            target = resolve_folder_name(self.current, name, self.warn)

        if target.is_dir():
            self.current = target
            return True
        self.console.error(f"Folder '{name}' not found in '{self.current}'. Tried path: {target}.")
        self.console.pause()
        return False

    def report_files(self, name: str, *, recursive: bool) -> bool:
        """Print the file table for folder ``name`` (its whole subtree if ``recursive``)."""
        target = resolve_folder_name(self.current, name, self.warn)
        found = target.is_dir()
        if found:
            self.show_paths(list_files(target, recursive=recursive, warn=self.warn))
        else:
            self.console.error(f"Folder '{name}' not found starting from '{self.current}'.")
        self.console.pause()
        self.current = self.home
        return found

    def report_info(self, name: str) -> bool:
        """Print the info table for the file or folder called ``name``."""
        target = resolve_entry_name(self.current, name, self.warn)
        self.current = self.home
        try:
            if target.is_dir():
                record = read_folder_record(target)
            elif target.is_file():
                record = read_file_record(target)
            else:
                self.console.error("The specified file or folder does not exist.")
                self.console.pause()
                return False
        except OSError as exc:
            self.console.error(f"Cannot read information for {target}: {describe_os_error(exc)}")
            self.console.pause()
            return False

        self.console.line(render_entries([record], self.settings.snapshot(), self.console.theme))
        self.console.pause()
        return True


__all__ = [
    "ACTION_ITEMS",
    "Command",
    "NavigatorSession",
    "is_bare_name",
    "parse_command",
    "resolve_entry_name",
    "resolve_folder_name",
]
