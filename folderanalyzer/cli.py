"""Command-line front door for folderanalyzer.

Parses CLI options, checks that the target path exists and either prints a
one-shot report (``--tree`` / ``--info``) or starts the interactive menus.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .console import ConsoleController
from .diagnostics import console_diagnostics
from .folder_tree import read_file_record, read_folder_record, scan_folder_tree
from .menu import run_main_menu
from .navigator import NavigatorSession, resolve_entry_name
from .render import render_entries, render_tree
from .settings import SettingsStore
from .ui_theme import UITheme, available_theme_names, resolve_theme


def render_tree_view(path: Path, settings: SettingsStore, theme: UITheme) -> str:
    """Scan ``path`` and return its rendered tree text."""
    tree = scan_folder_tree(path, warn=console_diagnostics(theme))
    return "\n".join(render_tree(tree, settings.snapshot(), theme)) + "\n"


def render_info_view(path: Path, name: str, settings: SettingsStore, theme: UITheme) -> str:
    """Resolve ``name`` under ``path`` and return its info table text."""
    target = resolve_entry_name(path, name, console_diagnostics(theme))
    if target.is_dir():
        record = read_folder_record(target)
    elif target.is_file():
        record = read_file_record(target)
    else:
        raise SystemExit(f"Path not found: {target}")
    return render_entries([record], settings.snapshot(), theme) + "\n"


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and run a report or the interactive menus.

    ``default_path`` is primarily for tests; ``--tree``/``--info`` fall back
    to it, then to the current working directory, when no path is given.
    """
    parser = argparse.ArgumentParser(
        description="Browse a folder tree, inspect file/folder metadata and highlight large files."
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="File or folder to open. Without it the main menu starts.",
    )
    parser.add_argument("--tree", action="store_true", help="Print the folder tree for PATH and exit.")
    parser.add_argument("--info", metavar="NAME", help="Print information for NAME found under PATH and exit.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    args = parser.parse_args()

    if args.tree and args.info is not None:
        raise SystemExit("Cannot combine --tree with --info.")

    no_color = args.no_color or not sys.stdout.isatty()
    theme = resolve_theme(args.theme, no_color=no_color)
    settings = SettingsStore.load()

    if args.tree or args.info is not None:
        path = Path(args.path) if args.path else (default_path or Path.cwd())
        if not path.exists():
            raise SystemExit(f"Path not found: {path}")
        if args.tree:
            if not path.is_dir():
                raise SystemExit(f"Not a folder: {path}")
            sys.stdout.write(render_tree_view(path, settings, theme))
        else:
            sys.stdout.write(render_info_view(path, args.info, settings, theme))
        return

    console = ConsoleController(theme)
    if args.path is not None:
        path = Path(args.path)
        if not path.exists():
            raise SystemExit(f"Path not found: {path}")
        NavigatorSession(path, settings, console).run()
        return
    run_main_menu(settings, console)


if __name__ == "__main__":
    main()
