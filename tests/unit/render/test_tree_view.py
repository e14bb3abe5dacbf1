"""Tests for folder-tree rendering and size highlight classification."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from folderanalyzer.folder_tree import FolderTree, scan_folder_tree
from folderanalyzer.diagnostics import DiagnosticCollector
from folderanalyzer.render import HighlightClass, classify_file_size, render_tree, tree_indent
from folderanalyzer.settings import HighlightConfig
from folderanalyzer.ui_theme import DEFAULT_THEME

MB = 1024 * 1024
NAMES_ONLY = HighlightConfig(show_size=False, highlight=False)


def touch(path: Path, size: int = 1) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


class RenderTreeLayoutTests(unittest.TestCase):
    def test_empty_directory_renders_only_root_label(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "Empty"
            root.mkdir()

            tree = scan_folder_tree(root, warn=DiagnosticCollector())

            self.assertEqual(render_tree(tree, HighlightConfig()), ["EMPTY(FOLDER)"])

    def test_files_come_before_folders_and_last_combined_entry_closes(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "root"
            c_txt = touch(root / "c.txt")
            b_txt = touch(root / "a" / "b.txt")
            tree = FolderTree(
                name="root",
                path=root,
                files=(c_txt,),
                children=(FolderTree(name="a", path=root / "a", files=(b_txt,)),),
            )

            lines = render_tree(tree, NAMES_ONLY)

            self.assertEqual(
                lines,
                [
                    "ROOT(FOLDER)",
                    "├── c.txt",
                    "└── a(FOLDER)",
                    "    └── b.txt",
                ],
            )

    def test_trailing_file_after_folder_gets_closing_glyph(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "root"
            b_txt = touch(root / "a" / "b.txt")
            tree = FolderTree(
                name="root",
                path=root,
                children=(
                    FolderTree(name="a", path=root / "a", files=(b_txt,)),
                    FolderTree(name="c", path=root / "c"),
                ),
            )

            lines = render_tree(tree, NAMES_ONLY)

            self.assertEqual(
                lines,
                [
                    "ROOT(FOLDER)",
                    "├── a(FOLDER)",
                    "│   └── b.txt",
                    "└── c(FOLDER)",
                ],
            )

    def test_nested_indent_uses_ancestor_last_flags(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "top"
            x1 = touch(root / "x" / "x1")
            x2 = touch(root / "x" / "x2")
            zz = touch(root / "x" / "z" / "zz")
            yy = touch(root / "y" / "yy")
            tree = FolderTree(
                name="top",
                path=root,
                children=(
                    FolderTree(
                        name="x",
                        path=root / "x",
                        files=(x1, x2),
                        children=(FolderTree(name="z", path=root / "x" / "z", files=(zz,)),),
                    ),
                    FolderTree(name="y", path=root / "y", files=(yy,)),
                ),
            )

            lines = render_tree(tree, NAMES_ONLY)

            self.assertEqual(
                lines,
                [
                    "TOP(FOLDER)",
                    "├── x(FOLDER)",
                    "│   ├── x1",
                    "│   ├── x2",
                    "│   └── z(FOLDER)",
                    "│       └── zz",
                    "└── y(FOLDER)",
                    "    └── yy",
                ],
            )

    def test_tree_indent_ignores_own_flag(self) -> None:
        self.assertEqual(tree_indent([]), "")
        self.assertEqual(tree_indent([False]), "")
        self.assertEqual(tree_indent([False, True, False]), "│       ")

    def test_size_and_missing_file_labels(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "sizes"
            one_mb = touch(root / "one.bin", MB)
            tree = FolderTree(name="sizes", path=root, files=(one_mb, root / "ghost.txt"))

            lines = render_tree(tree, HighlightConfig(show_size=True, highlight=False))

            self.assertEqual(lines[1], "├── one.bin (1048576 B) (1.00 MB)")
            self.assertEqual(lines[2], "└── ghost.txt (unavailable)")

    def test_date_labels_follow_toggles(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "dates"
            note = touch(root / "note.txt")
            tree = FolderTree(name="dates", path=root, files=(note,))

            plain = render_tree(tree, NAMES_ONLY)[1]
            dated = render_tree(
                tree,
                HighlightConfig(show_size=False, highlight=False, show_creation_date=True, show_date_change=True),
            )[1]

            self.assertEqual(plain, "└── note.txt")
            self.assertRegex(
                dated,
                r"^└── note\.txt \|\|Created: \d{4}-\d\d-\d\d \d\d:\d\d:\d\d\|\| "
                r"\|\|Last change: \d{4}-\d\d-\d\d \d\d:\d\d:\d\d\|\|$",
            )

    def test_highlight_colour_wraps_only_file_name(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "colors"
            small = touch(root / "small.txt", 10)
            empty = touch(root / "empty.txt", 0)
            tree = FolderTree(name="colors", path=root, files=(small, empty))
            theme = DEFAULT_THEME

            lines = render_tree(tree, HighlightConfig(show_size=True, highlight=True), theme)

            self.assertIn(f"{theme.highlight_minor}small.txt{theme.reset} (10 B)", lines[1])
            self.assertIn(f"{theme.highlight_zero}empty.txt{theme.reset} (0 B)", lines[2])
            branch_part = lines[1].split("small.txt")[0]
            self.assertEqual(branch_part, f"{theme.tree_branch}├── {theme.reset}{theme.highlight_minor}")


class ClassifyFileSizeTests(unittest.TestCase):
    def test_ladder_with_default_thresholds(self) -> None:
        config = HighlightConfig()

        self.assertEqual(classify_file_size(50 * MB, config), HighlightClass.MINOR)
        self.assertEqual(classify_file_size(100 * MB, config), HighlightClass.MINOR)
        self.assertEqual(classify_file_size(500 * MB, config), HighlightClass.MEDIUM)
        self.assertEqual(classify_file_size(1000 * MB, config), HighlightClass.MEDIUM)
        self.assertEqual(classify_file_size(4500 * MB, config), HighlightClass.ABOVE_AVERAGE)
        self.assertEqual(classify_file_size(6000 * MB, config), HighlightClass.ABOVE_AVERAGE)

    def test_gap_between_medium_and_above_average_has_no_class(self) -> None:
        config = HighlightConfig()

        self.assertIsNone(classify_file_size(2000 * MB, config))
        self.assertIsNone(classify_file_size(4000 * MB, config))

    def test_max_class_only_reached_with_non_monotonic_thresholds(self) -> None:
        config = HighlightConfig(above_average_size_light=10_000, max_size_light=3_000)

        self.assertEqual(classify_file_size(4000 * MB, config), HighlightClass.MAX)
        self.assertIsNone(classify_file_size(2000 * MB, config))

    def test_zero_bytes_always_zero_class(self) -> None:
        for config in (
            HighlightConfig(),
            HighlightConfig(min_size_light=-5, medium_size_light=-10, above_average_size_light=-20, max_size_light=-1),
        ):
            self.assertEqual(classify_file_size(0, config), HighlightClass.ZERO)

    def test_disabled_highlight_classifies_nothing(self) -> None:
        config = HighlightConfig(highlight=False)

        self.assertIsNone(classify_file_size(0, config))
        self.assertIsNone(classify_file_size(5 * MB, config))


if __name__ == "__main__":
    unittest.main()
