"""Tests for the main menu, settings editor and session prompt."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from folderanalyzer.console import ConsoleController
from folderanalyzer.menu import edit_setting, open_session, run_main_menu, run_settings_menu, settings_menu_lines
from folderanalyzer.settings import SETTING_FIELDS, HighlightConfig, SettingsStore
from folderanalyzer.ui_theme import DEFAULT_THEME, PLAIN_THEME


class ScriptedConsole(ConsoleController):
    def __init__(self, answers: list[str], theme=PLAIN_THEME) -> None:
        self.answers = list(answers)
        self.output: list[str] = []
        super().__init__(theme, read_line=self._answer, write=self.output.append)

    def _answer(self, prompt: str) -> str:
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    @property
    def text(self) -> str:
        return "".join(self.output)


class SettingsMenuTests(unittest.TestCase):
    def test_menu_lists_every_field_with_value(self) -> None:
        lines = settings_menu_lines(SettingsStore(persist=False), ScriptedConsole([]))

        self.assertIn("[ Settings ]", lines[0])
        self.assertIn("(1) Show size: true", lines[1])
        self.assertIn("(2) Show date of last change: false", lines[2])
        self.assertIn("(9) Maximum size for highlighting: 5000MB", lines[9])
        self.assertEqual(len({len(line) for line in lines}), 1)

    def test_coloured_rows_keep_frame_width(self) -> None:
        lines = settings_menu_lines(SettingsStore(persist=False), ScriptedConsole([], theme=DEFAULT_THEME))

        self.assertIn(DEFAULT_THEME.setting_on, lines[1])
        stripped = lines[1].replace(DEFAULT_THEME.setting_on, "").replace(DEFAULT_THEME.reset, "")
        self.assertEqual(len(stripped), len(lines[0]))

    def test_edit_setting_updates_or_rejects(self) -> None:
        store = SettingsStore(persist=False)
        toggle = SETTING_FIELDS[0]
        threshold = SETTING_FIELDS[5]

        self.assertTrue(edit_setting(store, toggle, ScriptedConsole(["false", ""])))
        self.assertFalse(edit_setting(store, threshold, ScriptedConsole(["lots", ""])))
        self.assertTrue(edit_setting(store, threshold, ScriptedConsole(["250", ""])))

        self.assertFalse(store.snapshot().show_size)
        self.assertEqual(store.snapshot().min_size_light, 250)

    def test_settings_loop_edits_then_goes_back(self) -> None:
        store = SettingsStore(persist=False)
        console = ScriptedConsole(["42", "4", "false", "", "back"])

        run_settings_menu(store, console)

        self.assertFalse(store.snapshot().highlight)
        self.assertIn("Invalid option. Please try again:", console.text)
        self.assertIn("Updated!", console.text)


class MainMenuTests(unittest.TestCase):
    def test_exit_option_leaves_loop(self) -> None:
        console = ScriptedConsole(["9", "3"])

        run_main_menu(SettingsStore(persist=False), console)

        self.assertIn("[ MENU ]", console.text)
        self.assertIn("Invalid option. Please try again:", console.text)
        self.assertTrue(console.text.endswith("Exiting.\n"))

    def test_scan_option_opens_session_for_existing_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            console = ScriptedConsole(["2", tmp, "3"])
            with mock.patch("folderanalyzer.menu.NavigatorSession") as session_cls:
                run_main_menu(SettingsStore(persist=False), console)

            session_cls.assert_called_once()
            self.assertEqual(session_cls.call_args.args[0], Path(tmp))
            session_cls.return_value.run.assert_called_once_with()

    def test_open_session_rejects_missing_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            console = ScriptedConsole([str(Path(tmp) / "missing"), ""])
            with mock.patch("folderanalyzer.menu.NavigatorSession") as session_cls:
                open_session(SettingsStore(HighlightConfig(), persist=False), console)

            session_cls.assert_not_called()
            self.assertIn("The specified file or folder does not exist.", console.text)

    def test_open_session_back_returns_without_prompting_more(self) -> None:
        console = ScriptedConsole(["back"])
        with mock.patch("folderanalyzer.menu.NavigatorSession") as session_cls:
            open_session(SettingsStore(persist=False), console)

        session_cls.assert_not_called()


if __name__ == "__main__":
    unittest.main()
