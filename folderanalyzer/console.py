"""Line-mode console I/O for the interactive menus.

Wraps prompt input and stdout writes behind one object so menus and the
navigator never touch ``input``/``sys.stdout`` directly.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable

from .ui_theme import PLAIN_THEME, UITheme, paint

PAUSE_PROMPT = "Press Enter to continue..."


def _stdout_write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


class ConsoleController:
    def __init__(
        self,
        theme: UITheme = PLAIN_THEME,
        read_line: Callable[[str], str] = input,
        write: Callable[[str], None] = _stdout_write,
    ) -> None:
        self.theme = theme
        self._read_line = read_line
        self._write = write

    def prompt(self, text: str = "") -> str | None:
        """Read one line; ``None`` once input is exhausted."""
        try:
            return self._read_line(text)
        except EOFError:
            return None

    def line(self, text: str = "") -> None:
        self._write(f"{text}\n")

    def lines(self, rows: Iterable[str]) -> None:
        for row in rows:
            self.line(row)

    def warning(self, text: str) -> None:
        """Diagnostics sink: print ``text`` in the warning colour."""
        self.line(paint(self.theme.warning, text, self.theme))

    def error(self, text: str) -> None:
        self.line(paint(self.theme.error, text, self.theme))

    def clear(self) -> None:
        if self.theme.clear_screen:
            self._write(self.theme.clear_screen)

    def pause(self) -> None:
        self.prompt(f"\n{PAUSE_PROMPT}")


__all__ = ["ConsoleController", "PAUSE_PROMPT"]
