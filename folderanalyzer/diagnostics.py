"""Diagnostics sinks for non-fatal scan and search problems.

Scanner functions report unreadable directories through a single-argument
callable and keep going. The sink decides where the text ends up.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import TextIO

from .ui_theme import PLAIN_THEME, UITheme, paint

DiagnosticSink = Callable[[str], None]


def write_diagnostic(message: str) -> None:
    """Default sink: one uncoloured line on ``stderr``."""
    sys.stderr.write(f"{message}\n")


def console_diagnostics(theme: UITheme = PLAIN_THEME, stream: TextIO | None = None) -> DiagnosticSink:
    """Build a sink writing warning-coloured lines to ``stream`` (``stderr`` by default)."""

    def emit(message: str) -> None:
        target = stream if stream is not None else sys.stderr
        target.write(paint(theme.warning, message, theme) + "\n")
        target.flush()

    return emit


class DiagnosticCollector:
    """Sink that keeps every message in order, for callers that report later."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)

    def __len__(self) -> int:
        return len(self.messages)


__all__ = [
    "DiagnosticSink",
    "DiagnosticCollector",
    "console_diagnostics",
    "write_diagnostic",
]
