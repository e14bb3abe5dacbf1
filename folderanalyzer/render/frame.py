"""Titled text frames used by the menus and the command box."""

from __future__ import annotations

from collections.abc import Sequence

from ..ui_theme import PLAIN_THEME, UITheme, paint

HORIZONTAL = "═"
VERTICAL = "║"
CORNER = "+"


def frame_top(title: str, inner_width: int) -> str:
    """Return ``+═══[ TITLE ]═══+`` spanning ``inner_width`` columns inside the corners."""
    label = f"[ {title} ]"
    left = max(0, (inner_width - len(label)) // 2)
    right = max(0, inner_width - left - len(label))
    return f"{CORNER}{HORIZONTAL * left}{label}{HORIZONTAL * right}{CORNER}"


def frame_bottom(inner_width: int) -> str:
    return f"{CORNER}{HORIZONTAL * inner_width}{CORNER}"


def frame_row(text: str, inner_width: int, visible_width: int | None = None) -> str:
    """Return one framed row; ``visible_width`` overrides ``len(text)`` for styled text."""
    width = len(text) if visible_width is None else visible_width
    padding = " " * max(0, inner_width - 1 - width)
    return f"{VERTICAL} {text}{padding}{VERTICAL}"


def render_frame(
    title: str,
    rows: Sequence[str],
    inner_width: int,
    theme: UITheme = PLAIN_THEME,
) -> list[str]:
    """Render plain ``rows`` inside a titled frame."""
    lines = [paint(theme.menu_border, frame_top(title, inner_width), theme)]
    lines.extend(frame_row(row, inner_width) for row in rows)
    lines.append(paint(theme.menu_border, frame_bottom(inner_width), theme))
    return lines


__all__ = ["frame_bottom", "frame_row", "frame_top", "render_frame"]
