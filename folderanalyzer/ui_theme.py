"""UI theme definitions and selection helpers.

Themes are semantic ANSI palettes for the tree view, report tables, menus and
diagnostics. Colour escapes come from Pygments' console colour table so the
names line up with the classic console palette (green, yellow, red, ...).
"""

from __future__ import annotations

from dataclasses import dataclass

from pygments.console import codes

CLEAR_SCREEN = "\033[H\033[J"


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    clear_screen: str
    tree_root: str
    tree_folder: str
    tree_branch: str
    highlight_zero: str
    highlight_minor: str
    highlight_medium: str
    highlight_above_average: str
    highlight_max: str
    table_header: str
    table_name: str
    menu_banner: str
    menu_border: str
    setting_on: str
    setting_off: str
    warning: str
    error: str


DEFAULT_THEME = UITheme(
    name="default",
    reset=codes["reset"],
    clear_screen=CLEAR_SCREEN,
    tree_root=codes["bold"],
    tree_folder=codes["brightblue"],
    tree_branch=codes["faint"],
    highlight_zero=codes["white"],
    highlight_minor=codes["brightgreen"],
    highlight_medium=codes["brightyellow"],
    highlight_above_average=codes["brightred"],
    highlight_max=codes["red"],
    table_header=codes["brightyellow"],
    table_name=codes["brightcyan"],
    menu_banner=codes["brightblue"],
    menu_border="",
    setting_on=codes["brightgreen"],
    setting_off=codes["brightred"],
    warning=codes["brightyellow"],
    error=codes["brightred"],
)

CLASSIC_THEME = UITheme(
    name="classic",
    reset=codes["reset"],
    clear_screen=CLEAR_SCREEN,
    tree_root="",
    tree_folder="",
    tree_branch="",
    highlight_zero=codes["white"],
    highlight_minor=codes["green"],
    highlight_medium=codes["yellow"],
    highlight_above_average=codes["red"],
    highlight_max=codes["magenta"],
    table_header=codes["yellow"],
    table_name=codes["cyan"],
    menu_banner=codes["blue"],
    menu_border="",
    setting_on=codes["green"],
    setting_off=codes["red"],
    warning=codes["yellow"],
    error=codes["red"],
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    clear_screen="",
    tree_root="",
    tree_folder="",
    tree_branch="",
    highlight_zero="",
    highlight_minor="",
    highlight_medium="",
    highlight_above_average="",
    highlight_max="",
    table_header="",
    table_name="",
    menu_banner="",
    menu_border="",
    setting_on="",
    setting_off="",
    warning="",
    error="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    CLASSIC_THEME.name: CLASSIC_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


def paint(color: str, text: str, theme: UITheme) -> str:
    """Wrap ``text`` in ``color`` and the theme reset, or return it unchanged."""
    if not color:
        return text
    return f"{color}{text}{theme.reset}"


__all__ = [
    "CLASSIC_THEME",
    "CLEAR_SCREEN",
    "DEFAULT_THEME",
    "PLAIN_THEME",
    "UITheme",
    "available_theme_names",
    "normalize_theme_name",
    "paint",
    "resolve_theme",
]
