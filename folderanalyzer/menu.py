"""Main menu, settings editor and the path prompt that opens a session."""

from __future__ import annotations

from pathlib import Path

from .console import ConsoleController
from .navigator import NavigatorSession
from .render import frame_bottom, frame_row, frame_top, render_frame
from .settings import SETTING_FIELDS, SettingField, SettingsStore, parse_setting_value
from .ui_theme import paint

BANNER = (
    "",
    "  ░██████  ░██████████   ░███    ",
    " ░██   ░██ ░██          ░██░██   ",
    "░██        ░██         ░██  ░██  ",
    "░██        ░█████████ ░█████████ ",
    "░██        ░██        ░██    ░██ ",
    " ░██   ░██ ░██        ░██    ░██ ",
    "  ░██████  ░██        ░██    ░██ ",
    "",
)
MAIN_MENU_WIDTH = 28
MAIN_MENU_ITEMS = (
    "1 - settings",
    "2 - start scanning",
    "3 - exit",
)
OPTION_SETTINGS = 1
OPTION_SCAN = 2
OPTION_EXIT = 3
SETTINGS_FRAME_WIDTH = 100
BACK_KEYWORD = "back"


def setting_value_text(field: SettingField, value: bool | int) -> str:
    if field.is_toggle:
        return "true" if value else "false"
    return f"{value}MB"


def settings_menu_lines(settings: SettingsStore, console: ConsoleController) -> list[str]:
    """Render the settings frame with one numbered row per field."""
    theme = console.theme
    lines = [frame_top("Settings", SETTINGS_FRAME_WIDTH)]
    for number, field in enumerate(SETTING_FIELDS, start=1):
        value = settings.get(field)
        value_text = setting_value_text(field, value)
        if field.is_toggle:
            color = theme.setting_on if value else theme.setting_off
        else:
            color = theme.highlight_minor
        text = f"({number}) {field.label}: "
        lines.append(
            frame_row(
                text + paint(color, value_text, theme),
                SETTINGS_FRAME_WIDTH,
                visible_width=len(text) + len(value_text),
            )
        )
    lines.append(frame_row(f"write {BACK_KEYWORD} to exit to the menu", SETTINGS_FRAME_WIDTH))
    lines.append(frame_bottom(SETTINGS_FRAME_WIDTH))
    return lines


def read_settings_option(console: ConsoleController) -> int | None:
    """Return a 1-based field number, or ``None`` for ``back``/end of input."""
    console.line("Select an option:")
    while True:
        text = console.prompt()
        if text is None or text.strip().lower() == BACK_KEYWORD:
            return None
        try:
            option = int(text.strip())
        except ValueError:
            option = 0
        if 1 <= option <= len(SETTING_FIELDS):
            return option
        console.line("Invalid option. Please try again:")


def edit_setting(settings: SettingsStore, field: SettingField, console: ConsoleController) -> bool:
    """Prompt for and store a new value of ``field``; ``False`` when rejected."""
    console.line(f"Current value for {field.label}: {setting_value_text(field, settings.get(field))}")
    hint = "Enter new value (true/false): " if field.is_toggle else "Enter a new value (numerical value): "
    text = console.prompt(hint)
    try:
        value = parse_setting_value(field, text or "")
    except ValueError:
        console.error("Invalid input!")
        console.pause()
        return False
    settings.set(field, value)
    console.line("Updated!")
    console.pause()
    return True


def run_settings_menu(settings: SettingsStore, console: ConsoleController) -> None:
    while True:
        console.clear()
        console.lines(settings_menu_lines(settings, console))
        option = read_settings_option(console)
        if option is None:
            return
        edit_setting(settings, SETTING_FIELDS[option - 1], console)


def open_session(settings: SettingsStore, console: ConsoleController) -> None:
    """Ask for a start path and run a navigator session there."""
    console.clear()
    text = console.prompt("Enter the full path to the file or folder (with extension for files): ")
    if text is None:
        return
    text = text.strip()
    if text.lower() == BACK_KEYWORD:
        return
    path = Path(text).expanduser()
    if not text or not path.exists():
        console.error("The specified file or folder does not exist.")
        console.pause()
        return
    NavigatorSession(path, settings, console).run()


def read_main_option(console: ConsoleController) -> int | None:
    console.line("Select an option:")
    while True:
        text = console.prompt()
        if text is None:
            return None
        try:
            option = int(text.strip())
        except ValueError:
            option = 0
        if 1 <= option <= len(MAIN_MENU_ITEMS):
            return option
        console.line("Invalid option. Please try again:")


def run_main_menu(settings: SettingsStore, console: ConsoleController) -> None:
    """Loop over the main menu until ``exit`` or end of input."""
    while True:
        console.clear()
        console.lines(paint(console.theme.menu_banner, row, console.theme) for row in BANNER)
        console.lines(render_frame("MENU", MAIN_MENU_ITEMS, MAIN_MENU_WIDTH, console.theme))
        option = read_main_option(console)
        if option is None or option == OPTION_EXIT:
            console.line("Exiting.")
            return
        if option == OPTION_SETTINGS:
            run_settings_menu(settings, console)
        elif option == OPTION_SCAN:
            open_session(settings, console)


__all__ = [
    "MAIN_MENU_ITEMS",
    "edit_setting",
    "open_session",
    "run_main_menu",
    "run_settings_menu",
    "settings_menu_lines",
]
