"""Display settings and their persistent JSON store.

``HighlightConfig`` is the read-only snapshot handed to renderers.
``SettingsStore`` owns the current values, hands out snapshots and writes
changes back to the JSON config file. Loading is defensive: a missing or
malformed file, or a wrongly typed value, falls back to the default for that
field only.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "folderanalyzer"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class HighlightConfig:
    """Display toggles plus size-highlight thresholds in megabytes."""

    show_size: bool = True
    show_date_change: bool = False
    show_creation_date: bool = False
    highlight: bool = True
    shorten_absolute_path: bool = False
    min_size_light: int = 100
    medium_size_light: int = 1000
    above_average_size_light: int = 4000
    max_size_light: int = 5000


@dataclass(frozen=True)
class SettingField:
    """One editable setting: menu label, config attribute and value type."""

    label: str
    attribute: str
    kind: type

    @property
    def is_toggle(self) -> bool:
        return self.kind is bool


SETTING_FIELDS: tuple[SettingField, ...] = (
    SettingField("Show size", "show_size", bool),
    SettingField("Show date of last change", "show_date_change", bool),
    SettingField("Show creation date", "show_creation_date", bool),
    SettingField("Backlight", "highlight", bool),
    SettingField("Shorten the absolute path", "shorten_absolute_path", bool),
    SettingField("Minimum size for highlighting", "min_size_light", int),
    SettingField("Medium size for highlighting", "medium_size_light", int),
    SettingField("Above average size for highlighting", "above_average_size_light", int),
    SettingField("Maximum size for highlighting", "max_size_light", int),
)


def parse_setting_value(field: SettingField, text: str) -> bool | int:
    """Parse user text for ``field``; raises ``ValueError`` when invalid.

    Toggles accept ``true``/``false`` in any case. Thresholds accept any
    integer, negative ones included.
    """
    candidate = text.strip()
    if field.is_toggle:
        lowered = candidate.lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
        raise ValueError(f"expected true or false, got {text!r}")
    return int(candidate)


def _coerce(field: SettingField, value: object, default: bool | int) -> bool | int:
    """Return ``value`` when it has exactly the field's JSON type, else ``default``."""
    if field.is_toggle:
        return value if isinstance(value, bool) else default
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return value


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep runtime behavior
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def load_highlight_config() -> HighlightConfig:
    """Build a ``HighlightConfig`` from the config file, field by field."""
    data = load_config()
    defaults = HighlightConfig()
    values = {
        field.attribute: _coerce(field, data.get(field.attribute), getattr(defaults, field.attribute))
        for field in SETTING_FIELDS
    }
    return HighlightConfig(**values)


def save_highlight_config(config: HighlightConfig) -> None:
    """Merge ``config`` into the config file, keeping unrelated keys."""
    data = load_config()
    for item in fields(config):
        data[item.name] = getattr(config, item.name)
    save_config(data)


class SettingsStore:
    """Owner of the current settings.

    Renderers never hold on to the store; they take a ``snapshot()`` right
    before each render so changes show up on the next one.
    """

    def __init__(self, config: HighlightConfig | None = None, *, persist: bool = True) -> None:
        self._config = config if config is not None else HighlightConfig()
        self._persist = persist

    @classmethod
    def load(cls) -> "SettingsStore":
        return cls(load_highlight_config(), persist=True)

    def snapshot(self) -> HighlightConfig:
        return self._config

    def get(self, field: SettingField) -> bool | int:
        return getattr(self._config, field.attribute)

    def set(self, field: SettingField, value: bool | int) -> None:
        """Store ``value`` for ``field`` and persist when enabled."""
        self._config = replace(self._config, **{field.attribute: field.kind(value)})
        if self._persist:
            save_highlight_config(self._config)


__all__ = [
    "CONFIG_PATH",
    "HighlightConfig",
    "SETTING_FIELDS",
    "SettingField",
    "SettingsStore",
    "load_config",
    "load_highlight_config",
    "parse_setting_value",
    "save_config",
    "save_highlight_config",
]
