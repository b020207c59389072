"""Configuration manager for amm. Persists defaults to ~/.config/amm/settings.json."""

import json
from pathlib import Path
from typing import Any

CONFIG_DIR = Path.home() / ".config" / "amm"
SETTINGS_FILE = CONFIG_DIR / "settings.json"
CACHE_DIR = Path.home() / ".cache" / "amm"

DEFAULTS: dict[str, Any] = {
    "output_file": "~/.jwmrc-amm",
    "category_file": "",
    "input_directories": [],
    "icon_extension": "",
    "iconize": False,
    "icon_theme": "hicolor",
    "summary_type": "normal",
}


def _valid_setting(key: str, value: Any) -> bool:
    """Saved values must be known keys holding the same type as their default."""
    if key not in DEFAULTS or not isinstance(value, type(DEFAULTS[key])):
        return False
    if isinstance(value, list):
        return all(isinstance(item, str) for item in value)
    return True


class Config:
    """Settings with JSON persistence; command line options override these per run."""

    def __init__(self, settings_file: Path = SETTINGS_FILE) -> None:
        self.settings_file = Path(settings_file)
        self._data: dict[str, Any] = dict(DEFAULTS)
        self._load()

    def _load(self) -> None:
        if self.settings_file.exists():
            try:
                with open(self.settings_file, "r") as f:
                    saved = json.load(f)
                if isinstance(saved, dict):
                    self._data.update({k: v for k, v in saved.items() if _valid_setting(k, v)})
            except (json.JSONDecodeError, OSError):
                pass

    def save(self) -> None:
        try:
            self.settings_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.settings_file, "w") as f:
                json.dump(self._data, f, indent=2)
        except OSError:
            pass

    def get(self, key: str, fallback: Any = None) -> Any:
        return self._data.get(key, fallback if fallback is not None else DEFAULTS.get(key))

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value
        self.save()
