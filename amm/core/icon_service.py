"""Icon name resolution for menu entries and submenus.

Services, all exposing resolved_name(icon_name) -> str:
  - IdentityIconService: icon names pass through unchanged
  - ExtensionIconService: appends a file extension (e.g. ".png")
  - ThemeIconService: naive scan of an icon theme and its parents on disk
  - CachingIconService: remembers the answers of another service
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol

from PyQt6.QtCore import QStandardPaths

from amm.core.entry_line import EntryLine
from amm.core.files import load_lines
from amm.core.logger import get_logger

_log = get_logger("icon_service")

FALLBACK_THEME = "hicolor"
ICON_EXTENSIONS = [".png", ".svg", ".xpm"]
ICON_SIZES = ["48x48", "32x32", "24x24", "22x22", "16x16", "64x64", "96x96", "128x128", "256x256", "scalable"]
ICON_CATEGORIES = ["apps", "applications", "categories", "places", "devices", "mimetypes"]
PIXMAPS_DIR = Path("/usr/share/pixmaps")


class IconService(Protocol):
    def resolved_name(self, icon_name: str) -> str: ...


class IdentityIconService:
    def resolved_name(self, icon_name: str) -> str:
        return icon_name


class ExtensionIconService:
    """Appends an extension to every icon name that doesn't already carry it."""

    def __init__(self, extension: str) -> None:
        if extension and not extension.startswith("."):
            extension = "." + extension
        self.extension = extension

    def resolved_name(self, icon_name: str) -> str:
        if not self.extension or icon_name.endswith(self.extension):
            return icon_name
        return icon_name + self.extension


class CachingIconService:
    """Wraps another service; each name is resolved at most once."""

    def __init__(self, service: IconService) -> None:
        self._service = service
        self._cache: dict[str, str] = {}

    def is_cached(self, icon_name: str) -> bool:
        return icon_name in self._cache

    def resolved_name(self, icon_name: str) -> str:
        if icon_name not in self._cache:
            self._cache[icon_name] = self._service.resolved_name(icon_name)
        return self._cache[icon_name]


def icon_theme_dirs() -> list[Path]:
    """Base directories that may hold icon themes, in lookup order."""
    dirs = [Path.home() / ".icons"]
    for data_dir in QStandardPaths.standardLocations(QStandardPaths.StandardLocation.GenericDataLocation):
        dirs.append(Path(data_dir) / "icons")
    unique: list[Path] = []
    for d in dirs:
        if d not in unique:
            unique.append(d)
    return unique


class ThemeIconService:
    """Finds icon files by scanning <base>/<theme>/<size>/<category>/<name><ext>.

    Themes are tried in order: the requested theme, its Inherits= parents
    from index.theme, then hicolor. Unresolved names come back unchanged.
    """

    def __init__(self, theme_name: str = FALLBACK_THEME, base_dirs: list[Path] | None = None) -> None:
        self.theme_name = theme_name
        self.base_dirs = [d for d in (base_dirs if base_dirs is not None else icon_theme_dirs()) if d.is_dir()]
        self.themes = self._theme_chain()
        _log.debug("Icon themes searched: %s in %s", self.themes, self.base_dirs)

    def _theme_chain(self) -> list[str]:
        chain = [self.theme_name]
        for parent in self._parents(self.theme_name):
            if parent not in chain:
                chain.append(parent)
        if FALLBACK_THEME not in chain:
            chain.append(FALLBACK_THEME)
        return chain

    def _parents(self, theme_name: str) -> list[str]:
        for base_dir in self.base_dirs:
            lines = load_lines(base_dir / theme_name / "index.theme")
            if lines is None:
                continue
            for raw in lines:
                line = EntryLine(raw)
                if line.key() == "Inherits":
                    return [p.strip() for p in line.value().split(",") if p.strip()]
            return []
        return []

    def resolved_name(self, icon_name: str) -> str:
        if not icon_name:
            return icon_name
        if os.path.isabs(icon_name):
            return icon_name

        for theme in self.themes:
            for base_dir in self.base_dirs:
                theme_dir = base_dir / theme
                if not theme_dir.is_dir():
                    continue
                for size in ICON_SIZES:
                    for category in ICON_CATEGORIES:
                        for ext in ICON_EXTENSIONS:
                            candidate = theme_dir / size / category / f"{icon_name}{ext}"
                            if candidate.is_file():
                                return str(candidate)

        for ext in ICON_EXTENSIONS:
            candidate = PIXMAPS_DIR / f"{icon_name}{ext}"
            if candidate.is_file():
                return str(candidate)

        _log.debug("Icon not found in themes: %s", icon_name)
        return icon_name
