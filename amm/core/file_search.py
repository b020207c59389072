"""Locates .desktop files under the XDG application directories or user-given ones."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from PyQt6.QtCore import QStandardPaths

from amm.core.logger import get_logger

_log = get_logger("file_search")

DESKTOP_SUFFIX = ".desktop"


def default_application_dirs() -> list[str]:
    """XDG application directories, e.g. ~/.local/share/applications and /usr/share/applications."""
    return QStandardPaths.standardLocations(QStandardPaths.StandardLocation.ApplicationsLocation)


class DesktopFileSearch:
    def __init__(self) -> None:
        self._directories: list[str] = []
        self._desktop_file_names: list[str] = []
        self._bad_paths: list[str] = []

    def register_directories(self, directories: Iterable[str]) -> None:
        for d in directories:
            d = os.path.expanduser(d)
            if d and d not in self._directories:
                self._directories.append(d)

    def register_default_directories(self) -> None:
        self.register_directories(default_application_dirs())

    @property
    def directories(self) -> list[str]:
        return list(self._directories)

    def resolve(self) -> None:
        """Walk every registered directory for .desktop files."""
        found: list[str] = []
        self._bad_paths = []

        for directory in self._directories:
            if not os.path.isdir(directory):
                _log.warning("Cannot open directory %s", directory)
                self._bad_paths.append(directory)
                continue
            for root, dirs, files in os.walk(directory, onerror=self._walk_error):
                dirs.sort()
                for name in sorted(files):
                    if name.endswith(DESKTOP_SUFFIX):
                        found.append(str(Path(root) / name))

        unique: list[str] = []
        seen: set[str] = set()
        for path in found:
            if path not in seen:
                seen.add(path)
                unique.append(path)
        self._desktop_file_names = unique
        _log.debug("Found %d desktop files in %d directories", len(unique), len(self._directories))

    def _walk_error(self, error: OSError) -> None:
        _log.warning("Cannot read %s: %s", error.filename, error.strerror)
        if error.filename and error.filename not in self._bad_paths:
            self._bad_paths.append(error.filename)

    @property
    def desktop_file_names(self) -> list[str]:
        return list(self._desktop_file_names)

    @property
    def bad_paths(self) -> list[str]:
        return list(self._bad_paths)
