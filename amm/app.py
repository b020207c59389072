"""One run of amm: read categories and desktop files, build the menu, write it, report."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from amm.core import messages
from amm.core.config import Config
from amm.core.file_search import DesktopFileSearch
from amm.core.files import load_lines, write_menu
from amm.core.icon_service import (
    CachingIconService,
    ExtensionIconService,
    ThemeIconService,
)
from amm.core.logger import get_logger
from amm.core.menu import Menu
from amm.core.transformer import JwmTransformer, Transformer

_log = get_logger("app")

EXIT_RUNTIME_ERROR = 1


class AmmError(Exception):
    """A fatal condition; main() reports the message and exits with exit_code."""

    def __init__(self, message: str, exit_code: int = EXIT_RUNTIME_ERROR) -> None:
        super().__init__(message)
        self.exit_code = exit_code


@dataclass
class AmmOptions:
    output_file: str = "~/.jwmrc-amm"
    category_file: str = ""
    input_directories: list[str] = field(default_factory=list)
    icon_extension: str = ""
    iconize: bool = False
    icon_theme: str = "hicolor"
    summary_type: str = "normal"

    @classmethod
    def from_config(cls, config: Config) -> "AmmOptions":
        return cls(
            output_file=config.get("output_file"),
            category_file=config.get("category_file"),
            input_directories=list(config.get("input_directories") or []),
            icon_extension=config.get("icon_extension"),
            iconize=bool(config.get("iconize")),
            icon_theme=config.get("icon_theme"),
            summary_type=config.get("summary_type"),
        )


class AmmApp:
    """Runs the menu pipeline for one set of options."""

    def __init__(
        self,
        options: AmmOptions,
        transformer: Transformer | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.options = options
        self.menu = Menu()
        self.transformer = transformer or JwmTransformer()
        self.desktop_file_names: list[str] = []
        self._out = out or sys.stdout
        self._err = err or sys.stderr

    def run(self) -> None:
        self.read_categories()
        self.register_icon_service()
        self.read_desktop_files()
        self.populate()
        self.write_output_file()
        self.print_summary()

    def read_categories(self) -> None:
        path = self.options.category_file
        if not path:
            return
        lines = load_lines(path)
        if lines is None:
            raise AmmError(messages.bad_category_file(path))
        self.menu.load_custom_categories(lines)

    def register_icon_service(self) -> None:
        if self.options.iconize:
            service = ThemeIconService(self.options.icon_theme)
        elif self.options.icon_extension:
            service = ExtensionIconService(self.options.icon_extension)
        else:
            return
        self.menu.register_icon_service(CachingIconService(service))

    def read_desktop_files(self) -> None:
        search = DesktopFileSearch()
        if self.options.input_directories:
            search.register_directories(self.options.input_directories)
        else:
            search.register_default_directories()
        search.resolve()

        if search.bad_paths:
            print(messages.bad_input_paths(search.bad_paths), file=self._err)
        self.desktop_file_names = search.desktop_file_names

    def populate(self) -> None:
        self.menu.populate(self.desktop_file_names)
        if self.menu.stats().total_parsed_files == 0:
            raise AmmError(messages.no_valid_desktop_entries())
        self.menu.sort()

    def write_output_file(self) -> None:
        text = self.transformer.render(self.menu.representations())
        try:
            write_menu(self.options.output_file, text)
        except OSError as e:
            _log.error("Writing %s failed: %s", self.options.output_file, e)
            raise AmmError(messages.bad_output_file(self.options.output_file)) from e

    def print_summary(self) -> None:
        self._out.write(self.menu.stats().details(self.options.summary_type))
        self._out.write(messages.created(self.options.output_file))
