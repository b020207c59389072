"""Desktop entries sorted into subcategories, and the menu representation built from them."""

from __future__ import annotations

from typing import Iterable

from amm.core.categories import (
    DEFAULT_CATEGORIES,
    UNCLASSIFIED_ICON,
    UNCLASSIFIED_NAME,
    CategoryDefinition,
    CategoryTable,
    Subcategory,
)
from amm.core.desktop_parser import DesktopEntry, Validity, load_desktop_file
from amm.core.icon_service import IconService, IdentityIconService
from amm.core.logger import get_logger
from amm.core.representation import (
    MenuEnd,
    MenuStart,
    Program,
    Representation,
    SubcategoryEnd,
    SubcategoryStart,
)
from amm.core.stats import Stats

_log = get_logger("menu")


class Menu:
    """Collection of desktop entries divided into subcategories."""

    def __init__(self, categories: Iterable[CategoryDefinition] = DEFAULT_CATEGORIES) -> None:
        self._table = CategoryTable(categories)
        self._unclassified = Subcategory(UNCLASSIFIED_NAME, UNCLASSIFIED_ICON)
        self._icon_service: IconService = IdentityIconService()
        self._stats = Stats()

    def load_custom_categories(self, lines: Iterable[str]) -> None:
        """Replace the category table with the subcategories defined in lines."""
        self._table = CategoryTable.from_lines(lines)
        _log.debug("Loaded %d custom subcategories", len(self._table))

    def register_icon_service(self, icon_service: IconService) -> None:
        self._icon_service = icon_service

    def subcategories(self) -> list[Subcategory]:
        return self._table.subcategories

    def unclassified(self) -> Subcategory:
        return self._unclassified

    def stats(self) -> Stats:
        return self._stats

    def populate(self, desktop_file_names: Iterable[str]) -> None:
        for file_name in desktop_file_names:
            self._stats.total_files += 1
            entry = load_desktop_file(file_name)

            if entry is None:
                _log.debug("Unreadable: %s", file_name)
                self._stats.add_unparsed_file(file_name)
            elif entry.validity is Validity.SUPPRESSED:
                _log.debug("Suppressed: %s", file_name)
                self._stats.total_suppressed_files += 1
            elif entry.validity is Validity.MISSING_FIELDS:
                _log.debug("Missing Name, Icon or Exec: %s", file_name)
                self._stats.add_unparsed_file(file_name)
            else:
                self._stats.total_parsed_files += 1
                self.classify(entry)

    def classify(self, entry: DesktopEntry) -> Subcategory:
        """Add entry to the subcategory of its first known classification."""
        for classification in entry.categories:
            subcategory = self._table.lookup(classification)
            if subcategory is not None:
                subcategory.add_desktop_entry(entry)
                return subcategory

        self._unclassified.add_desktop_entry(entry)
        self._stats.total_unclassified_files += 1
        self._stats.add_unhandled_classifications(entry.categories)
        _log.debug("Unclassified: %s %s", entry.file_path, list(entry.categories))
        return self._unclassified

    def sort(self) -> None:
        self._table.subcategories.sort(key=lambda s: s.display_name)
        for subcategory in self._table.subcategories:
            subcategory.sort_desktop_entries()
        self._unclassified.sort_desktop_entries()

    def representations(self) -> tuple[Representation, ...]:
        icon = self._icon_service.resolved_name
        nodes: list[Representation] = [MenuStart()]
        for subcategory in self._table.subcategories:
            if not subcategory.has_entries():
                continue
            nodes.append(SubcategoryStart(subcategory.display_name, icon(subcategory.icon_name)))
            for entry in subcategory.desktop_entries:
                nodes.append(Program(entry.name, icon(entry.icon), entry.exec_cmd))
            nodes.append(SubcategoryEnd(subcategory.display_name))
        nodes.append(MenuEnd())
        return tuple(nodes)
