"""Subcategories of the generated menu and the table routing classification tags to them.

A custom category file has one subcategory per line:

    DisplayName:IconName:Tag1[:Tag2...]

Lines starting with '#' are comments.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from amm.core.desktop_parser import DesktopEntry
from amm.core.logger import get_logger

_log = get_logger("categories")

CATEGORY_DELIM = ":"
COMMENT_PREFIX = "#"
UNCLASSIFIED_NAME = "Unclassified"
UNCLASSIFIED_ICON = "unclassified"


@dataclass(frozen=True)
class CategoryDefinition:
    display_name: str
    icon_name: str
    classification_names: tuple[str, ...]


DEFAULT_CATEGORIES: tuple[CategoryDefinition, ...] = (
    CategoryDefinition("Accessories", "accessories", ("Utility",)),
    CategoryDefinition("Development", "development", ("Development",)),
    CategoryDefinition("Education", "education", ("Education",)),
    CategoryDefinition("Games", "games", ("Game",)),
    CategoryDefinition("Graphics", "graphics", ("Graphics",)),
    CategoryDefinition("Internet", "internet", ("Network",)),
    CategoryDefinition("Multimedia", "multimedia", ("AudioVideo", "Audio", "Video")),
    CategoryDefinition("Office", "office", ("Office",)),
    CategoryDefinition("Settings", "settings", ("Settings",)),
    CategoryDefinition("System", "system", ("System",)),
    CategoryDefinition("Other", "others", ("Other",)),
)


@dataclass
class Subcategory:
    """A collection of desktop entries shown under one submenu."""
    display_name: str
    icon_name: str
    classification_names: list[str] = field(default_factory=list)
    desktop_entries: list[DesktopEntry] = field(default_factory=list)

    def has_entries(self) -> bool:
        return len(self.desktop_entries) > 0

    def add_desktop_entry(self, entry: DesktopEntry) -> None:
        self.desktop_entries.append(entry)

    def sort_desktop_entries(self) -> None:
        self.desktop_entries.sort(key=lambda e: e.name)


def parse_category_line(line: str) -> CategoryDefinition | None:
    """Parse one custom category line, or return None if it should be skipped."""
    stripped = line.strip()
    if not stripped or stripped.startswith(COMMENT_PREFIX):
        return None

    # Empty fields are dropped before counting, so "Games::Game" has two fields.
    tokens = [t.strip() for t in stripped.split(CATEGORY_DELIM) if t.strip()]
    if len(tokens) < 3:
        _log.debug("Skipping category line with too few fields: %r", line)
        return None

    return CategoryDefinition(tokens[0], tokens[1], tuple(tokens[2:]))


def parse_category_lines(lines: Iterable[str]) -> list[CategoryDefinition]:
    return [d for d in (parse_category_line(line) for line in lines) if d is not None]


class CategoryTable:
    """Ordered subcategories plus the tag -> subcategory lookup.

    A tag belongs to the first subcategory that declares it.
    """

    def __init__(self, definitions: Iterable[CategoryDefinition] = DEFAULT_CATEGORIES) -> None:
        self._subcategories: list[Subcategory] = []
        self._by_tag: dict[str, Subcategory] = {}
        for definition in definitions:
            self._add(definition)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "CategoryTable":
        return cls(parse_category_lines(lines))

    def _add(self, definition: CategoryDefinition) -> None:
        tags: list[str] = []
        for tag in definition.classification_names:
            if tag in self._by_tag:
                _log.debug(
                    "Classification %s already belongs to %s, ignored for %s",
                    tag, self._by_tag[tag].display_name, definition.display_name,
                )
            elif tag not in tags:
                tags.append(tag)
        if not tags:
            return

        subcategory = Subcategory(definition.display_name, definition.icon_name, tags)
        self._subcategories.append(subcategory)
        for tag in tags:
            self._by_tag[tag] = subcategory

    @property
    def subcategories(self) -> list[Subcategory]:
        return self._subcategories

    def lookup(self, classification: str) -> Subcategory | None:
        return self._by_tag.get(classification)

    def __len__(self) -> int:
        return len(self._subcategories)

    def __contains__(self, classification: str) -> bool:
        return classification in self._by_tag
