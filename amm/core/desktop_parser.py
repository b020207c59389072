""".desktop file parser: extracts the fields a menu needs (name, icon, exec, categories)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable

from amm.core.entry_line import EntryLine
from amm.core.files import load_lines

DESKTOP_ENTRY_SECTION = "Desktop Entry"
CATEGORIES_DELIM = ";"


class Validity(Enum):
    VALID = "valid"
    MISSING_FIELDS = "missing_fields"
    SUPPRESSED = "suppressed"


@dataclass(frozen=True)
class DesktopEntry:
    """Parsed fields from a .desktop file."""
    file_path: str = ""
    name: str = ""
    icon: str = ""
    exec_cmd: str = ""
    categories: tuple[str, ...] = field(default_factory=tuple)
    no_display: bool = False
    validity: Validity = Validity.MISSING_FIELDS

    @property
    def is_valid(self) -> bool:
        return self.validity is Validity.VALID


def split_categories(raw: str) -> tuple[str, ...]:
    """Split a Categories= value, dropping empty tokens and repeats."""
    seen: list[str] = []
    for token in raw.split(CATEGORIES_DELIM):
        token = token.strip()
        if token and token not in seen:
            seen.append(token)
    return tuple(seen)


def parse_desktop_lines(lines: Iterable[str], file_path: str = "") -> DesktopEntry:
    """Build a DesktopEntry from the lines of one file.

    Only assignments inside the [Desktop Entry] section are read; any later
    section declaration ends it.
    """
    fields: dict[str, str] = {}
    in_desktop_entry = False

    for raw_line in lines:
        line = EntryLine(raw_line)
        if line.is_declaration():
            if in_desktop_entry:
                break
            in_desktop_entry = line.declaration() == DESKTOP_ENTRY_SECTION
            continue
        if not in_desktop_entry or not line.is_assignment():
            continue

        key = line.key()
        if key in ("Name", "Icon", "Exec", "Categories", "NoDisplay"):
            fields[key] = line.value()

    name = fields.get("Name", "")
    icon = fields.get("Icon", "")
    exec_cmd = fields.get("Exec", "")
    no_display = fields.get("NoDisplay", "").lower() == "true"

    if no_display:
        validity = Validity.SUPPRESSED
    elif not (name and icon and exec_cmd):
        validity = Validity.MISSING_FIELDS
    else:
        validity = Validity.VALID

    return DesktopEntry(
        file_path=str(file_path),
        name=name,
        icon=icon,
        exec_cmd=exec_cmd,
        categories=split_categories(fields.get("Categories", "")),
        no_display=no_display,
        validity=validity,
    )


def load_desktop_file(path: str | Path) -> DesktopEntry | None:
    """Parse a single .desktop file, or return None if it can't be read."""
    lines = load_lines(path)
    if lines is None:
        return None
    return parse_desktop_lines(lines, str(path))
