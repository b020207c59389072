"""Single line of a .desktop / index.theme style file."""

from __future__ import annotations

ASSIGNMENT_DELIM = "="


class EntryLine:
    """A trimmed line that may be a [Section] declaration or a Key=Value assignment."""

    def __init__(self, raw: str) -> None:
        self._content = raw.strip()

    def is_declaration(self) -> bool:
        c = self._content
        return len(c) >= 2 and c.startswith("[") and c.endswith("]")

    def is_assignment(self) -> bool:
        return ASSIGNMENT_DELIM in self._content

    def declaration(self) -> str:
        if not self.is_declaration():
            return ""
        return self._content[1:-1]

    def key(self) -> str:
        if not self.is_assignment():
            return ""
        return self._content.partition(ASSIGNMENT_DELIM)[0].strip()

    def value(self) -> str:
        if not self.is_assignment():
            return ""
        return self._content.partition(ASSIGNMENT_DELIM)[2].strip()
