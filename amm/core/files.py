"""Plain file I/O used around the menu pipeline."""

from __future__ import annotations

from pathlib import Path

from amm.core import messages
from amm.core.logger import get_logger

_log = get_logger("files")


def load_lines(path: str | Path) -> list[str] | None:
    """Return the lines of a text file without line endings, or None if it can't be read."""
    try:
        with open(path, "r", errors="replace") as f:
            return f.read().splitlines()
    except OSError as e:
        _log.debug("Could not read %s: %s", path, e)
        return None


def write_menu(path: str | Path, text: str) -> None:
    """Write the rendered menu with the generated-file header. Raises OSError on failure."""
    path = Path(path).expanduser()
    with open(path, "w", encoding="utf-8") as f:
        f.write(messages.autogenerated_header())
        f.write(text)
        if text and not text.endswith("\n"):
            f.write("\n")
    _log.info("Wrote menu to %s", path)
