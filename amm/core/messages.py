"""User-facing texts."""

from amm import __app_name__, __version__


def autogenerated_header() -> str:
    return f"<!-- Generated by {__app_name__} {__version__}. Changes will be lost on regeneration. -->\n"


def bad_category_file(path: str) -> str:
    return f"Could not open category file {path}"


def bad_output_file(path: str) -> str:
    return f"Could not write output file {path}"


def bad_input_paths(paths: list[str]) -> str:
    return f"These paths couldn't be opened: {', '.join(paths)}\nProceeding..."


def no_valid_desktop_entries() -> str:
    return "Could not find any valid .desktop file; no menu was written"


def created(path: str) -> str:
    return f"Created {path}\n"
