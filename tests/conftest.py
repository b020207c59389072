from pathlib import Path

import pytest

DESKTOP_FILES = {
    "vlc.desktop": """\
[Desktop Entry]
Version=1.0
Name=VLC media player
Name[de]=VLC Media Player
GenericName=Media player
Exec=/usr/bin/vlc --started-from-file %U
Icon=vlc
Terminal=false
Type=Application
Categories=AudioVideo;Player;Recorder;

[Desktop Action play]
Name=Play
Exec=/usr/bin/vlc --play
""",
    "mousepad.desktop": """\
[Desktop Entry]
Version=1.0
Exec=mousepad %F
Icon=accessories-text-editor
Terminal=false
Type=Application
Categories=Application;Utility;TextEditor;GTK;
Name=Mousepad
""",
    "unclassified.desktop": """\
[Desktop Entry]
Name=Unclassified
Exec=unclassified
Icon=unclassified
Categories=GTK;
""",
    "suppressed.desktop": """\
[Desktop Entry]
Name=Suppressed
Exec=suppressed
Icon=suppressed
Categories=Utility;
NoDisplay=True
""",
    "suppressedinvalid.desktop": """\
[Desktop Entry]
Name=Suppressed invalid
NoDisplay=true
""",
    "missing.desktop": """\
[Desktop Entry]
Name=Missing exec
Icon=missing
Categories=Utility;
""",
}


@pytest.fixture
def desktop_dir(tmp_path: Path) -> Path:
    """A directory holding the sample .desktop files."""
    directory = tmp_path / "applications"
    directory.mkdir()
    for name, content in DESKTOP_FILES.items():
        (directory / name).write_text(content, encoding="utf-8")
    return directory


@pytest.fixture
def desktop_file(desktop_dir: Path):
    def _path(name: str) -> str:
        return str(desktop_dir / name)
    return _path
