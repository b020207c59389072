from pathlib import Path

from amm.core.icon_service import (
    CachingIconService,
    ExtensionIconService,
    IdentityIconService,
    ThemeIconService,
)


class CountingService:
    def __init__(self, extension=".png"):
        self.extension = extension
        self.calls = 0

    def resolved_name(self, icon_name):
        self.calls += 1
        return icon_name + self.extension


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("")
    return path


def test_identity_passes_names_through():
    assert IdentityIconService().resolved_name("vlc") == "vlc"


def test_extension_is_appended_once():
    service = ExtensionIconService(".xpm")
    assert service.resolved_name("vlc") == "vlc.xpm"
    assert service.resolved_name("vlc.xpm") == "vlc.xpm"


def test_extension_without_dot():
    assert ExtensionIconService("png").resolved_name("vlc") == "vlc.png"


def test_caching_service_keeps_first_answer():
    actual = CountingService()
    caching = CachingIconService(actual)
    assert not caching.is_cached("vlc")

    assert caching.resolved_name("vlc") == "vlc.png"
    assert caching.is_cached("vlc")

    actual.extension = ".svg"
    assert caching.resolved_name("vlc") == "vlc.png"
    assert actual.calls == 1


def test_theme_service_finds_icon_in_theme(tmp_path):
    icon = _touch(tmp_path / "hicolor" / "48x48" / "apps" / "vlc.png")
    service = ThemeIconService("hicolor", base_dirs=[tmp_path])
    assert service.resolved_name("vlc") == str(icon)


def test_theme_service_follows_inherited_themes(tmp_path):
    (tmp_path / "Custom").mkdir()
    (tmp_path / "Custom" / "index.theme").write_text(
        "[Icon Theme]\nName=Custom\nInherits=Parent,hicolor\n"
    )
    icon = _touch(tmp_path / "Parent" / "32x32" / "categories" / "games.svg")
    service = ThemeIconService("Custom", base_dirs=[tmp_path])
    assert service.themes == ["Custom", "Parent", "hicolor"]
    assert service.resolved_name("games") == str(icon)


def test_theme_service_prefers_requested_theme(tmp_path):
    _touch(tmp_path / "hicolor" / "48x48" / "apps" / "vlc.png")
    preferred = _touch(tmp_path / "Mine" / "16x16" / "apps" / "vlc.xpm")
    service = ThemeIconService("Mine", base_dirs=[tmp_path])
    assert service.resolved_name("vlc") == str(preferred)


def test_theme_service_leaves_unknown_and_absolute_names(tmp_path):
    service = ThemeIconService("hicolor", base_dirs=[tmp_path])
    assert service.resolved_name("surely-not-an-installed-icon-name") == "surely-not-an-installed-icon-name"
    assert service.resolved_name("/opt/app/icon.png") == "/opt/app/icon.png"
    assert service.resolved_name("") == ""
