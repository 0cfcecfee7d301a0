from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from appdeck.desktop_entry import locale_keys, parse_desktop_file, strip_field_codes
from appdeck.errors import DesktopEntryError


FIREFOX = {
    "Type": "Application",
    "Name": "Firefox",
    "Comment": "Web Browser",
    "Exec": "firefox %u",
    "Icon": "firefox",
    "Keywords": "web;internet;",
    "Actions": "new-window;new-private-window;",
}

FIREFOX_ACTIONS = {
    "new-window": {"Name": "New Window", "Exec": "firefox --new-window %u"},
    "new-private-window": {"Name": "New Private Window", "Exec": "firefox --private-window %u"},
}


def test_base_entry_fields(tmp_path: Path, write_desktop: Callable[..., Path]) -> None:
    path = write_desktop(tmp_path, "firefox.desktop", FIREFOX, FIREFOX_ACTIONS)
    entries = parse_desktop_file(path, offset=2)

    assert len(entries) == 1
    e = entries[0]
    assert e.name == "Firefox"
    assert e.description == "Web Browser"
    assert e.exec == "firefox"
    assert e.icon == "firefox"
    assert e.keywords == frozenset({"web", "internet"})
    assert e.terminal is False
    assert e.working_dir is None
    assert e.offset == 2
    assert e.action is None
    assert e.desktop_file == path


def test_actions_only_when_enabled(tmp_path: Path, write_desktop: Callable[..., Path]) -> None:
    path = write_desktop(tmp_path, "firefox.desktop", FIREFOX, FIREFOX_ACTIONS)
    entries = parse_desktop_file(path, desktop_actions=True)

    assert [e.name for e in entries] == ["Firefox", "New Window", "New Private Window"]
    private = entries[2]
    assert private.action == "new-private-window"
    assert private.is_action
    assert private.exec == "firefox --private-window"
    assert private.description == "Firefox"
    assert private.icon == "firefox"
    assert private.keywords == entries[0].keywords


def test_action_without_group_is_ignored(tmp_path: Path, write_desktop: Callable[..., Path]) -> None:
    fields = dict(FIREFOX, Actions="ghost;new-window;")
    path = write_desktop(tmp_path, "firefox.desktop", fields, {"new-window": FIREFOX_ACTIONS["new-window"]})
    entries = parse_desktop_file(path, desktop_actions=True)
    assert [e.action for e in entries] == [None, "new-window"]


@pytest.mark.parametrize(
    "extra",
    [
        {"NoDisplay": "true"},
        {"Hidden": "true"},
        {"Exec": ""},
        {"Type": "Link"},
    ],
)
def test_discarded_entries(tmp_path: Path, write_desktop: Callable[..., Path], extra: dict) -> None:
    path = write_desktop(tmp_path, "x.desktop", dict(FIREFOX, **extra))
    assert parse_desktop_file(path, desktop_actions=True) == []


def test_missing_main_group_is_malformed(tmp_path: Path) -> None:
    path = tmp_path / "broken.desktop"
    path.write_text("[Something Else]\nName=x\n", encoding="utf-8")
    with pytest.raises(DesktopEntryError):
        parse_desktop_file(path)


def test_garbage_is_malformed(tmp_path: Path) -> None:
    path = tmp_path / "broken.desktop"
    path.write_text("this is not an ini file\n", encoding="utf-8")
    with pytest.raises(DesktopEntryError):
        parse_desktop_file(path)


def test_unreadable_is_error(tmp_path: Path) -> None:
    with pytest.raises(DesktopEntryError):
        parse_desktop_file(tmp_path / "missing.desktop")


def test_terminal_and_path(tmp_path: Path, write_desktop: Callable[..., Path]) -> None:
    path = write_desktop(tmp_path, "htop.desktop", {
        "Name": "htop",
        "Exec": "htop",
        "Terminal": "true",
        "Path": "/srv/work",
    })
    e = parse_desktop_file(path)[0]
    assert e.terminal is True
    assert e.working_dir == Path("/srv/work")


def test_localized_name_preferred(tmp_path: Path, write_desktop: Callable[..., Path]) -> None:
    path = write_desktop(tmp_path, "files.desktop", {
        "Name": "Files",
        "Name[de]": "Dateien",
        "Exec": "nautilus",
    })
    assert parse_desktop_file(path, locales=["de_DE", "de"])[0].name == "Dateien"
    assert parse_desktop_file(path)[0].name == "Files"


def test_generic_name_used_without_comment(tmp_path: Path, write_desktop: Callable[..., Path]) -> None:
    path = write_desktop(tmp_path, "gimp.desktop", {
        "Name": "GIMP",
        "GenericName": "Image Editor",
        "Exec": "gimp %U",
    })
    assert parse_desktop_file(path)[0].description == "Image Editor"


def test_strip_field_codes() -> None:
    assert strip_field_codes("foo %U --bar %f") == "foo --bar"
    assert strip_field_codes("printf 100%%") == "printf 100%"
    assert strip_field_codes("app   --x") == "app   --x"
    assert strip_field_codes("  app %F  ") == "app"
    assert strip_field_codes("app --file=%f") == "app --file="


def test_exec_keeps_whitespace_inside_quotes(tmp_path: Path, write_desktop: Callable[..., Path]) -> None:
    path = write_desktop(tmp_path, "echo.desktop", {
        "Name": "Echo",
        "Exec": "sh -c \"echo  a   b\" %U",
    })
    assert parse_desktop_file(path)[0].exec == "sh -c \"echo  a   b\""


def test_locale_keys() -> None:
    assert locale_keys({"LANG": "de_DE.UTF-8@euro"}) == ["de_DE@euro", "de_DE", "de@euro", "de"]
    assert locale_keys({"LC_ALL": "fr_FR.UTF-8", "LANG": "de_DE"}) == ["fr_FR", "fr"]
    assert locale_keys({"LANG": "C.UTF-8"}) == []
    assert locale_keys({}) == []
