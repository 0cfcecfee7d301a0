from __future__ import annotations

from appdeck.fuzzy import fuzzy_match, is_case_sensitive


def test_not_a_subsequence() -> None:
    assert fuzzy_match("Firefox", "fxo") is None
    assert fuzzy_match("vim", "vimx") is None
    assert fuzzy_match("", "a") is None


def test_empty_pattern_scores_zero() -> None:
    assert fuzzy_match("anything", "") == 0


def test_prefix_match_is_positive() -> None:
    score = fuzzy_match("Firefox", "fire")
    assert score is not None and score > 0


def test_smart_case() -> None:
    assert is_case_sensitive("Fire")
    assert not is_case_sensitive("fire")
    assert fuzzy_match("firefox", "Fire") is None
    assert fuzzy_match("Firefox", "Fire") is not None
    assert fuzzy_match("FIREFOX", "fire") is not None


def test_contiguous_beats_scattered() -> None:
    contiguous = fuzzy_match("terminal", "term")
    scattered = fuzzy_match("the ember room", "term")
    assert contiguous is not None and scattered is not None
    assert contiguous > scattered


def test_prefix_beats_middle() -> None:
    prefix = fuzzy_match("codeblocks", "code")
    middle = fuzzy_match("vscodeblocks", "code")
    assert prefix > middle


def test_word_boundary_beats_mid_word() -> None:
    boundary = fuzzy_match("gnome-calculator", "calc")
    mid_word = fuzzy_match("xcalcx", "calc")
    assert boundary > mid_word


def test_camel_hump_bonus() -> None:
    assert fuzzy_match("LibreOffice", "o") > fuzzy_match("Libreoffice", "o")


def test_scores_are_never_negative() -> None:
    score = fuzzy_match("a" + " " * 200 + "b", "ab")
    assert score is not None and score >= 0
