"""Tests for key code and modifier translation."""

import pytest

from keymapdoc.layout.translation import (
    KEY_LABELS,
    translate_keycode,
    translate_modifier,
)
from keymapdoc.layout.translation.keycodes import collapse_modifier_wrappers


class TestKeycodeTranslation:
    """Test base key labels."""

    @pytest.mark.parametrize(
        ("expr", "expected"),
        [
            ("SPACE", "Space"),
            ("BACKSPACE", "Bksp"),
            ("ESC", "Esc"),
            ("PAGE_DOWN", "PgDn"),
            ("LEFT_ARROW", "←"),
            ("NUMBER_7", "7"),
            ("KP_NUMBER_0", "K0"),
            ("SEMICOLON", ";"),
            ("BACKSLASH", "\\"),
            ("F13", "F13"),
            ("LANG1", "Kana"),
            ("LANG2", "Eisu"),
            ("INT_MUHENKAN", "無変換"),
            ("LEFT_GUI", "⌘"),
            ("RCTRL", "⌃"),
        ],
    )
    def test_table_lookup(self, expr: str, expected: str):
        assert translate_keycode(expr) == expected

    def test_unknown_key_passes_through(self):
        assert translate_keycode("C_VOL_UP") == "C_VOL_UP"

    def test_empty_expression(self):
        assert translate_keycode("") == ""

    def test_all_digits_and_function_keys_present(self):
        for n in range(10):
            assert KEY_LABELS[f"NUMBER_{n}"] == str(n)
            assert KEY_LABELS[f"KP_NUMBER_{n}"] == f"K{n}"
        for n in range(1, 14):
            assert KEY_LABELS[f"F{n}"] == f"F{n}"


class TestModifierWrappers:
    """Test collapsing of modifier wrapper syntax."""

    def test_nested_wrappers_become_ordered_glyphs(self):
        assert translate_keycode("LS(LG(S))") == "⇧⌘S"

    def test_right_side_wrappers(self):
        assert translate_keycode("RC(RA(X))") == "⌃⌥X"

    def test_single_wrapper(self):
        assert translate_keycode("LC(C)") == "⌃C"

    def test_lookup_applies_to_whole_collapsed_text(self):
        assert translate_keycode("LS(TAB)") == "⇧TAB"

    def test_every_closing_paren_is_removed(self):
        assert collapse_modifier_wrappers("LA(LA(LA(A)))") == "⌥⌥⌥A"


class TestModifierShortNames:
    """Test the hold-tap modifier abbreviations."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("LEFT_SHIFT", "LSft"),
            ("RSHIFT", "RSft"),
            ("LEFT_CTRL", "LCtl"),
            ("RIGHT_CTRL", "RCtl"),
            ("LALT", "LAlt"),
            ("RIGHT_ALT", "RAlt"),
            ("LEFT_WIN", "LCmd"),
            ("RGUI", "RCmd"),
        ],
    )
    def test_known_modifiers(self, name: str, expected: str):
        assert translate_modifier(name) == expected

    def test_unknown_modifier_unchanged(self):
        assert translate_modifier("HYPER") == "HYPER"
