"""Tests for brace-balanced block extraction."""

from keymapdoc.layout.parsers.block_extractor import (
    balanced_body,
    find_block,
    find_block_end,
)


class TestFindBlockEnd:
    """Test the pure brace scanner."""

    def test_returns_offset_past_matching_brace(self):
        text = "{ a { b } c } tail"
        assert find_block_end(text, 1) == len("{ a { b } c }")

    def test_immediately_closed_block(self):
        assert find_block_end("{}x", 1) == 2

    def test_unbalanced_scan_runs_to_end(self):
        text = "{ a { b"
        assert find_block_end(text, 1) == len(text)

    def test_start_at_end_of_text(self):
        assert find_block_end("{", 1) == 1


class TestBalancedBody:
    """Test body extraction between braces."""

    def test_excludes_closing_brace(self):
        text = "x { inner { y } } z"
        assert balanced_body(text, 3) == " inner { y } "

    def test_unbalanced_drops_last_character(self):
        text = "keymap { a { b }"
        assert balanced_body(text, len("keymap {")) == " a { b "

    def test_empty_when_nothing_follows(self):
        assert balanced_body("keymap {", len("keymap {")) == ""


class TestFindBlock:
    """Test locating a named block."""

    def test_finds_named_block(self):
        assert find_block("keymap { a { b } c }", "keymap") == " a { b } c "

    def test_no_whitespace_before_brace(self):
        assert find_block("keymap{x}", "keymap") == "x"

    def test_whitespace_and_newlines_before_brace(self):
        assert find_block("keymap \n\t { body }", "keymap") == " body "

    def test_missing_block_returns_none(self):
        assert find_block("behaviors { }", "keymap") is None

    def test_name_without_brace_is_not_a_block(self):
        assert find_block('compatible = "zmk,keymap";', "keymap") is None

    def test_first_occurrence_wins(self):
        text = "keymap { first } keymap { second }"
        assert find_block(text, "keymap") == " first "

    def test_name_is_matched_literally(self):
        assert find_block("a.b { x } aXb { y }", "a.b") == " x "
