"""Tests for bindings list extraction and tokenizing."""

from keymapdoc.layout.parsers.bindings_tokenizer import (
    extract_bindings_text,
    strip_comments,
    tokenize_bindings,
)


class TestExtractBindingsText:
    """Test capturing the interior of ``bindings = < ... >``."""

    def test_simple_bindings(self):
        span = "base { bindings = < &kp A &kp B >; };"
        assert extract_bindings_text(span) == " &kp A &kp B "

    def test_multiline_bindings(self):
        span = "base {\n  bindings = <\n    &kp A\n    &kp B\n  >;\n};"
        assert extract_bindings_text(span) == "\n    &kp A\n    &kp B\n  "

    def test_capture_tolerates_intervening_angle_brackets(self):
        span = (
            "base { bindings = <&kp A>;\n"
            "  sensor-bindings = <&inc_dec_kp C_VOL_UP C_VOL_DN>; };"
        )
        assert extract_bindings_text(span) == (
            "&kp A>;\n  sensor-bindings = <&inc_dec_kp C_VOL_UP C_VOL_DN"
        )

    def test_missing_bindings_returns_none(self):
        assert extract_bindings_text("base { label = \"x\"; };") is None


class TestStripComments:
    """Test comment removal."""

    def test_block_comments_removed(self):
        assert strip_comments("&kp A /* left\n hand */ &kp B") == "&kp A  &kp B"

    def test_line_comments_removed(self):
        assert strip_comments("&kp A // home row\n&kp B") == "&kp A \n&kp B"


class TestTokenizeBindings:
    """Test splitting bindings into tokens."""

    def test_tokens_include_arguments(self):
        assert tokenize_bindings("&mt LEFT_SHIFT Z  &lt 5 P &trans") == [
            "&mt LEFT_SHIFT Z",
            "&lt 5 P",
            "&trans",
        ]

    def test_tokens_across_lines_keep_source_order(self):
        text = "\n  &kp Q &kp W\n  &kp A &kp S\n"
        assert tokenize_bindings(text) == ["&kp Q", "&kp W", "&kp A", "&kp S"]

    def test_nested_modifier_expression_is_one_token(self):
        assert tokenize_bindings("&kp LS(LG(S)) &kp A") == ["&kp LS(LG(S))", "&kp A"]

    def test_comments_are_ignored(self):
        text = "// top row\n&kp A /* middle */ &kp B // end\n&kp C"
        assert tokenize_bindings(text) == ["&kp A", "&kp B", "&kp C"]

    def test_stray_fragment_becomes_its_own_token(self):
        assert tokenize_bindings("foo &kp A") == ["foo", "&kp A"]

    def test_empty_text(self):
        assert tokenize_bindings("  \n ") == []
