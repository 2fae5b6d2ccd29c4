"""Tests for dotlens.dot.values - the value tokenizer."""

import pytest

from dotlens.dot.values import DotValue, ValueShape, read_value, tokenize


class TestTokenizeShapes:
    """Each of the three value shapes is recognized."""

    def test_quoted_value_keeps_inner_spaces(self):
        value = tokenize('"a b"')
        assert value == DotValue("a b", ValueShape.QUOTED)
        assert value.shape == ValueShape.QUOTED

    def test_bracketed_value_strips_outer_delimiters_only(self):
        value = tokenize("<b>x</b>")
        assert value.text == "b>x</b"
        assert value.shape == ValueShape.BRACKETED

    def test_html_label_keeps_inner_tags(self):
        value = tokenize("<<b>bold</b>>")
        assert value.text == "<b>bold</b>"

    def test_bare_value_with_hyphen_and_dot(self):
        value = tokenize("abc-1.2")
        assert value == DotValue("abc-1.2", ValueShape.BARE)
        assert value.shape == ValueShape.BARE

    def test_leading_whitespace_ignored(self):
        assert tokenize("   node_1").text == "node_1"

    @pytest.mark.parametrize("text", ["", "   ", "%%", "{"])
    def test_no_shape_returns_none(self, text):
        assert tokenize(text) is None


class TestReadValue:
    """Tests for read_value cursor handling."""

    def test_reports_characters_consumed(self):
        value, consumed = read_value('x="y z", w=1', 2)
        assert value.text == "y z"
        assert consumed == 5

    def test_bracketed_value_stops_at_separator(self):
        value, consumed = read_value("<a>, x=<b>", 0)
        assert value.text == "a"
        assert consumed == 3

    def test_bracketed_value_before_space_separated_attribute(self):
        value, _ = read_value("<i>x</i> color=red", 0)
        assert value.text == "i>x</i"

    def test_unterminated_quote_does_not_match(self):
        assert read_value('"unterminated', 0) is None

    def test_unterminated_quote_falls_through_to_bare_after_quote(self):
        value, consumed = read_value('"abc', 1)
        assert value.text == "abc"
        assert consumed == 3

    def test_position_past_end(self):
        assert read_value("abc", 3) is None

    def test_bare_stops_at_non_identifier_character(self):
        value, consumed = read_value("abc def", 0)
        assert value.text == "abc"
        assert consumed == 3


class TestDotValueEquality:
    """Values compare and display by decoded text only."""

    def test_equal_across_shapes(self):
        assert DotValue("x", ValueShape.QUOTED) == DotValue("x", ValueShape.BARE)
        assert hash(DotValue("x", ValueShape.QUOTED)) == hash(DotValue("x", ValueShape.BRACKETED))

    def test_equal_to_plain_string(self):
        assert DotValue("call", ValueShape.QUOTED) == "call"

    def test_str_is_decoded_text(self):
        assert str(DotValue("a b", ValueShape.QUOTED)) == "a b"

    def test_quoted_restores_delimiters(self):
        assert DotValue("a b", ValueShape.QUOTED).quoted() == '"a b"'
        assert DotValue("<b>x</b>", ValueShape.BRACKETED).quoted() == "<<b>x</b>>"
        assert DotValue("red").quoted() == "red"
