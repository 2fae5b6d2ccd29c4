"""Tests for dotlens.dot.attributes - attribute-list extraction."""

from dotlens.dot.attributes import (
    Attribute,
    attribute_body,
    attribute_span,
    find_label,
    get_attribute,
    parse_attributes,
)
from dotlens.dot.values import DotValue, ValueShape


def _pairs(body):
    return [(attr.key, attr.value.text) for attr in parse_attributes(body)]


class TestParseAttributes:
    """Tests for parse_attributes."""

    def test_comma_separated(self):
        assert _pairs('label="calls", color=red') == [("label", "calls"), ("color", "red")]

    def test_space_separated_without_commas(self):
        assert _pairs('label="calls" color=red weight=2') == [
            ("label", "calls"),
            ("color", "red"),
            ("weight", "2"),
        ]

    def test_semicolon_separators_and_spacing(self):
        assert _pairs("weight = 2.5 ; style=dashed") == [("weight", "2.5"), ("style", "dashed")]

    def test_preserves_source_order(self):
        keys = [attr.key for attr in parse_attributes("z=1, a=2, m=3")]
        assert keys == ["z", "a", "m"]

    def test_bare_value_with_hash(self):
        assert _pairs("color=#ff0000") == [("color", "#ff0000")]

    def test_value_shapes_are_kept(self):
        attrs = parse_attributes('a="q", b=<h>, c=bare')
        assert [attr.value.shape for attr in attrs] == [
            ValueShape.QUOTED,
            ValueShape.BRACKETED,
            ValueShape.BARE,
        ]

    def test_html_label(self):
        assert _pairs("label=<<b>bold</b>>, shape=box") == [
            ("label", "<b>bold</b>"),
            ("shape", "box"),
        ]

    def test_multi_line_body(self):
        body = '\n    label="x",\n    color="red"\n'
        assert _pairs(body) == [("label", "x"), ("color", "red")]

    def test_unterminated_quote_drops_attribute(self):
        assert _pairs('label="abc, color=red') == [("color", "red")]

    def test_leading_garbage_ignored(self):
        assert _pairs("%%% label=x") == [("label", "x")]

    def test_trailing_garbage_ignored(self):
        assert _pairs("label=x, =") == [("label", "x")]

    def test_empty_body(self):
        assert parse_attributes("") == []

    def test_empty_quoted_value(self):
        assert _pairs('label=""') == [("label", "")]


class TestAttributeAccessors:
    """Tests for label and body helpers."""

    def test_find_label_quoted(self):
        assert find_label('a -> b [label="x"]') == "x"

    def test_find_label_bare(self):
        assert find_label("a -> b [color=red, label=calls];") == "calls"

    def test_find_label_missing(self):
        assert find_label("a -> b;") is None
        assert find_label("a -> b [color=red];") is None

    def test_find_label_ignores_similar_keys(self):
        assert find_label("a -> b [headlabel=h, xlabel=x]") is None

    def test_find_label_multi_line(self):
        assert find_label('a -> b [\n  style=dashed,\n  label="x"\n];') == "x"

    def test_get_attribute(self):
        attrs = parse_attributes("shape=box, label=x")
        assert get_attribute(attrs, "shape") == "box"
        assert get_attribute(attrs, "color") is None

    def test_attribute_body(self):
        assert attribute_body('a -> b [label="x"];') == 'label="x"'
        assert attribute_body("a -> b;") is None

    def test_attribute_body_unclosed_runs_to_end(self):
        assert attribute_body('a [label="x",\ncolor=red') == 'label="x",\ncolor=red'

    def test_attribute_span_nested_brackets(self):
        text = 'a [label="[x]"];'
        start, end = attribute_span(text)
        assert text[start] == "["
        assert text[end] == "]"
        assert text[end + 1] == ";"

    def test_attribute_span_unclosed(self):
        assert attribute_span('a -> b [label="x"') == (7, None)

    def test_attribute_str(self):
        assert str(Attribute("label", DotValue("x", ValueShape.QUOTED))) == 'label="x"'


class TestAttributeSpans:
    """Tests for the position recorded on each parsed attribute."""

    def test_spans_cover_each_pair(self):
        body = 'label="a, b", color = red'
        spans = [body[a.span[0] : a.span[1]] for a in parse_attributes(body)]
        assert spans == ['label="a, b"', "color = red"]

    def test_span_ignored_in_equality(self):
        (parsed,) = parse_attributes("weight=2")
        assert parsed == Attribute("weight", DotValue("2", ValueShape.BARE))
