"""Tests for dotlens.dot.coloring - label colors and color injection."""

from dotlens.dot.coloring import (
    DEFAULT_PALETTE,
    apply_colors,
    assign_colors,
    color_edges,
    color_statement,
    legend,
)
from dotlens.dot.labels import NO_LABEL, extract_labels

MULTI_LINE_DOT = """\
digraph {
  a -> b [
    label="x",
    color="red"
  ];
}"""


class TestAssignColors:
    """Tests for assign_colors."""

    def test_sorted_order_maps_to_palette_order(self):
        color_map = assign_colors(["b", "a", NO_LABEL])
        assert list(color_map) == [NO_LABEL, "a", "b"]
        assert list(color_map.values()) == list(DEFAULT_PALETTE[:3])

    def test_duplicates_ignored(self):
        assert assign_colors(["a", "a"]) == {"a": DEFAULT_PALETTE[0]}

    def test_palette_cycles(self):
        labels = [f"l{i:02d}" for i in range(len(DEFAULT_PALETTE) + 2)]
        color_map = assign_colors(labels)
        assert color_map["l40"] == DEFAULT_PALETTE[0]
        assert color_map["l41"] == DEFAULT_PALETTE[1]

    def test_custom_palette(self):
        color_map = assign_colors(["x", "y", "z"], ["red", "blue"])
        assert color_map == {"x": "red", "y": "blue", "z": "red"}

    def test_empty_palette(self):
        assert assign_colors(["a"], []) == {}

    def test_deterministic(self, services_dot):
        labels = extract_labels(services_dot)
        assert assign_colors(labels) == assign_colors(list(reversed(labels)))

    def test_default_palette_has_distinct_colors(self):
        assert len(set(DEFAULT_PALETTE)) == len(DEFAULT_PALETTE) == 40


class TestColorStatement:
    """Tests for color_statement on single edge blocks."""

    def test_appends_to_existing_list(self):
        assert color_statement('a -> b [label="x"];', "#111") == (
            'a -> b [label="x", color="#111"];'
        )

    def test_replaces_existing_color_in_place(self):
        assert color_statement('a -> b [color=red, label="x"];', "#111") == (
            'a -> b [color="#111", label="x"];'
        )

    def test_replaces_quoted_color(self):
        assert color_statement('a -> b [label="x" color="red" weight=2]', "#111") == (
            'a -> b [label="x" color="#111" weight=2]'
        )

    def test_does_not_touch_fillcolor(self):
        assert color_statement("a -> b [fillcolor=red];", "#111") == (
            'a -> b [fillcolor=red, color="#111"];'
        )

    def test_empty_list(self):
        assert color_statement("a -> b [];", "#111") == 'a -> b [color="#111"];'

    def test_trailing_separator(self):
        assert color_statement('a -> b [label="x",];', "#111") == (
            'a -> b [label="x", color="#111"];'
        )

    def test_synthesizes_list_with_terminator(self):
        assert color_statement("a -> b;", "#111") == 'a -> b [color="#111"];'

    def test_synthesizes_list_without_terminator(self):
        assert color_statement("a -> b", "#111") == 'a -> b [color="#111"]'

    def test_synthesized_list_keeps_indent_and_comment(self):
        assert color_statement("  a -- b; // note", "#111") == '  a -- b [color="#111"]; // note'

    def test_chained_edge(self):
        assert color_statement("a -> b -> c;", "#111") == 'a -> b -> c [color="#111"];'

    def test_multi_line_insert_before_closing_bracket(self):
        text = 'a -> b [\n  label="x"\n];'
        assert color_statement(text, "#111") == 'a -> b [\n  label="x", color="#111"\n];'

    def test_unclosed_list_unchanged(self):
        assert color_statement('a -> b [label="x"', "#111") == 'a -> b [label="x"'

    def test_no_connector_unchanged(self):
        assert color_statement("rankdir=LR", "#111") == "rankdir=LR"


class TestApplyColors:
    """Tests for apply_colors over whole documents."""

    def test_multi_line_color_replaced_not_duplicated(self):
        result = apply_colors(MULTI_LINE_DOT, {"x": "#ABCDEF"})
        assert result == MULTI_LINE_DOT.replace('color="red"', 'color="#ABCDEF"')
        assert result.count("color=") == 1

    def test_applying_twice_is_idempotent(self, services_dot):
        color_map = assign_colors(extract_labels(services_dot))
        once = apply_colors(services_dot, color_map)
        assert apply_colors(once, color_map) == once

    def test_unmapped_labels_untouched(self, services_dot):
        result = apply_colors(services_dot, {"call": "#123456"})
        assert 'api -> auth [label="call", color="#123456"];' in result
        assert 'api -> db [label="query", color="red"];' in result
        assert "    api -> cache;" in result

    def test_sentinel_colors_unlabelled_edges(self, services_dot):
        result = apply_colors(services_dot, {NO_LABEL: "#000000"})
        assert 'api -> cache [color="#000000"];' in result
        assert 'cache -- db [weight=2, color="#000000"];' in result

    def test_nodes_and_directives_untouched(self, services_dot):
        result = apply_colors(services_dot, {"call": "#1", "query": "#2", NO_LABEL: "#3"})
        assert '    api [label="API Gateway", color=blue];' in result
        assert "    node [shape=box];" in result
        assert result.startswith("digraph services {\n    rankdir=LR;")

    def test_empty_map_returns_same_text(self, services_dot):
        assert apply_colors(services_dot, {}) == services_dot


class TestColorEdges:
    """Tests for the combined color_edges helper and legend."""

    def test_color_edges(self, services_dot):
        colored, color_map = color_edges(services_dot)
        assert color_map == {
            NO_LABEL: DEFAULT_PALETTE[0],
            "call": DEFAULT_PALETTE[1],
            "query": DEFAULT_PALETTE[2],
        }
        assert f'api -> auth [label="call", color="{DEFAULT_PALETTE[1]}"];' in colored
        assert colored.count(f'color="{DEFAULT_PALETTE[2]}"') == 2

    def test_color_edges_no_edges(self):
        text = "digraph {\n  a;\n}"
        assert color_edges(text) == (text, {})

    def test_legend(self):
        assert legend({"a": "#2", NO_LABEL: "#1"}) == [("No label", "#1"), ("a", "#2")]


class TestColorEdgeCases:
    """Coloring of inline edges and labels that mention color."""

    def test_color_text_inside_label_is_not_rewritten(self):
        text = 'a -> b [label="color=red", color=blue];'
        assert color_statement(text, "#111") == 'a -> b [label="color=red", color="#111"];'

    def test_color_text_inside_label_without_color_attribute(self):
        text = 'a -> b [label="set color=red"];'
        assert color_statement(text, "#111") == 'a -> b [label="set color=red", color="#111"];'

    def test_spaced_color_attribute_replaced(self):
        assert color_statement("a -> b [color = red]", "#111") == 'a -> b [color="#111"]'

    def test_one_line_document(self):
        text = 'digraph { a -> b [label="call"]; a -> c; }'
        colored, color_map = color_edges(text)
        assert color_map == {NO_LABEL: DEFAULT_PALETTE[0], "call": DEFAULT_PALETTE[1]}
        assert colored == (
            f'digraph {{ a -> b [label="call", color="{DEFAULT_PALETTE[1]}"];'
            f' a -> c [color="{DEFAULT_PALETTE[0]}"]; }}'
        )
