import re

import pytest

from html_tailwind.core.grammar import DEFAULT_GRAMMAR, GrammarTable, PatternRule, build_default_grammar
from html_tailwind.core.models import (
    AlignItems,
    Color,
    Display,
    GridTrack,
    JustifyItems,
    Val,
)


class TestLiteralRules:
    """Exact-token rules of the built-in grammar."""

    def test_display_tokens(self):
        assert DEFAULT_GRAMMAR.lookup("flex") == (("display", Display.FLEX),)
        assert DEFAULT_GRAMMAR.lookup("grid") == (("display", Display.GRID),)
        assert DEFAULT_GRAMMAR.lookup("hidden") == (("display", Display.NONE),)

    def test_place_items_expands_to_pair(self):
        assert DEFAULT_GRAMMAR.lookup("place-items-center") == (
            ("align_items", AlignItems.CENTER),
            ("justify_items", JustifyItems.CENTER),
        )

    def test_literals_are_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_GRAMMAR.literals["flex"] = ()  # type: ignore[index]


class TestPatternRules:
    """Parametric rules and their captured payloads."""

    def test_pixel_lengths(self):
        assert DEFAULT_GRAMMAR.lookup("w-[120px]") == (("width", Val.px(120)),)
        assert DEFAULT_GRAMMAR.lookup("min-h-[3px]") == (("min_height", Val.px(3)),)
        assert DEFAULT_GRAMMAR.lookup("max-w-[640px]") == (("max_width", Val.px(640)),)

    def test_percentages_and_keywords(self):
        assert DEFAULT_GRAMMAR.lookup("w-full") == (("width", Val.percent(100)),)
        assert DEFAULT_GRAMMAR.lookup("h-[25%]") == (("height", Val.percent(25)),)
        assert DEFAULT_GRAMMAR.lookup("w-1/4") == (("width", Val.percent(25)),)
        assert DEFAULT_GRAMMAR.lookup("h-auto") == (("height", Val.auto()),)

    def test_spacing_scale(self):
        assert DEFAULT_GRAMMAR.lookup("p-4") == (
            ("padding.left", Val.px(16)),
            ("padding.right", Val.px(16)),
            ("padding.top", Val.px(16)),
            ("padding.bottom", Val.px(16)),
        )

    def test_margin_edges(self):
        assert DEFAULT_GRAMMAR.lookup("mx-auto") == (
            ("margin.left", Val.auto()),
            ("margin.right", Val.auto()),
        )
        assert DEFAULT_GRAMMAR.lookup("mt-[6px]") == (("margin.top", Val.px(6)),)

    def test_border_forms_do_not_collide(self):
        assert DEFAULT_GRAMMAR.lookup("border") == (
            ("border.left", Val.px(1)),
            ("border.right", Val.px(1)),
            ("border.top", Val.px(1)),
            ("border.bottom", Val.px(1)),
        )
        assert DEFAULT_GRAMMAR.lookup("border-x") == (
            ("border.left", Val.px(1)),
            ("border.right", Val.px(1)),
        )
        assert DEFAULT_GRAMMAR.lookup("border-b-[3px]") == (("border.bottom", Val.px(3)),)
        assert DEFAULT_GRAMMAR.lookup("border-[#ff000080]") == (
            ("border_color", Color(255, 0, 0, 128)),
        )

    def test_colors(self):
        assert DEFAULT_GRAMMAR.lookup("bg-[#336699]") == (("background_color", Color(0x33, 0x66, 0x99, 255)),)
        assert DEFAULT_GRAMMAR.lookup("text-[#ABCDEF]") == (("text_color", Color(0xAB, 0xCD, 0xEF, 255)),)
        assert DEFAULT_GRAMMAR.lookup("bg-transparent") == (("background_color", Color(0, 0, 0, 0)),)

    def test_z_index_sign(self):
        assert DEFAULT_GRAMMAR.lookup("z-20") == (("z_index", 20),)
        assert DEFAULT_GRAMMAR.lookup("-z-20") == (("z_index", -20),)

    def test_grid_templates(self):
        assert DEFAULT_GRAMMAR.lookup("grid-cols-2") == (
            ("grid_template_columns", (GridTrack.auto(), GridTrack.auto())),
        )
        assert DEFAULT_GRAMMAR.lookup("grid-cols-[100px_1fr_auto]") == (
            ("grid_template_columns", (GridTrack.px(100), GridTrack.fr(1), GridTrack.auto())),
        )

    @pytest.mark.parametrize("token", [
        "xflex",
        "w-[20px]x",
        "w-[20em]",
        "bg-[#12345]",
        "bg-[#1234567]",
        "bg-[336699]",
        "z--20",
        "+z-20",
        "grid-cols-[1fr__auto]",
        "grid-cols-[1fr_2em]",
        "grid-cols-[]",
        "w-1/0",
        "border-q",
        "w-[２０px]",
        "z-２",
        "grid-cols-100000",
        "",
    ])
    def test_anchored_matching_rejects(self, token):
        assert DEFAULT_GRAMMAR.lookup(token) is None
        assert token not in DEFAULT_GRAMMAR

    def test_grid_column_count_is_bounded(self):
        ((path, tracks),) = DEFAULT_GRAMMAR.lookup("grid-cols-256")
        assert path == "grid_template_columns"
        assert len(tracks) == 256
        assert DEFAULT_GRAMMAR.lookup("grid-cols-257") is None
        assert DEFAULT_GRAMMAR.lookup("grid-cols-[" + "_".join(["1fr"] * 257) + "]") is None


class TestGrammarTable:
    """Construction and extension of tables."""

    def test_build_returns_fresh_equivalent_table(self):
        table = build_default_grammar()
        assert table is not DEFAULT_GRAMMAR
        assert table.lookup("flex-col") == DEFAULT_GRAMMAR.lookup("flex-col")

    def test_extend_adds_rules_without_touching_base_table(self):
        rule = PatternRule(
            "gap",
            re.compile(r"gap-(?P<n>\d+)"),
            lambda m: (("z_index", int(m.group("n"))),),
        )
        extended = DEFAULT_GRAMMAR.extend({"btn": (("display", Display.FLEX),)}, [rule])

        assert extended.lookup("btn") == (("display", Display.FLEX),)
        assert extended.lookup("gap-3") == (("z_index", 3),)
        assert extended.lookup("flex") == (("display", Display.FLEX),)
        assert DEFAULT_GRAMMAR.lookup("btn") is None
        assert DEFAULT_GRAMMAR.lookup("gap-3") is None

    def test_literal_wins_over_pattern(self):
        table = GrammarTable({"z-5": (("z_index", 99),)}, DEFAULT_GRAMMAR.patterns)
        assert table.lookup("z-5") == (("z_index", 99),)
        assert table.lookup("z-6") == (("z_index", 6),)
