"""Tests for the selector facade."""

import pytest

from cssbuild.config import BuilderConfig
from cssbuild.errors import DuplicateFragment, InvalidCombinator, OrderViolation
from cssbuild.selector import SelectorBuilder, SelectorFacade, css_selector_builder


@pytest.fixture
def builder() -> SelectorFacade:
    return css_selector_builder


# ---------------------------------------------------------------------------
# Starting a builder
# ---------------------------------------------------------------------------


class TestStartMethods:
    @pytest.mark.parametrize(
        "method, value, expected",
        [
            ("element", "div", "div"),
            ("id", "main", "#main"),
            ("class_", "box", ".box"),
            ("attr", "disabled", "[disabled]"),
            ("pseudo_class", "hover", ":hover"),
            ("pseudo_element", "after", "::after"),
        ],
    )
    def test_each_method_starts_a_builder(self, builder, method, value, expected):
        sel = getattr(builder, method)(value)
        assert isinstance(sel, SelectorBuilder)
        assert sel.stringify() == expected

    def test_each_call_is_independent(self, builder):
        first = builder.element("a")
        second = builder.element("b")
        assert first is not second
        first.class_("x")
        assert second.stringify() == "b"

    def test_config_is_passed_to_builders(self):
        config = BuilderConfig(strict_combinators=False)
        facade = SelectorFacade(config)
        assert facade.id("x").config is config


# ---------------------------------------------------------------------------
# Documented scenarios
# ---------------------------------------------------------------------------


class TestScenarios:
    def test_id_with_classes(self, builder):
        sel = builder.id("main").class_("container").class_("editable")
        assert sel.stringify() == "#main.container.editable"

    def test_element_attr_pseudo_class(self, builder):
        sel = builder.element("a").attr('href$=".png"').pseudo_class("focus")
        assert sel.stringify() == 'a[href$=".png"]:focus'

    def test_element_after_class_raises(self, builder):
        sel = builder.element("div").id("main").class_("x")
        with pytest.raises(OrderViolation):
            sel.element("span")

    def test_duplicate_id_raises(self, builder):
        with pytest.raises(DuplicateFragment):
            builder.id("a").id("b")

    def test_empty_attr_renders_nothing(self, builder):
        assert builder.attr("").stringify() == ""
        assert builder.id("").id("x").stringify() == "#x"

    def test_nested_combination(self, builder):
        sel = builder.combine(
            builder.element("div").id("main").class_("container").class_("draggable"),
            "+",
            builder.combine(
                builder.element("table").id("data"),
                "~",
                builder.combine(
                    builder.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert sel.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )


# ---------------------------------------------------------------------------
# combine
# ---------------------------------------------------------------------------


class TestFacadeCombine:
    @pytest.mark.parametrize("combinator", [" ", "+", "~", ">"])
    def test_combine_matches_concatenation(self, builder, combinator):
        a = builder.element("ul").class_("menu")
        b = builder.element("li").pseudo_class("first-child")
        joined = builder.combine(a, combinator, b)
        assert joined.stringify() == f"{a.stringify()} {combinator} {b.stringify()}"

    def test_left_nested_combination_is_textual(self, builder):
        inner = builder.combine(builder.element("a"), "+", builder.element("b"))
        outer = builder.combine(inner, "~", builder.element("c"))
        assert outer.stringify() == "a + b ~ c"

    def test_combine_returns_fresh_builder(self, builder):
        a = builder.element("a")
        b = builder.element("b")
        joined = builder.combine(a, ">", b)
        assert joined is not a
        assert joined is not b
        assert not a.is_combined

    def test_strict_facade_rejects_unknown_combinator(self, builder):
        with pytest.raises(InvalidCombinator):
            builder.combine(builder.element("a"), "*", builder.element("b"))

    def test_permissive_facade_passes_through(self):
        facade = SelectorFacade(BuilderConfig(strict_combinators=False))
        joined = facade.combine(facade.element("a"), "*", facade.element("b"))
        assert joined.stringify() == "a * b"
