"""Tests for selkie.selector — part rendering, ordering and combination."""

import pytest

from selkie.errors import DuplicatePartError, OrderError
from selkie.parts import PartKind
from selkie.selector import Selector


class TestRendering:
    """Each part renders with its prefix, in call order."""

    def test_empty(self) -> None:
        assert Selector().stringify() == ""
        assert Selector.empty().stringify() == ""

    def test_element(self) -> None:
        assert Selector().element("div").stringify() == "div"

    def test_id(self) -> None:
        assert Selector().id("main").stringify() == "#main"

    def test_class(self) -> None:
        assert Selector().class_("container").stringify() == ".container"

    def test_attr(self) -> None:
        assert Selector().attr("href").stringify() == "[href]"

    def test_pseudo_class(self) -> None:
        assert Selector().pseudo_class("focus").stringify() == ":focus"

    def test_pseudo_element(self) -> None:
        assert Selector().pseudo_element("before").stringify() == "::before"

    def test_id_with_classes(self) -> None:
        selector = Selector().id("main").class_("container").class_("editable")
        assert selector.stringify() == "#main.container.editable"

    def test_element_attr_pseudo_class(self) -> None:
        selector = Selector().element("a").attr('href$=".png"').pseudo_class("focus")
        assert selector.stringify() == 'a[href$=".png"]:focus'

    def test_full_compound(self) -> None:
        selector = (
            Selector()
            .element("p")
            .id("intro")
            .class_("lead")
            .attr("lang")
            .attr('data-x="1"')
            .pseudo_class("hover")
            .pseudo_class("not(.hidden)")
            .pseudo_element("first-line")
        )
        assert selector.stringify() == 'p#intro.lead[lang][data-x="1"]:hover:not(.hidden)::first-line'

    def test_values_are_verbatim(self) -> None:
        assert Selector().attr("title='a]b'").stringify() == "[title='a]b']"

    def test_str_matches_stringify(self) -> None:
        selector = Selector().element("li").class_("item")
        assert str(selector) == selector.stringify() == "li.item"

    def test_stringify_is_repeatable(self) -> None:
        selector = Selector().element("a").pseudo_class("visited")
        assert selector.stringify() == selector.stringify()


class TestImmutability:
    """Appends return new selectors and leave the receiver alone."""

    def test_receiver_unchanged(self) -> None:
        base = Selector().element("div")
        base.class_("a")
        assert base.stringify() == "div"

    def test_branching_from_shared_base(self) -> None:
        base = Selector().element("div")
        left = base.class_("left")
        right = base.class_("right")
        assert left.stringify() == "div.left"
        assert right.stringify() == "div.right"

    def test_frozen(self) -> None:
        selector = Selector()
        with pytest.raises(AttributeError):
            selector.text = "div"  # type: ignore[misc]

    def test_failed_append_leaves_lineage_usable(self) -> None:
        base = Selector().element("div")
        with pytest.raises(DuplicatePartError):
            base.element("span")
        assert base.class_("ok").stringify() == "div.ok"

    def test_value_equality(self) -> None:
        assert Selector().element("a").class_("x") == Selector().element("a").class_("x")

    def test_state_tracking(self) -> None:
        selector = Selector().element("a").id("b").class_("c")
        assert selector.has_element
        assert selector.has_id
        assert not selector.has_pseudo_element
        assert selector.last_part is PartKind.CLASS


class TestDuplicates:
    """Element, id and pseudo-element are allowed once."""

    def test_element_twice(self) -> None:
        with pytest.raises(DuplicatePartError) as exc_info:
            Selector().element("div").element("span")
        assert exc_info.value.part is PartKind.ELEMENT

    def test_id_twice(self) -> None:
        with pytest.raises(DuplicatePartError):
            Selector().id("a").id("b")

    def test_pseudo_element_twice(self) -> None:
        with pytest.raises(DuplicatePartError):
            Selector().pseudo_element("before").pseudo_element("after")

    def test_id_after_element_then_id(self) -> None:
        with pytest.raises(DuplicatePartError):
            Selector().element("div").id("a").id("b")

    @pytest.mark.parametrize("method", ["class_", "attr", "pseudo_class"])
    def test_repeatable_parts(self, method: str) -> None:
        selector = getattr(getattr(Selector(), method)("a"), method)("b")
        assert selector.last_part is not None
        assert not selector.last_part.unique


class TestOrder:
    """Parts must appear in canonical order."""

    def test_class_after_attr(self) -> None:
        with pytest.raises(OrderError) as exc_info:
            Selector().attr("href").class_("x")
        assert exc_info.value.previous is PartKind.ATTRIBUTE
        assert exc_info.value.attempted is PartKind.CLASS

    def test_element_after_id(self) -> None:
        with pytest.raises(OrderError):
            Selector().id("main").element("div")

    def test_id_after_class(self) -> None:
        with pytest.raises(OrderError):
            Selector().class_("x").id("main")

    def test_pseudo_class_after_pseudo_element(self) -> None:
        with pytest.raises(OrderError):
            Selector().pseudo_element("after").pseudo_class("hover")

    def test_nothing_after_pseudo_element(self) -> None:
        base = Selector().element("p").pseudo_element("before")
        for append in (base.element, base.id, base.class_, base.attr, base.pseudo_class):
            with pytest.raises(OrderError):
                append("x")

    def test_out_of_order_duplicate_reports_order(self) -> None:
        with pytest.raises(OrderError):
            Selector().element("a").id("x").element("b")

    def test_skipping_ranks_is_allowed(self) -> None:
        assert Selector().element("a").pseudo_element("after").stringify() == "a::after"


class TestCombine:
    """Joining selectors with combinators."""

    def test_adjacent(self) -> None:
        left = Selector().element("div").id("main")
        right = Selector().element("table").id("data")
        assert Selector.combine(left, "+", right).stringify() == "div#main + table#data"

    def test_descendant_has_three_spaces(self) -> None:
        result = Selector.combine(Selector().element("tr"), " ", Selector().element("td"))
        assert result.stringify() == "tr   td"

    def test_nested(self) -> None:
        a = Selector().element("a")
        b = Selector().element("b")
        c = Selector().element("c")
        result = Selector.combine(Selector.combine(a, "+", b), "~", c)
        assert result.stringify() == "a + b ~ c"

    def test_combinator_is_opaque(self) -> None:
        result = Selector.combine(Selector().element("a"), "||", Selector().element("b"))
        assert result.stringify() == "a || b"

    def test_combined_carries_no_part_state(self) -> None:
        result = Selector.combine(Selector().element("a"), ">", Selector().element("b"))
        assert result.combined
        assert result.last_part is None
        assert not result.has_element

    def test_parts_after_combine_are_not_checked_against_operands(self) -> None:
        result = Selector.combine(Selector().element("a"), ">", Selector().class_("b"))
        assert result.element("span").stringify() == "a > .bspan"

    def test_operands_unchanged(self) -> None:
        left = Selector().element("ul")
        right = Selector().element("li")
        Selector.combine(left, ">", right)
        assert left.stringify() == "ul"
        assert right.stringify() == "li"

    def test_callable_from_instance(self) -> None:
        result = Selector().combine(Selector().element("a"), "~", Selector().element("b"))
        assert result.stringify() == "a ~ b"

    def test_is_empty(self) -> None:
        assert Selector().is_empty
        assert not Selector().element("a").is_empty
