"""Reuse immutable selectors as building blocks for larger ones."""

from selkie import Combinator, builder

even_row = builder.element("tr").pseudo_class("nth-of-type(even)")
even_cell = builder.element("td").pseudo_class("nth-of-type(even)")

selector = builder.combine(
    builder.element("div").id("main").class_("container").class_("draggable"),
    Combinator.NEXT_SIBLING,
    builder.combine(
        builder.element("table").id("data"),
        Combinator.SUBSEQUENT_SIBLING,
        builder.combine(even_row, Combinator.DESCENDANT, even_cell),
    ),
)

print(selector.stringify())
# even_row is unchanged and can be reused
print(builder.combine(builder.element("tbody"), ">", even_row).stringify())
