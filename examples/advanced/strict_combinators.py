"""Opt into combinator validation with a scoped config."""

from selkie import BuilderConfig, CombinatorError, builder, config_context

ul = builder.element("ul")
li = builder.element("li")

with config_context(BuilderConfig(strict_combinators=True)):
    print(builder.combine(ul, ">", li).stringify())
    try:
        builder.combine(ul, "=>", li)
    except CombinatorError as e:
        print("Rejected:", e)
