"""Build a CSS selector in one line — zero config, zero deps."""

from selkie import builder

selector = builder.element("a").attr('href$=".png"').pseudo_class("focus")
print(selector.stringify())
