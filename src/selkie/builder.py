"""Facade for building CSS selectors.

Each function starts a new selector from the empty one, so selectors read
left to right:

    >>> from selkie import builder
    >>> builder.id("main").class_("container").class_("editable").stringify()
    '#main.container.editable'

    >>> builder.combine(
    ...     builder.element("div").id("main"),
    ...     "+",
    ...     builder.element("table").id("data"),
    ... ).stringify()
    'div#main + table#data'

The same functions are grouped on ``css_selector_builder`` for callers that
prefer passing a single facade object around.

"""

from types import SimpleNamespace

from selkie.selector import Selector


def element(value: str) -> Selector:
    return Selector.empty().element(value)


def id(value: str) -> Selector:  # noqa: A001
    return Selector.empty().id(value)


def class_(value: str) -> Selector:
    return Selector.empty().class_(value)


def attr(value: str) -> Selector:
    return Selector.empty().attr(value)


def pseudo_class(value: str) -> Selector:
    return Selector.empty().pseudo_class(value)


def pseudo_element(value: str) -> Selector:
    return Selector.empty().pseudo_element(value)


def combine(left: Selector, combinator: str, right: Selector) -> Selector:
    """Join two built selectors with a combinator (' ', '+', '~', '>')."""
    return Selector.combine(left, combinator, right)


css_selector_builder = SimpleNamespace(
    element=element,
    id=id,
    class_=class_,
    attr=attr,
    pseudo_class=pseudo_class,
    pseudo_element=pseudo_element,
    combine=combine,
)


__all__ = [
    "attr",
    "class_",
    "combine",
    "css_selector_builder",
    "element",
    "id",
    "pseudo_class",
    "pseudo_element",
]
