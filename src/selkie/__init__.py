"""
Selkie — Immutable CSS selector builder for Python

Builds CSS selector strings from typed parts with ordering validation,
once-only checks and combinators. Also ships a small Rectangle value and
JSON helpers that restore parsed data as typed objects. Zero runtime
dependencies.

Quick Start:
    >>> from selkie import builder
    >>> builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
    'a[href$=".png"]:focus'

    >>> builder.combine(
    ...     builder.element("div").id("main").class_("container"),
    ...     "+",
    ...     builder.combine(
    ...         builder.element("table").id("data"),
    ...         "~",
    ...         builder.element("tr").pseudo_class("nth-of-type(even)"),
    ...     ),
    ... ).stringify()
    'div#main.container + table#data ~ tr:nth-of-type(even)'

Validation:
    >>> builder.element("div").element("span")
    Traceback (most recent call last):
    ...
    selkie.errors.DuplicatePartError: ...

JSON helpers:
    >>> from selkie import Rectangle, from_json, to_json
    >>> from_json(Rectangle, to_json(Rectangle(10, 20))).get_area()
    200
"""

from selkie import builder
from selkie.builder import css_selector_builder
from selkie.config import (
    BuilderConfig,
    config_context,
    get_config,
    reset_config,
    set_config,
)
from selkie.errors import (
    CombinatorError,
    DuplicatePartError,
    OrderError,
    SelectorError,
    SelkieError,
    SerializationError,
)
from selkie.parts import PART_ORDER, Combinator, PartKind
from selkie.selector import Selector
from selkie.serialization import from_dict, from_json, to_dict, to_json
from selkie.shapes import Rectangle

__version__ = "0.1.0"


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Selector building
    "builder",
    "css_selector_builder",
    "Selector",
    "PartKind",
    "PART_ORDER",
    "Combinator",
    # Errors
    "SelkieError",
    "SelectorError",
    "DuplicatePartError",
    "OrderError",
    "CombinatorError",
    "SerializationError",
    # Shapes
    "Rectangle",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "BuilderConfig",
    "get_config",
    "set_config",
    "reset_config",
    "config_context",
]
