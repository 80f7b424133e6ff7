"""Exception classes for Selkie.

Provides standardized exceptions for error handling throughout Selkie.
Every library error also subclasses ValueError, so callers that only
care about "bad input" can catch that instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selkie.parts import PartKind

CANONICAL_ORDER = "element, id, class, attribute, pseudo-class, pseudo-element"


class SelkieError(Exception):
    """Base exception for all Selkie errors.

    Subclass this for specific error categories.
    """

    pass


class SelectorError(SelkieError, ValueError):
    """Invalid selector construction.

    Raised when a part is appended in a way the CSS compound selector
    grammar does not allow. The receiving selector is left untouched.
    """

    pass


class DuplicatePartError(SelectorError):
    """A once-only part was added a second time.

    Element, id and pseudo-element may each occur at most once inside a
    compound selector.
    """

    def __init__(self, part: PartKind) -> None:
        """Initialize duplicate part error.

        Args:
            part: The once-only part kind that was repeated
        """
        self.part = part
        super().__init__(
            "Element, id and pseudo-element should not occur more then one time "
            f"inside the selector (got a second {part.value})"
        )


class OrderError(SelectorError):
    """A part was added after a part of higher rank."""

    def __init__(self, previous: PartKind, attempted: PartKind) -> None:
        """Initialize order error.

        Args:
            previous: Kind of the part already at the end of the selector
            attempted: Kind of the part that was rejected
        """
        self.previous = previous
        self.attempted = attempted
        super().__init__(
            "Selector parts should be arranged in the following order: "
            f"{CANONICAL_ORDER}. "
            f"Invalid order: {previous.value} followed by {attempted.value}"
        )


class CombinatorError(SelectorError):
    """Unknown combinator passed while strict combinator checking is on."""

    def __init__(self, combinator: str) -> None:
        self.combinator = combinator
        super().__init__(
            f"Unknown combinator {combinator!r}; expected one of ' ', '+', '~', '>'"
        )


class SerializationError(SelkieError, ValueError):
    """Error converting between JSON and a typed object.

    Raised when a payload is not valid JSON, is not a JSON object, or
    lacks fields the target type requires.
    """

    def __init__(self, target: type, message: str) -> None:
        """Initialize serialization error.

        Args:
            target: The type that was being restored
            message: Description of the problem
        """
        self.target = target
        super().__init__(f"Cannot restore {target.__name__}: {message}")
