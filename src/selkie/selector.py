"""Immutable CSS selector builder.

A Selector accumulates typed parts of a compound selector and renders
them as a CSS string:

    >>> Selector().element("a").attr('href$=".png"').pseudo_class("focus").stringify()
    'a[href$=".png"]:focus'

Parts must follow the canonical order (element, id, class, attribute,
pseudo-class, pseudo-element). Element, id and pseudo-element may each
appear once; class, attribute and pseudo-class may repeat and accumulate
in call order. Violations raise OrderError or DuplicatePartError before
anything is built.

Two selectors can be joined with a combinator. The combined selector holds
only the rendered text; it does not remember the parts on either side, so
parts appended to it afterwards are not checked against them.

Thread Safety:
Selector is a frozen dataclass. Every append returns a new Selector and
never touches the receiver, so selectors can be shared between threads and
reused as building blocks for several larger selectors.

"""

from __future__ import annotations

from dataclasses import dataclass

from selkie.config import get_config
from selkie.errors import CombinatorError, DuplicatePartError, OrderError
from selkie.parts import Combinator, PartKind
from selkie.utils.logger import get_logger

logger = get_logger(__name__)

_KNOWN_COMBINATORS = frozenset(c.value for c in Combinator)


@dataclass(frozen=True, slots=True)
class Selector:
    """A partially or fully built CSS selector.

    Attributes:
        text: Rendered selector so far
        has_element: An element part is present in this lineage
        has_id: An id part is present in this lineage
        has_pseudo_element: A pseudo-element part is present in this lineage
        last_part: Kind of the most recently appended part (None when empty
            or combined)
        combined: Selector was produced by combine()

    """

    text: str = ""
    has_element: bool = False
    has_id: bool = False
    has_pseudo_element: bool = False
    last_part: PartKind | None = None
    combined: bool = False

    @classmethod
    def empty(cls) -> Selector:
        """Return the shared empty selector."""
        return _EMPTY

    @property
    def is_empty(self) -> bool:
        return not self.text

    def element(self, value: str) -> Selector:
        """Append a type selector (``div``). Allowed once, first."""
        return self._append(PartKind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        """Append an id selector (``#main``). Allowed once."""
        return self._append(PartKind.ID, value)

    def class_(self, value: str) -> Selector:
        """Append a class selector (``.container``). Repeatable."""
        return self._append(PartKind.CLASS, value)

    def attr(self, value: str) -> Selector:
        """Append an attribute selector (``[href]``). Repeatable."""
        return self._append(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        """Append a pseudo-class (``:focus``). Repeatable."""
        return self._append(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        """Append a pseudo-element (``::before``). Allowed once, last."""
        return self._append(PartKind.PSEUDO_ELEMENT, value)

    @classmethod
    def combine(cls, left: Selector, combinator: str, right: Selector) -> Selector:
        """Join two selectors with a combinator.

        The combinator is surrounded by single spaces, so the descendant
        combinator ``" "`` yields three spaces between the operands.

        Args:
            left: Selector on the left-hand side
            combinator: Combinator string, usually one of ' ', '+', '~', '>'
            right: Selector on the right-hand side

        Returns:
            New selector carrying only the rendered text

        Raises:
            CombinatorError: If strict combinators are enabled in the active
                config and the combinator is not a CSS combinator

        Example:
            >>> div = Selector().element("div").id("main")
            >>> table = Selector().element("table").id("data")
            >>> Selector.combine(div, "+", table).stringify()
            'div#main + table#data'
        """
        if get_config().strict_combinators and combinator not in _KNOWN_COMBINATORS:
            logger.debug("Rejected combinator %r", combinator)
            raise CombinatorError(combinator)
        return cls(
            text=f"{left.stringify()} {combinator} {right.stringify()}",
            combined=True,
        )

    def stringify(self) -> str:
        """Return the rendered selector."""
        return self.text

    def __str__(self) -> str:
        return self.text

    def _holds(self, kind: PartKind) -> bool:
        if kind is PartKind.ELEMENT:
            return self.has_element
        if kind is PartKind.ID:
            return self.has_id
        if kind is PartKind.PSEUDO_ELEMENT:
            return self.has_pseudo_element
        return False

    def _append(self, kind: PartKind, value: str) -> Selector:
        """Validate and append one part, returning a new selector.

        The order check runs before the duplicate check. A repeated element
        directly after an element is in order and so reports the duplicate.
        """
        last = self.last_part
        if last is not None and kind.rank < last.rank:
            logger.debug("Rejected %s after %s in %r", kind.value, last.value, self.text)
            raise OrderError(last, kind)
        if kind.unique and self._holds(kind):
            logger.debug("Rejected second %s in %r", kind.value, self.text)
            raise DuplicatePartError(kind)

        return Selector(
            text=self.text + kind.render(value),
            has_element=self.has_element or kind is PartKind.ELEMENT,
            has_id=self.has_id or kind is PartKind.ID,
            has_pseudo_element=self.has_pseudo_element or kind is PartKind.PSEUDO_ELEMENT,
            last_part=kind,
            combined=self.combined,
        )


_EMPTY = Selector()


__all__ = ["Selector"]
