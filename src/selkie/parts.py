"""Part kinds and combinators for compound CSS selectors.

A compound selector is built from typed parts that must appear in a fixed
canonical order:

    element#id.class[attr]:pseudo-class::pseudo-element

Each PartKind knows its rank in that order, how its value is rendered,
and whether it may occur more than once.

Thread Safety:
PartKind and Combinator are enums (inherently immutable).

"""

from enum import Enum, StrEnum


class PartKind(Enum):
    """Kinds of parts in a compound selector, in canonical order.

    The member value is the human-readable name used in error messages.

    """

    ELEMENT = "element"  # div
    ID = "id"  # #main
    CLASS = "class"  # .container
    ATTRIBUTE = "attribute"  # [href$=".png"]
    PSEUDO_CLASS = "pseudo-class"  # :focus
    PSEUDO_ELEMENT = "pseudo-element"  # ::before

    @property
    def rank(self) -> int:
        """Position of this kind in the canonical order (0-based)."""
        return _RANKS[self]

    @property
    def unique(self) -> bool:
        """True if the kind may occur at most once in a selector."""
        return self in _UNIQUE

    def render(self, value: str) -> str:
        """Render a raw value as this kind of fragment.

        The value is used verbatim; no escaping is applied.

        Example:
            >>> PartKind.ATTRIBUTE.render('href$=".png"')
            '[href$=".png"]'
        """
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


PART_ORDER: tuple[PartKind, ...] = tuple(PartKind)

_RANKS: dict[PartKind, int] = {kind: index for index, kind in enumerate(PART_ORDER)}

_UNIQUE = frozenset({PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT})

_AFFIXES: dict[PartKind, tuple[str, str]] = {
    PartKind.ELEMENT: ("", ""),
    PartKind.ID: ("#", ""),
    PartKind.CLASS: (".", ""),
    PartKind.ATTRIBUTE: ("[", "]"),
    PartKind.PSEUDO_CLASS: (":", ""),
    PartKind.PSEUDO_ELEMENT: ("::", ""),
}


class Combinator(StrEnum):
    """CSS combinators joining two compound selectors.

    Members are strings, so they can be passed anywhere a raw combinator
    string is accepted.

    """

    DESCENDANT = " "
    NEXT_SIBLING = "+"
    SUBSEQUENT_SIBLING = "~"
    CHILD = ">"


__all__ = [
    "PART_ORDER",
    "Combinator",
    "PartKind",
]
