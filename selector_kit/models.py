"""Shared types for building CSS selectors."""

from enum import IntEnum
from typing import Protocol, runtime_checkable

# Combinators accepted by combine(); " " is the descendant combinator
COMBINATORS = (" ", "+", "~", ">")


class Category(IntEnum):
    """Selector fragment kinds, in the order they must appear."""

    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def is_singleton(self) -> bool:
        """Whether the category allows at most one value per selector."""
        return self in (Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT)

    @property
    def label(self) -> str:
        """Human-readable name, e.g. 'pseudo-class'."""
        return self.name.lower().replace("_", "-")

    def format(self, value: str) -> str:
        """Wrap a fragment value in this category's markers."""
        prefix, suffix = _MARKERS[self]
        return f"{prefix}{value}{suffix}"


_MARKERS = {
    Category.ELEMENT: ("", ""),
    Category.ID: ("#", ""),
    Category.CLASS: (".", ""),
    Category.ATTRIBUTE: ("[", "]"),
    Category.PSEUDO_CLASS: (":", ""),
    Category.PSEUDO_ELEMENT: ("::", ""),
}


@runtime_checkable
class Renderable(Protocol):
    """Anything that produces a selector string on demand."""

    def render(self) -> str: ...
