"""Selector model: fragment kinds, combinators and selector data."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, StrEnum


class Fragment(Enum):
    """One typed piece of a simple selector.

    The value is the fragment's rank: fragments must be added in
    non-decreasing rank order.
    """

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def rank(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")


# Fragments that may appear at most once per selector
SINGLETON_FRAGMENTS = frozenset(
    {Fragment.ELEMENT, Fragment.ID, Fragment.PSEUDO_ELEMENT}
)


class Combinator(StrEnum):
    """CSS relational symbols joining two selectors."""

    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"


@dataclass
class SimpleSelector:
    """Fragment data of a selector that has not been combined.

    Rendered as ``element#id.class[attribute]:pseudo-class::pseudo-element``;
    classes and pseudo-classes may occur several times. Empty strings count
    as unset.
    """

    element: str | None = None
    id: str | None = None
    classes: list[str] = field(default_factory=list)
    attribute: str | None = None
    pseudo_classes: list[str] = field(default_factory=list)
    pseudo_element: str | None = None

    def is_empty(self) -> bool:
        return (
            not self.element
            and not self.id
            and not self.classes
            and not self.attribute
            and not self.pseudo_classes
            and not self.pseudo_element
        )

    def render(self) -> str:
        out = ""
        if self.element:
            out += self.element
        if self.id:
            out += f"#{self.id}"
        if self.classes:
            out += "." + ".".join(self.classes)
        if self.attribute:
            out += f"[{self.attribute}]"
        if self.pseudo_classes:
            out += ":" + ":".join(self.pseudo_classes)
        if self.pseudo_element:
            out += f"::{self.pseudo_element}"
        return out


@dataclass(frozen=True)
class JoinedSelector:
    """Two already-rendered selectors joined by a combinator."""

    left: str
    combinator: str
    right: str

    def render(self) -> str:
        # One space on each side even for the descendant combinator
        return f"{self.left} {self.combinator} {self.right}"
