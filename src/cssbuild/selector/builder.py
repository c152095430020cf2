"""Fluent CSS selector builder.

A builder is either *simple* (fragments accumulate through the chained
setters) or *combined* (two rendered selectors joined by a combinator).
Each setter mutates the builder in place and returns it, so calls chain::

    SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus")
"""

from __future__ import annotations

import logging

from cssbuild.config import BuilderConfig
from cssbuild.errors import (
    CombinedSelectorError,
    DuplicateFragment,
    InvalidCombinator,
    OrderViolation,
)
from cssbuild.selector.model import (
    SINGLETON_FRAGMENTS,
    Combinator,
    Fragment,
    JoinedSelector,
    SimpleSelector,
)

__all__ = ["SelectorBuilder"]

logger = logging.getLogger("cssbuild.selector")

_COMBINATORS = {c.value for c in Combinator}


class SelectorBuilder:
    """Accumulates selector fragments and renders them with :meth:`stringify`."""

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or BuilderConfig()
        self.parts = SimpleSelector()
        self.joined: JoinedSelector | None = None
        self.last_rank = Fragment.ELEMENT.rank

    # --- fragment setters -----------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        self._advance(Fragment.ELEMENT, self.parts.element)
        self.parts.element = value
        return self

    def id(self, value: str) -> SelectorBuilder:
        self._advance(Fragment.ID, self.parts.id)
        self.parts.id = value
        return self

    def class_(self, value: str) -> SelectorBuilder:
        self._advance(Fragment.CLASS)
        self.parts.classes.append(value)
        return self

    def attr(self, value: str) -> SelectorBuilder:
        """Set the attribute expression, e.g. ``href$=".png"``; last call wins."""
        self._advance(Fragment.ATTRIBUTE)
        self.parts.attribute = value
        return self

    def pseudo_class(self, value: str) -> SelectorBuilder:
        self._advance(Fragment.PSEUDO_CLASS)
        self.parts.pseudo_classes.append(value)
        return self

    def pseudo_element(self, value: str) -> SelectorBuilder:
        self._advance(Fragment.PSEUDO_ELEMENT, self.parts.pseudo_element)
        self.parts.pseudo_element = value
        return self

    def add(self, fragment: Fragment, value: str) -> SelectorBuilder:
        """Apply the setter for *fragment*; used where the kind is data."""
        setter = {
            Fragment.ELEMENT: self.element,
            Fragment.ID: self.id,
            Fragment.CLASS: self.class_,
            Fragment.ATTRIBUTE: self.attr,
            Fragment.PSEUDO_CLASS: self.pseudo_class,
            Fragment.PSEUDO_ELEMENT: self.pseudo_element,
        }[fragment]
        return setter(value)

    # --- combination ----------------------------------------------------------

    def combine(
        self,
        left: SelectorBuilder | str,
        combinator: str,
        right: SelectorBuilder | str,
    ) -> SelectorBuilder:
        """Turn this empty builder into ``left <combinator> right``.

        Both sides are rendered now; later changes to *left* or *right* do
        not affect this selector.
        """
        if self.joined is not None:
            raise CombinedSelectorError("Selector has already been combined")
        if not self.parts.is_empty():
            raise CombinedSelectorError(
                f"Cannot combine into a selector that already has fragments: "
                f"{self.parts.render()!r}"
            )
        combinator = self._check_combinator(combinator)
        self.joined = JoinedSelector(
            left=_render(left), combinator=combinator, right=_render(right)
        )
        logger.debug(
            "Combined selectors: left=%r combinator=%r right=%r",
            self.joined.left,
            combinator,
            self.joined.right,
        )
        return self

    @property
    def is_combined(self) -> bool:
        return self.joined is not None

    # --- output ---------------------------------------------------------------

    def stringify(self) -> str:
        if self.joined is not None:
            return self.joined.render()
        return self.parts.render()

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"

    # --- internals ------------------------------------------------------------

    def _advance(self, fragment: Fragment, current: str | None = None) -> None:
        if self.joined is not None:
            raise CombinedSelectorError(
                f"Cannot add {fragment.label} to a combined selector",
                fragment=fragment,
            )
        if fragment.rank < self.last_rank:
            raise OrderViolation(fragment, after=Fragment(self.last_rank))
        if fragment in SINGLETON_FRAGMENTS and current:
            raise DuplicateFragment(fragment)
        self.last_rank = fragment.rank

    def _check_combinator(self, combinator: str) -> str:
        if combinator in _COMBINATORS:
            return Combinator(combinator).value
        if self.config.strict_combinators:
            raise InvalidCombinator(combinator)
        logger.warning("Passing through unknown combinator %r", combinator)
        return combinator


def _render(selector: SelectorBuilder | str) -> str:
    if isinstance(selector, str):
        return selector
    return selector.stringify()
