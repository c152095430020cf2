"""Error hierarchy for cssbuild."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssbuild.selector.model import Fragment


class CssBuildError(Exception):
    """Base error for all cssbuild errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Selector builder misuse
# ---------------------------------------------------------------------------


class SelectorError(CssBuildError):
    """The fluent selector API was used in an invalid way."""

    def __init__(
        self,
        message: str,
        *,
        fragment: Fragment | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.fragment = fragment


class DuplicateFragment(SelectorError):
    """Element, id or pseudo-element was set twice on one selector."""

    def __init__(self, fragment: Fragment) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more than one "
            f"time inside the selector (got a second {fragment.label})",
            fragment=fragment,
        )


class OrderViolation(SelectorError):
    """A fragment was added after a fragment that must follow it."""

    def __init__(self, fragment: Fragment, after: Fragment) -> None:
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element "
            f"(got {fragment.label} after {after.label})",
            fragment=fragment,
        )
        self.after = after


class InvalidCombinator(SelectorError):
    """The combinator is not one of ' ', '+', '~', '>'."""

    def __init__(self, combinator: str) -> None:
        super().__init__(
            f"Unknown combinator {combinator!r}; expected one of ' ', '+', '~', '>'"
        )
        self.combinator = combinator


class CombinedSelectorError(SelectorError):
    """A combined selector cannot take fragments or be combined again."""


# ---------------------------------------------------------------------------
# Record codec
# ---------------------------------------------------------------------------


class RecordError(CssBuildError):
    """Base error for record serialization."""


class RecordEncodeError(RecordError):
    """A value could not be serialized to JSON."""


class RecordDecodeError(RecordError):
    """JSON text could not be turned into a record."""
