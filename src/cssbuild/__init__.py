"""cssbuild: fluent CSS selector builder and small record helpers."""
from __future__ import annotations

__version__ = "0.1.0"

from cssbuild.config import BuilderConfig
from cssbuild.errors import (
    CombinedSelectorError,
    CssBuildError,
    DuplicateFragment,
    InvalidCombinator,
    OrderViolation,
    RecordDecodeError,
    RecordEncodeError,
    RecordError,
    SelectorError,
)
from cssbuild.records import Rectangle, from_json, make_rectangle, to_json
from cssbuild.selector import (
    Combinator,
    Fragment,
    SelectorBuilder,
    SelectorFacade,
    css_selector_builder,
)

__all__ = [
    "__version__",
    # config
    "BuilderConfig",
    # selector
    "SelectorBuilder",
    "SelectorFacade",
    "css_selector_builder",
    "Fragment",
    "Combinator",
    # records
    "Rectangle",
    "make_rectangle",
    "to_json",
    "from_json",
    # errors
    "CssBuildError",
    "SelectorError",
    "DuplicateFragment",
    "OrderViolation",
    "InvalidCombinator",
    "CombinedSelectorError",
    "RecordError",
    "RecordEncodeError",
    "RecordDecodeError",
]
