from cssbuild.selector.builder import SelectorBuilder
from cssbuild.selector.facade import SelectorFacade, css_selector_builder
from cssbuild.selector.model import (
    SINGLETON_FRAGMENTS,
    Combinator,
    Fragment,
    JoinedSelector,
    SimpleSelector,
)

__all__ = [
    "SelectorBuilder",
    "SelectorFacade",
    "css_selector_builder",
    "Fragment",
    "Combinator",
    "SINGLETON_FRAGMENTS",
    "SimpleSelector",
    "JoinedSelector",
]
