"""Entry surface: every call starts a fresh SelectorBuilder."""

from __future__ import annotations

from cssbuild.config import BuilderConfig
from cssbuild.selector.builder import SelectorBuilder

__all__ = ["SelectorFacade", "css_selector_builder"]


class SelectorFacade:
    """Stateless factory for selector builders.

    Example::

        builder = SelectorFacade()
        builder.id("main").class_("container").class_("editable").stringify()
        # => '#main.container.editable'
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or BuilderConfig()

    def _new(self) -> SelectorBuilder:
        return SelectorBuilder(self.config)

    def element(self, value: str) -> SelectorBuilder:
        return self._new().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return self._new().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._new().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._new().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._new().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._new().pseudo_element(value)

    def combine(
        self,
        left: SelectorBuilder | str,
        combinator: str,
        right: SelectorBuilder | str,
    ) -> SelectorBuilder:
        """Join two finished selectors into a new combined builder."""
        return self._new().combine(left, combinator, right)


css_selector_builder = SelectorFacade()
