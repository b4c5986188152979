"""Stateless facade that starts selector chains and combines selectors."""

from __future__ import annotations

import logging

from objects_tasks.selector.model import CombinedSelector, Renderable, SimpleSelector

__all__ = ["SelectorBuilder", "selector_builder"]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Entry point for building selectors.

    Each part method starts a new :class:`SimpleSelector`, which accepts
    further parts by chaining::

        selector_builder.element("a").attr('href$=".png"').pseudo_class("focus")
    """

    def element(self, name: str) -> SimpleSelector:
        return SimpleSelector().element(name)

    def id(self, name: str) -> SimpleSelector:
        return SimpleSelector().id(name)

    def class_(self, *names: str) -> SimpleSelector:
        return SimpleSelector().class_(*names)

    def attr(self, expr: str) -> SimpleSelector:
        return SimpleSelector().attr(expr)

    def pseudo_class(self, *names: str) -> SimpleSelector:
        return SimpleSelector().pseudo_class(*names)

    def pseudo_element(self, name: str) -> SimpleSelector:
        return SimpleSelector().pseudo_element(name)

    def combine(
        self, left: Renderable, combinator: str, right: Renderable
    ) -> CombinedSelector:
        logger.debug("Combining selectors with %r", combinator)
        return CombinedSelector(left=left, combinator=combinator, right=right)


selector_builder = SelectorBuilder()
