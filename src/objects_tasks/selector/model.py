"""Selector model: Category ranking, SimpleSelector and CombinedSelector."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol, runtime_checkable

from objects_tasks.errors import DuplicateError, OrderError

logger = logging.getLogger(__name__)


class Category(IntEnum):
    """Selector part kinds, ranked in rendering order."""

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5


# Categories that may appear at most once per selector.
_SINGLETONS = frozenset(
    {Category.ELEMENT, Category.ID, Category.ATTRIBUTE, Category.PSEUDO_ELEMENT}
)


@runtime_checkable
class Renderable(Protocol):
    """Anything that renders itself to selector text."""

    def stringify(self) -> str: ...


class SimpleSelector:
    """One compound selector such as ``a#nav.item[href]:hover::before``.

    Parts are added through chainable methods that must follow the order
    element, id, class, attribute, pseudo-class, pseudo-element. Each method
    returns the selector itself.
    """

    def __init__(self) -> None:
        self.element_name: str | None = None
        self.id_name: str | None = None
        self.class_names: list[str] = []
        self.attribute_expr: str | None = None
        self.pseudo_class_names: list[str] = []
        self.pseudo_element_name: str | None = None
        self._highest: Category | None = None

    @property
    def category(self) -> Category | None:
        """The latest category added so far, or None for an empty selector."""
        return self._highest

    def _advance(self, category: Category) -> None:
        """Check *category* against the parts already present and record it."""
        if self._highest is not None:
            if category < self._highest:
                logger.debug(
                    "Rejected %s after %s", category.name, self._highest.name
                )
                raise OrderError()
            if category == self._highest and category in _SINGLETONS:
                logger.debug("Rejected repeated %s", category.name)
                raise DuplicateError()
        self._highest = category

    # --- parts ----------------------------------------------------------------

    def element(self, name: str) -> SimpleSelector:
        self._advance(Category.ELEMENT)
        self.element_name = name
        return self

    def id(self, name: str) -> SimpleSelector:
        self._advance(Category.ID)
        self.id_name = name
        return self

    def class_(self, *names: str) -> SimpleSelector:
        if not names:
            return self
        self._advance(Category.CLASS)
        self.class_names.extend(names)
        return self

    def attr(self, expr: str) -> SimpleSelector:
        """Add an attribute expression, given without the brackets."""
        self._advance(Category.ATTRIBUTE)
        self.attribute_expr = expr
        return self

    def pseudo_class(self, *names: str) -> SimpleSelector:
        if not names:
            return self
        self._advance(Category.PSEUDO_CLASS)
        self.pseudo_class_names.extend(names)
        return self

    def pseudo_element(self, name: str) -> SimpleSelector:
        self._advance(Category.PSEUDO_ELEMENT)
        self.pseudo_element_name = name
        return self

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        parts: list[str] = []
        if self.element_name is not None:
            parts.append(self.element_name)
        if self.id_name is not None:
            parts.append(f"#{self.id_name}")
        parts.extend(f".{name}" for name in self.class_names)
        if self.attribute_expr is not None:
            parts.append(f"[{self.attribute_expr}]")
        parts.extend(f":{name}" for name in self.pseudo_class_names)
        if self.pseudo_element_name is not None:
            parts.append(f"::{self.pseudo_element_name}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SimpleSelector({self.stringify()!r})"


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator (``' '``, ``'>'``, ``'+'``, ``'~'``).

    The combinator is not validated; it is written between the two rendered
    sides with one space on each side.
    """

    left: Renderable
    combinator: str
    right: Renderable

    def stringify(self) -> str:
        return f"{self.left.stringify()} {self.combinator} {self.right.stringify()}"

    def __str__(self) -> str:
        return self.stringify()
