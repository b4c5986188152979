"""objects_tasks: rectangle, JSON wrappers and a CSS selector builder."""
from __future__ import annotations

__version__ = "0.1.0"

from objects_tasks.errors import (
    DuplicateError,
    ObjectsTasksError,
    OrderError,
    ParseError,
    SelectorError,
)
from objects_tasks.rectangle import Rectangle
from objects_tasks.selector import (
    Category,
    CombinedSelector,
    Renderable,
    SelectorBuilder,
    SimpleSelector,
    selector_builder,
)
from objects_tasks.serialization import deserialize, serialize

__all__ = [
    "__version__",
    # Errors
    "ObjectsTasksError",
    "SelectorError",
    "OrderError",
    "DuplicateError",
    "ParseError",
    # Helpers
    "Rectangle",
    "serialize",
    "deserialize",
    # Selectors
    "Category",
    "Renderable",
    "SimpleSelector",
    "CombinedSelector",
    "SelectorBuilder",
    "selector_builder",
]
