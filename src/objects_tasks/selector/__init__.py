from objects_tasks.selector.builder import SelectorBuilder, selector_builder
from objects_tasks.selector.model import (
    Category,
    CombinedSelector,
    Renderable,
    SimpleSelector,
)

__all__ = [
    "Category",
    "Renderable",
    "SimpleSelector",
    "CombinedSelector",
    "SelectorBuilder",
    "selector_builder",
]
