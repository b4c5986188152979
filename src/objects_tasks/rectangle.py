"""Rectangle value with a derived area."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A width x height rectangle. Values are not validated."""

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height
