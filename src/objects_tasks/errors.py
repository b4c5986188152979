"""Error hierarchy for objects_tasks."""
from __future__ import annotations


class ObjectsTasksError(Exception):
    """Base error for all objects_tasks errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Selector errors
# ---------------------------------------------------------------------------


class SelectorError(ObjectsTasksError):
    """A selector was built with an invalid sequence of parts."""


class OrderError(SelectorError):
    """A selector part was added after a part of a later category."""

    MESSAGE = (
        "Selector parts should be arranged in the following order: "
        "element, id, class, attribute, pseudo-class, pseudo-element"
    )

    def __init__(self, message: str = MESSAGE, **kwargs) -> None:
        super().__init__(message, **kwargs)


class DuplicateError(SelectorError):
    """A single-valued selector part was set a second time."""

    MESSAGE = (
        "Element, id and pseudo-element should not occur more than one time "
        "inside the selector"
    )

    def __init__(self, message: str = MESSAGE, **kwargs) -> None:
        super().__init__(message, **kwargs)


# ---------------------------------------------------------------------------
# Deserialization errors
# ---------------------------------------------------------------------------


class ParseError(ObjectsTasksError):
    """Raised when JSON text cannot be turned into an object."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        *,
        cause: Exception | None = None,
    ) -> None:
        self.line = line
        self.column = column
        super().__init__(message, cause=cause)
