"""JSON wrappers: serialize any value, deserialize into an instance of a class."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from objects_tasks.errors import ParseError

__all__ = ["serialize", "deserialize"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _encode(value: Any) -> Any:
    """Fallback encoder for values ``json`` does not handle natively."""
    # Instance attributes first: deserialize() may add or omit declared fields.
    if hasattr(value, "__dict__"):
        return vars(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def serialize(value: Any, *, indent: int | None = None, sort_keys: bool = False) -> str:
    """Return the JSON text for *value*.

    Output is compact (``[1,2,3]``) unless *indent* is given. Dataclasses and
    plain objects are written as their field dictionaries.
    """
    separators = (",", ":") if indent is None else None
    return json.dumps(
        value,
        default=_encode,
        indent=indent,
        sort_keys=sort_keys,
        separators=separators,
    )


def deserialize(cls: type[T], text: str) -> T:
    """Parse *text* and return it as an instance of *cls*.

    ``cls.__init__`` is not called: every key of the JSON object becomes an
    attribute of a bare instance, so the class's methods operate on the
    parsed data. Raises ParseError for malformed JSON or a non-object document.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(
            f"Invalid JSON: {exc.msg}", line=exc.lineno, column=exc.colno, cause=exc
        ) from exc

    if not isinstance(data, dict):
        raise ParseError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )

    instance = cls.__new__(cls)
    for key, value in data.items():
        # object.__setattr__ also works for frozen dataclasses and slots.
        object.__setattr__(instance, key, value)
    logger.debug("Deserialized %s with fields %s", cls.__name__, list(data))
    return instance
