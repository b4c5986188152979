"""Tests for objects_tasks.errors."""
from __future__ import annotations

import pytest

from objects_tasks.errors import (
    DuplicateError,
    ObjectsTasksError,
    OrderError,
    ParseError,
    SelectorError,
)


# ---------------------------------------------------------------------------
# Hierarchy
# ---------------------------------------------------------------------------


class TestObjectsTasksError:
    def test_is_exception(self) -> None:
        assert issubclass(ObjectsTasksError, Exception)

    def test_message(self) -> None:
        assert str(ObjectsTasksError("boom")) == "boom"

    def test_cause_default_none(self) -> None:
        assert ObjectsTasksError("boom").cause is None

    def test_cause_set(self) -> None:
        orig = ValueError("original")
        assert ObjectsTasksError("wrapped", cause=orig).cause is orig


class TestSelectorErrors:
    @pytest.mark.parametrize("cls", [OrderError, DuplicateError])
    def test_subclass(self, cls: type) -> None:
        assert issubclass(cls, SelectorError)
        assert issubclass(cls, ObjectsTasksError)

    def test_order_default_message(self) -> None:
        assert str(OrderError()) == OrderError.MESSAGE
        assert "element, id, class, attribute" in str(OrderError())

    def test_duplicate_default_message(self) -> None:
        assert str(DuplicateError()) == DuplicateError.MESSAGE

    def test_custom_message(self) -> None:
        assert str(OrderError("custom")) == "custom"


class TestParseError:
    def test_position_defaults(self) -> None:
        err = ParseError("bad")
        assert err.line is None
        assert err.column is None

    def test_position(self) -> None:
        err = ParseError("bad", line=3, column=7)
        assert (err.line, err.column) == (3, 7)
        assert str(err) == "bad"

    def test_not_a_selector_error(self) -> None:
        assert not issubclass(ParseError, SelectorError)
