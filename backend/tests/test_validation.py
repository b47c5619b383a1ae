"""
Tests for list and todo name validation.
"""

import pytest

from models.todo import TodoList
from todos.validation import (
    MAX_NAME_LENGTH,
    NameErrorKind,
    error_for_list_name,
    error_for_todo_name,
)


# ── List names ─────────────────────────────────────────────────────────────


class TestListName:

    def setup_method(self):
        self.lists = [TodoList(name="Groceries"), TodoList(name="Chores")]

    @pytest.mark.parametrize("name", ["", "x" * (MAX_NAME_LENGTH + 1), "y" * 250])
    def test_invalid_length(self, name):
        error = error_for_list_name(name, self.lists)
        assert error is not None
        assert error.kind == NameErrorKind.INVALID_LENGTH
        assert error.message == "The list name must be between 1 and 100 characters."

    @pytest.mark.parametrize("name", ["a", "Work", "z" * MAX_NAME_LENGTH])
    def test_valid(self, name):
        assert error_for_list_name(name, self.lists) is None

    def test_duplicate(self):
        error = error_for_list_name("Chores", self.lists)
        assert error is not None
        assert error.kind == NameErrorKind.DUPLICATE_NAME
        assert error.message == 'The list name "Chores" is already in use.'

    def test_duplicate_is_case_sensitive(self):
        assert error_for_list_name("groceries", self.lists) is None

    def test_length_checked_before_uniqueness(self):
        lists = [TodoList(name="")]
        error = error_for_list_name("", lists)
        assert error.kind == NameErrorKind.INVALID_LENGTH

    def test_no_existing_lists(self):
        assert error_for_list_name("Groceries", []) is None


# ── Todo names ─────────────────────────────────────────────────────────────


class TestTodoName:

    @pytest.mark.parametrize("name", ["", "x" * (MAX_NAME_LENGTH + 1)])
    def test_invalid_length(self, name):
        error = error_for_todo_name(name)
        assert error is not None
        assert error.kind == NameErrorKind.INVALID_LENGTH
        assert error.message == "The todo must be between 1 and 100 characters."

    @pytest.mark.parametrize("name", ["Milk", "x" * MAX_NAME_LENGTH])
    def test_valid(self, name):
        assert error_for_todo_name(name) is None
