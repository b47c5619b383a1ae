"""
Tests for completion status and the incomplete-first display ordering.
"""

import itertools

import pytest

from models.todo import Todo, TodoList
from todos.display import (
    is_list_complete,
    list_class,
    sort_for_display,
    sort_lists,
    sort_todos,
    todo_class,
    todos_count,
    todos_remaining_count,
)


def _make_list(name: str, *completed: bool) -> TodoList:
    return TodoList(
        name=name,
        todos=[Todo(name=f"{name}-{i}", completed=done) for i, done in enumerate(completed)],
    )


# ── Completion ─────────────────────────────────────────────────────────────


class TestCompletion:

    def test_empty_list_is_not_complete(self):
        todo_list = _make_list("Empty")
        assert not is_list_complete(todo_list)
        assert list_class(todo_list) is None

    def test_all_completed(self):
        todo_list = _make_list("Done", True, True)
        assert is_list_complete(todo_list)
        assert list_class(todo_list) == "complete"

    def test_partially_completed(self):
        assert not is_list_complete(_make_list("Half", True, False))

    def test_counts(self):
        todo_list = _make_list("Mixed", True, False, False)
        assert todos_count(todo_list) == 3
        assert todos_remaining_count(todo_list) == 2

    def test_todo_class(self):
        assert todo_class(Todo(name="a", completed=True)) == "complete"
        assert todo_class(Todo(name="a")) is None


# ── Ordering ───────────────────────────────────────────────────────────────


class TestSortForDisplay:

    @pytest.mark.parametrize("flags", list(itertools.product([False, True], repeat=4)))
    def test_stable_partition(self, flags):
        items = list(enumerate(flags))  # (original position, completed)
        ordered = list(sort_for_display(items, lambda item: item[1]))

        incomplete = [index for _, index in ordered if not flags[index]]
        complete = [index for _, index in ordered if flags[index]]

        assert [index for _, index in ordered] == incomplete + complete
        assert incomplete == sorted(incomplete)
        assert complete == sorted(complete)
        assert all(item == items[index] for item, index in ordered)

    def test_empty(self):
        assert list(sort_for_display([], lambda item: True)) == []

    def test_equal_items_keep_their_own_index(self):
        todos = [Todo(name="Milk"), Todo(name="Eggs", completed=True), Todo(name="Milk")]
        assert [index for _, index in sort_todos(todos)] == [0, 2, 1]

    def test_sort_lists_puts_complete_lists_last(self):
        lists = [
            _make_list("Done", True),
            _make_list("Empty"),
            _make_list("Open", False, True),
        ]
        ordered = [(todo_list.name, index) for todo_list, index in sort_lists(lists)]
        assert ordered == [("Empty", 1), ("Open", 2), ("Done", 0)]
