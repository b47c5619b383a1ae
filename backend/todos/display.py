"""
Helpers the views use to summarise and order lists and todos.

Lists and todos are shown incomplete-first. The ordering is a stable
partition, and every item is paired with its index in the session so the
views can build action URLs.
"""

from typing import Callable, Iterable, Iterator, Optional, TypeVar

from models.todo import Todo, TodoList

T = TypeVar("T")


# ---------- Completion ----------

def todos_count(todo_list: TodoList) -> int:
    return len(todo_list.todos)


def todos_remaining_count(todo_list: TodoList) -> int:
    return sum(1 for todo in todo_list.todos if not todo.completed)


def is_list_complete(todo_list: TodoList) -> bool:
    """An empty list is never complete."""
    return todos_count(todo_list) >= 1 and todos_remaining_count(todo_list) == 0


def list_class(todo_list: TodoList) -> Optional[str]:
    return "complete" if is_list_complete(todo_list) else None


def todo_class(todo: Todo) -> Optional[str]:
    return "complete" if todo.completed else None


# ---------- Ordering ----------

def sort_for_display(items: Iterable[T], is_complete: Callable[[T], bool]) -> Iterator[tuple[T, int]]:
    """
    Yields (item, original_index): every incomplete item in its original
    order, then every complete item in its original order.
    """
    incomplete: list[tuple[T, int]] = []
    complete: list[tuple[T, int]] = []
    for index, item in enumerate(items):
        (complete if is_complete(item) else incomplete).append((item, index))

    yield from incomplete
    yield from complete


def sort_lists(lists: Iterable[TodoList]) -> Iterator[tuple[TodoList, int]]:
    return sort_for_display(lists, is_list_complete)


def sort_todos(todos: Iterable[Todo]) -> Iterator[tuple[Todo, int]]:
    return sort_for_display(todos, lambda todo: todo.completed)
