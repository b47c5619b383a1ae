from models.todo import Todo, TodoList
from models.session import Session

__all__ = ["Todo", "TodoList", "Session"]
