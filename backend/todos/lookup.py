"""
Positional lookup of lists and todos from URL path segments.

Ids are indexes into the session's lists (or a list's todos), so they shift
down when an earlier element is removed.
"""

import logging
import re

from fastapi import HTTPException

from models.session import Session
from models.todo import Todo, TodoList

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_id(raw: str) -> int:
    """Leading integer of `raw`; 0 when it does not start with one ("abc" -> 0, "2x" -> 2)."""
    match = _LEADING_INT.match(raw)
    return int(match.group(1)) if match else 0


def find_list(session: Session, raw_id: str) -> tuple[int, TodoList]:
    list_id = parse_id(raw_id)
    if not 0 <= list_id < len(session.lists):
        logger.warning("List %r not found (session has %d lists)", raw_id, len(session.lists))
        raise HTTPException(status_code=404, detail="The specified list was not found.")
    return list_id, session.lists[list_id]


def find_todo(todo_list: TodoList, raw_id: str) -> tuple[int, Todo]:
    todo_id = parse_id(raw_id)
    if not 0 <= todo_id < len(todo_list.todos):
        logger.warning("Todo %r not found in list %r", raw_id, todo_list.name)
        raise HTTPException(status_code=404, detail="The specified todo was not found.")
    return todo_id, todo_list.todos[todo_id]
