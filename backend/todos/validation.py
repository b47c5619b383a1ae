"""
Name validation for todo lists and todos.

Each check returns a NameValidationError describing the first problem found,
or None when the name is acceptable. Callers are expected to strip the
submitted value first.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from models.todo import TodoList

MIN_NAME_LENGTH = 1
MAX_NAME_LENGTH = 100


class NameErrorKind(str, Enum):
    INVALID_LENGTH = "invalid_length"
    DUPLICATE_NAME = "duplicate_name"


class NameValidationError(BaseModel):
    kind: NameErrorKind
    message: str


def _valid_length(name: str) -> bool:
    return MIN_NAME_LENGTH <= len(name) <= MAX_NAME_LENGTH


def error_for_list_name(name: str, existing_lists: list[TodoList]) -> Optional[NameValidationError]:
    """
    Length is checked before uniqueness. Uniqueness is an exact,
    case-sensitive match against every list, so renaming a list to its
    current name is reported as a duplicate.
    """
    if not _valid_length(name):
        return NameValidationError(
            kind=NameErrorKind.INVALID_LENGTH,
            message=f"The list name must be between {MIN_NAME_LENGTH} and {MAX_NAME_LENGTH} characters.",
        )
    if any(todo_list.name == name for todo_list in existing_lists):
        return NameValidationError(
            kind=NameErrorKind.DUPLICATE_NAME,
            message=f'The list name "{name}" is already in use.',
        )
    return None


def error_for_todo_name(name: str) -> Optional[NameValidationError]:
    if not _valid_length(name):
        return NameValidationError(
            kind=NameErrorKind.INVALID_LENGTH,
            message=f"The todo must be between {MIN_NAME_LENGTH} and {MAX_NAME_LENGTH} characters.",
        )
    return None
