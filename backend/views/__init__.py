"""
Jinja2 views.

render() hands the session's flash messages to the template and clears them,
so each message is shown on exactly one page.
"""

import os

from fastapi import Request
from fastapi.templating import Jinja2Templates

from models.session import Session
from todos.display import (
    is_list_complete,
    list_class,
    sort_lists,
    sort_todos,
    todo_class,
    todos_count,
    todos_remaining_count,
)

TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), "templates")

templates = Jinja2Templates(directory=TEMPLATES_DIR)
templates.env.globals.update(
    is_list_complete=is_list_complete,
    list_class=list_class,
    sort_lists=sort_lists,
    sort_todos=sort_todos,
    todo_class=todo_class,
    todos_count=todos_count,
    todos_remaining_count=todos_remaining_count,
)


def render(request: Request, name: str, session: Session, status_code: int = 200, **context):
    context["success"], session.success = session.success, None
    context["error"], session.error = session.error, None
    return templates.TemplateResponse(request, name, context, status_code=status_code)
