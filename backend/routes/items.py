import logging

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse

import store
from models.session import Session
from models.todo import Todo
from todos.lookup import find_list, find_todo
from todos.validation import error_for_todo_name
from views import render

logger = logging.getLogger(__name__)

router = APIRouter(tags=["todos"])


@router.post("/lists/{list_id}/todos")
async def create_todo(
    list_id: str,
    request: Request,
    todo: str = Form(""),
    session: Session = Depends(store.get_session),
):
    """
    Appends an incomplete todo to the list.
    On a bad name, re-renders the list page with the error shown.
    """
    index, todo_list = find_list(session, list_id)
    text = todo.strip()

    error = error_for_todo_name(text)
    if error:
        logger.info("Rejected todo %r for list %d: %s", text, index, error.kind.value)
        session.error = error.message
        return render(request, "list.html", session, list_id=index, todo_list=todo_list, todo_name=text)

    todo_list.todos.append(Todo(name=text))
    logger.info("Added todo %r to list %d", text, index)
    session.success = "The todo was added."
    return RedirectResponse(f"/lists/{index}", status_code=303)


@router.post("/lists/{list_id}/todos/{todo_id}/destroy")
async def destroy_todo(list_id: str, todo_id: str, session: Session = Depends(store.get_session)):
    index, todo_list = find_list(session, list_id)
    todo_index, todo = find_todo(todo_list, todo_id)
    del todo_list.todos[todo_index]
    logger.info("Deleted todo %d %r from list %d", todo_index, todo.name, index)
    return RedirectResponse(f"/lists/{index}", status_code=303)


@router.post("/lists/{list_id}/todos/{todo_id}/toggle_complete")
async def toggle_complete(list_id: str, todo_id: str, session: Session = Depends(store.get_session)):
    index, todo_list = find_list(session, list_id)
    todo_index, todo = find_todo(todo_list, todo_id)
    todo.completed = not todo.completed
    logger.info("Marked todo %d in list %d as %s", todo_index, index, "complete" if todo.completed else "incomplete")
    session.success = "The todo has been updated."
    return RedirectResponse(f"/lists/{index}", status_code=303)
