import logging

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

import store
from models.session import Session
from models.todo import TodoList
from todos.lookup import find_list
from todos.validation import error_for_list_name
from views import render

logger = logging.getLogger(__name__)

router = APIRouter(tags=["lists"])


# ---------- Views ----------

@router.get("/lists", response_class=HTMLResponse)
async def show_lists(request: Request, session: Session = Depends(store.get_session)):
    return render(request, "lists.html", session, lists=session.lists)


@router.get("/lists/new", response_class=HTMLResponse)
async def new_list_form(request: Request, session: Session = Depends(store.get_session)):
    return render(request, "new_list.html", session, list_name="")


@router.get("/lists/{list_id}", response_class=HTMLResponse)
async def show_list(list_id: str, request: Request, session: Session = Depends(store.get_session)):
    index, todo_list = find_list(session, list_id)
    return render(request, "list.html", session, list_id=index, todo_list=todo_list, todo_name="")


@router.get("/lists/{list_id}/edit", response_class=HTMLResponse)
async def edit_list_form(list_id: str, request: Request, session: Session = Depends(store.get_session)):
    index, todo_list = find_list(session, list_id)
    return render(request, "edit_list.html", session, list_id=index, todo_list=todo_list, list_name=todo_list.name)


# ---------- Handlers ----------

@router.post("/lists")
async def create_list(
    request: Request,
    list_name: str = Form(""),
    session: Session = Depends(store.get_session),
):
    """
    Creates a list with the submitted name.
    On a bad name, re-renders the form with the submitted value kept.
    """
    list_name = list_name.strip()

    error = error_for_list_name(list_name, session.lists)
    if error:
        logger.info("Rejected new list name %r: %s", list_name, error.kind.value)
        session.error = error.message
        return render(request, "new_list.html", session, list_name=list_name)

    session.lists.append(TodoList(name=list_name))
    logger.info("Created list %r (session %s)", list_name, session.session_id)
    session.success = "The list has been created."
    return RedirectResponse("/lists", status_code=303)


@router.post("/lists/{list_id}")
async def update_list(
    list_id: str,
    request: Request,
    list_name: str = Form(""),
    session: Session = Depends(store.get_session),
):
    """
    Renames a list. The new name is checked against every list, the one
    being renamed included.
    """
    index, todo_list = find_list(session, list_id)
    list_name = list_name.strip()

    error = error_for_list_name(list_name, session.lists)
    if error:
        logger.info("Rejected rename of list %d to %r: %s", index, list_name, error.kind.value)
        session.error = error.message
        return render(request, "edit_list.html", session, list_id=index, todo_list=todo_list, list_name=list_name)

    logger.info("Renamed list %d from %r to %r", index, todo_list.name, list_name)
    todo_list.name = list_name
    session.success = "The list has been updated."
    return RedirectResponse(f"/lists/{index}", status_code=303)


@router.post("/lists/{list_id}/destroy")
async def destroy_list(list_id: str, session: Session = Depends(store.get_session)):
    index, todo_list = find_list(session, list_id)
    del session.lists[index]
    logger.info("Deleted list %d %r", index, todo_list.name)
    session.success = "The list has been deleted."
    return RedirectResponse("/lists", status_code=303)


@router.post("/lists/{list_id}/complete_all")
async def complete_all(list_id: str, session: Session = Depends(store.get_session)):
    index, todo_list = find_list(session, list_id)
    for todo in todo_list.todos:
        todo.completed = True
    logger.info("Completed all %d todos in list %d", len(todo_list.todos), index)
    session.success = "All todos have been completed."
    return RedirectResponse(f"/lists/{index}", status_code=303)
