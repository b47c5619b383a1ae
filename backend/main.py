from dotenv import load_dotenv
load_dotenv()

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

import config
from routes import lists, items
from views import templates

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s:%(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

if config.SESSION_SECRET == config.DEFAULT_SESSION_SECRET:
    logger.warning("SESSION_SECRET is not set; signing session cookies with the default key")

app = FastAPI(title="Todo Lists", version="0.1.0")

app.add_middleware(
    SessionMiddleware,
    secret_key=config.SESSION_SECRET,
    session_cookie=config.SESSION_COOKIE,
    max_age=config.SESSION_MAX_AGE,
    https_only=config.SESSION_HTTPS_ONLY,
)

app.include_router(lists.router)
app.include_router(items.router)


@app.exception_handler(StarletteHTTPException)
async def not_found_page(request: Request, exc: StarletteHTTPException):
    """Unknown routes and out-of-range list/todo ids get an HTML 404 page."""
    if exc.status_code != 404:
        return await http_exception_handler(request, exc)

    detail = exc.detail if exc.detail != "Not Found" else "The requested page was not found."
    return templates.TemplateResponse(request, "not_found.html", {"detail": detail}, status_code=404)


@app.get("/")
def index():
    return RedirectResponse("/lists", status_code=302)


@app.get("/health")
def health():
    return {"status": "ok", "service": "todo-lists"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.HOST, port=config.PORT)
