"""
Application configuration.

Values come from the environment (loaded from .env by main.py):
  SESSION_SECRET=change-me
  LOG_LEVEL=DEBUG
"""

import os

DEFAULT_SESSION_SECRET = "secret"

SESSION_SECRET = os.environ.get("SESSION_SECRET", DEFAULT_SESSION_SECRET)
SESSION_COOKIE = os.environ.get("SESSION_COOKIE", "todo_session")
SESSION_MAX_AGE = int(os.environ.get("SESSION_MAX_AGE", str(14 * 24 * 60 * 60)))
SESSION_HTTPS_ONLY = os.environ.get("SESSION_HTTPS_ONLY", "false").lower() in ("1", "true", "yes", "on")
MAX_SESSIONS = max(1, int(os.environ.get("MAX_SESSIONS", "10000")))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

HOST = os.environ.get("HOST", "127.0.0.1")
PORT = int(os.environ.get("PORT", "8000"))
