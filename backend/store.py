"""
In-memory session store shared across all routes.
The signed session cookie only carries an id; the lists live in a dict
ordered from least to most recently used. Sessions idle for longer than the
cookie lifetime are dropped, and the oldest go first once MAX_SESSIONS is hit.
"""

import logging
import time
import uuid
from collections import OrderedDict

from fastapi import Request

import config
from models.session import Session

logger = logging.getLogger(__name__)

SESSION_ID_KEY = "session_id"

sessions: "OrderedDict[str, Session]" = OrderedDict()


def evict_sessions(now: float) -> None:
    """Drops expired sessions, then the least recently used beyond the cap."""
    while sessions:
        session_id, oldest = next(iter(sessions.items()))
        if now - oldest.last_seen <= config.SESSION_MAX_AGE:
            break
        logger.debug("Expiring session %s", session_id)
        del sessions[session_id]

    while len(sessions) > config.MAX_SESSIONS:
        session_id, _ = sessions.popitem(last=False)
        logger.info("Session store full (%d); evicted %s", config.MAX_SESSIONS, session_id)


def get_session(request: Request) -> Session:
    """
    Returns the Session for the requesting client, creating `{lists: []}`
    on the first request (or after the session expired or was evicted).
    """
    now = time.monotonic()
    session_id = request.session.get(SESSION_ID_KEY)
    if not session_id:
        session_id = f"todo_{uuid.uuid4().hex}"
        request.session[SESSION_ID_KEY] = session_id

    session = sessions.get(session_id)
    if session is None or now - session.last_seen > config.SESSION_MAX_AGE:
        logger.debug("Starting session %s", session_id)
        session = Session(session_id=session_id)
        sessions[session_id] = session

    session.last_seen = now
    sessions.move_to_end(session_id)
    evict_sessions(now)
    return session
