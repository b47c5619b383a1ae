import time
from typing import Optional
from pydantic import BaseModel, Field

from models.todo import TodoList


class Session(BaseModel):
    session_id: str
    lists: list[TodoList] = Field(default_factory=list)
    error: Optional[str] = None      # flash, cleared by the next render
    success: Optional[str] = None    # flash, cleared by the next render
    last_seen: float = Field(default_factory=time.monotonic)
