from pydantic import BaseModel, Field


class Todo(BaseModel):
    name: str
    completed: bool = False


class TodoList(BaseModel):
    name: str
    todos: list[Todo] = Field(default_factory=list)
