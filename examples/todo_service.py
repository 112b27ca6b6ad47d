"""Small todo API assembled from endpoint classes.

Run with::

    uvicorn examples.todo_service:app --reload
"""

from __future__ import annotations

from fastapi import APIRouter, FastAPI, HTTPException
from pydantic import BaseModel
from punq import Container, Scope

from genro_endpoints import EndpointBase, EndpointInterface, add_endpoints, map_endpoints


class Todo(BaseModel):
    id: int
    title: str
    done: bool = False


class TodoStore:
    def __init__(self):
        self._items: dict[int, Todo] = {}

    def add(self, title: str) -> Todo:
        todo = Todo(id=len(self._items) + 1, title=title)
        self._items[todo.id] = todo
        return todo

    def all(self) -> list[Todo]:
        return list(self._items.values())

    def complete(self, todo_id: int) -> Todo:
        todo = self._items.get(todo_id)
        if todo is None:
            raise HTTPException(status_code=404, detail="Todo not found")
        todo.done = True
        return todo


class TodoEndpoint(EndpointBase):
    def __init__(self, store: TodoStore):
        self.store = store

    def handle_endpoint(self, router):
        store = self.store
        todos = APIRouter(prefix="/todos", tags=["todos"])

        @todos.get("")
        def list_todos() -> list[Todo]:
            return store.all()

        @todos.post("", status_code=201)
        def create_todo(title: str) -> Todo:
            return store.add(title)

        @todos.post("/{todo_id}/done")
        def complete_todo(todo_id: int) -> Todo:
            return store.complete(todo_id)

        router.include_router(todos)


class HealthEndpoint(EndpointInterface):
    def handle_endpoint(self, app):
        app.add_api_route("/health", lambda: {"status": "ok"}, methods=["GET"])


container = Container()
container.register(TodoStore, scope=Scope.singleton)
add_endpoints(container, __name__)
add_endpoints(container, __name__, marker=EndpointInterface)

app = FastAPI(title="Todo service")
map_endpoints(app, container)
map_endpoints(app, marker=EndpointInterface)


if __name__ == "__main__":
    from fastapi.testclient import TestClient

    client = TestClient(app)
    client.post("/todos", params={"title": "write docs"})
    client.post("/todos/1/done")
    print(client.get("/todos").json())
    print(client.get("/health").json())
