"""
FastAPI dependencies.

The service and health monitor are created by `create_app` and stored on
``app.state``; routes reach them through these accessors.
"""
from starlette.requests import Request

from todos.services import TodoService
from todos.workers.health_monitor import HealthMonitor


def get_todo_service(request: Request) -> TodoService:
    return request.app.state.todo_service


def get_health_monitor(request: Request) -> HealthMonitor:
    return request.app.state.health_monitor


def client_address(request: Request) -> str:
    if request.client is None:
        return "unknown"
    return f"{request.client.host}:{request.client.port}"
