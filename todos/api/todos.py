"""
Stories and tasks API endpoints.

Thin HTTP bindings over `TodoService`; validation, not-found semantics and
error kinds all come from the service layer.
"""
import logging

from fastapi import APIRouter, Depends, Query, Response, status
from starlette.requests import Request

from todos.api.deps import client_address, get_todo_service
from todos.db import schemas
from todos.services import TodoService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["todos"])


@router.post("/stories", response_model=schemas.Story, status_code=status.HTTP_201_CREATED)
def create_story_endpoint(
    payload: schemas.StoryCreate,
    request: Request,
    service: TodoService = Depends(get_todo_service),
):
    logger.info("Create story request from %s", client_address(request))
    story = service.create_story(payload.name, payload.owner)
    return schemas.Story.from_entity(story)


@router.get("/stories", response_model=schemas.StoryList)
def get_stories_endpoint(
    request: Request,
    owner: str = Query(default=""),
    service: TodoService = Depends(get_todo_service),
):
    logger.info("Get stories request from %s", client_address(request))
    stories = service.get_stories(owner)
    return schemas.StoryList(stories=[schemas.Story.from_entity(s) for s in stories])


@router.delete("/stories/{story_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_story_endpoint(
    story_id: str,
    request: Request,
    service: TodoService = Depends(get_todo_service),
):
    logger.info("Delete story request from %s", client_address(request))
    service.delete_story(story_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/stories/{story_id}/tasks", response_model=schemas.Task, status_code=status.HTTP_201_CREATED)
def create_task_endpoint(
    story_id: str,
    payload: schemas.TaskCreate,
    request: Request,
    service: TodoService = Depends(get_todo_service),
):
    logger.info("Create task request from %s", client_address(request))
    task = service.create_task(story_id, payload.name)
    return schemas.Task.from_entity(task)


@router.get("/stories/{story_id}/tasks", response_model=schemas.TaskList)
def get_tasks_endpoint(
    story_id: str,
    request: Request,
    service: TodoService = Depends(get_todo_service),
):
    logger.info("Get tasks request from %s", client_address(request))
    tasks = service.get_tasks(story_id)
    return schemas.TaskList(tasks=[schemas.Task.from_entity(t) for t in tasks])


@router.get("/tasks/{task_id}", response_model=schemas.Task)
def get_task_endpoint(
    task_id: str,
    request: Request,
    service: TodoService = Depends(get_todo_service),
):
    logger.info("Get task request from %s", client_address(request))
    return schemas.Task.from_entity(service.get_task(task_id))


@router.post("/tasks/{task_id}/complete", status_code=status.HTTP_204_NO_CONTENT)
def complete_task_endpoint(
    task_id: str,
    request: Request,
    service: TodoService = Depends(get_todo_service),
):
    logger.info("Complete task request from %s", client_address(request))
    service.complete_task(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task_endpoint(
    task_id: str,
    request: Request,
    service: TodoService = Depends(get_todo_service),
):
    logger.info("Delete task request from %s", client_address(request))
    service.delete_task(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
